"""
Slug construction for guide URLs.

The guide site is inconsistent about accented letters: some pages fold them
to plain ASCII ("normalized" slugs) while others spell them out as HTML
entity names ("entity" slugs, é -> "eacute"). Both variants share the same
punctuation and apostrophe handling up to the accent step, then go through
the same finalizer.
"""

import re

from .models import ApostrophePattern, SlugVariant
from .patterns import detect_apostrophe_pattern


# =============================================================================
# Accent tables
# =============================================================================

ACCENT_FOLDS: dict[str, str] = {
    "à": "a", "â": "a", "ä": "a",
    "é": "e", "è": "e", "ê": "e", "ë": "e",
    "î": "i", "ï": "i",
    "ô": "o", "ö": "o",
    "ù": "u", "û": "u", "ü": "u",
    "ç": "c",
    "œ": "oe",
}

ACCENT_ENTITIES: dict[str, str] = {
    "à": "agrave", "â": "acirc", "ä": "auml",
    "é": "eacute", "è": "egrave", "ê": "ecirc", "ë": "euml",
    "î": "icirc", "ï": "iuml",
    "ô": "ocirc", "ö": "ouml",
    "ù": "ugrave", "û": "ucirc", "ü": "uuml",
    "ç": "ccedil",
    "œ": "oelig",
}


def _translation_table(mapping: dict[str, str]) -> dict[int, str]:
    table = {}
    for letter, replacement in mapping.items():
        table[ord(letter)] = replacement
        table[ord(letter.upper())] = replacement
    return table


_FOLD_TABLE = _translation_table(ACCENT_FOLDS)
_ENTITY_TABLE = _translation_table(ACCENT_ENTITIES)


def fold_accents(text: str) -> str:
    """Replace accented letters with their unaccented ASCII counterparts."""
    return text.translate(_FOLD_TABLE)


def encode_entities(text: str) -> str:
    """Replace accented letters with their HTML entity names (without & and ;)."""
    return text.translate(_ENTITY_TABLE)


# =============================================================================
# Apostrophe rules
# =============================================================================

def _rules(*pairs: tuple[str, str]) -> list[tuple[re.Pattern[str], str]]:
    # ASCII word boundaries: accented letters count as separators
    return [(re.compile(pattern, re.ASCII), repl) for pattern, repl in pairs]


# Fixed idioms written without apostrophe or hyphen in every regime
_IDIOMS = (
    (r"\bc'est\b", "cest"),
    (r"\bp'ti\b", "pti"),
)

# Elided "l'" handling shared by the d-hyphen and standard regimes
_ARTICLE_L = (
    (r"^l'", "l-"),
    (r" de l'", " de l-"),
    (r" à l'", " a l-"),
    (r" l'", " l"),
)

APOSTROPHE_RULES: dict[ApostrophePattern, list[tuple[re.Pattern[str], str]]] = {
    ApostrophePattern.KEEP_ALL_HYPHENS: _rules(
        *_IDIOMS,
        (r"l'", "l-"),
        (r"d'", "d-"),
        (r"m'", "m-"),
        (r"n'", "n-"),
        (r"'", ""),
    ),
    ApostrophePattern.KEEP_D_HYPHEN_ONLY: _rules(
        *_IDIOMS,
        *_ARTICLE_L,
        (r"d'", "d-"),
        (r"n'", "n"),
        (r"'", ""),
    ),
    ApostrophePattern.STANDARD: _rules(
        *_IDIOMS,
        *_ARTICLE_L,
        (r"\bd'", "d"),
        (r"n'", "n"),
        (r"'", ""),
    ),
}
APOSTROPHE_RULES[ApostrophePattern.APPRENTISSAGE_DOUBLE] = APOSTROPHE_RULES[ApostrophePattern.STANDARD]

# Entity slugs never keep a hyphen after an elided letter
ENTITY_APOSTROPHE_RULES = _rules(
    *_IDIOMS,
    (r"l'", "l"),
    (r"\bd'", "d"),
    (r"n'", "n"),
    (r"'", ""),
)

_APPRENTISSAGE = re.compile(r"^apprentissage : ")


def _apply(rules: list[tuple[re.Pattern[str], str]], text: str) -> str:
    for pattern, repl in rules:
        text = pattern.sub(repl, text)
    return text


def _strip_punctuation(text: str, pattern: ApostrophePattern) -> str:
    """Lowercase and handle commas, exclamation marks and colons."""
    result = text.lower().replace(",", "").replace("!", "")

    if pattern is ApostrophePattern.APPRENTISSAGE_DOUBLE:
        result = _APPRENTISSAGE.sub("apprentissage--", result, count=1)
    else:
        result = _APPRENTISSAGE.sub("apprentissage-", result, count=1)

    return result.replace(" : ", "--").replace(":", "-")


def base_normalized(name: str, pattern: ApostrophePattern | None = None) -> str:
    """Apply the pre-accent steps of a normalized slug.

    Args:
        name: French display name
        pattern: Apostrophe pattern; detected from the name when omitted

    Returns:
        Lowercased text with punctuation and apostrophes rewritten, accents untouched
    """
    if pattern is None:
        pattern = detect_apostrophe_pattern(name)
    result = _strip_punctuation(name, pattern)
    return _apply(APOSTROPHE_RULES[pattern], result)


def base_entity(name: str, pattern: ApostrophePattern | None = None) -> str:
    """Apply the pre-accent steps of an entity slug.

    The pattern only affects the apprenticeship prefix here; apostrophes
    are always dropped without a hyphen.
    """
    if pattern is None:
        pattern = detect_apostrophe_pattern(name)
    result = _strip_punctuation(name, pattern)
    return _apply(ENTITY_APOSTROPHE_RULES, result)


# =============================================================================
# Finalizer
# =============================================================================

_DISALLOWED = re.compile(r"[^a-z0-9\s-]+")
_WHITESPACE = re.compile(r"\s+")
_HYPHEN_RUN = re.compile(r"-{3,}")


def finalize_slug(text: str) -> str:
    """Reduce text to a URL-safe slug.

    Question marks become spaces, every character other than lowercase
    ASCII letters, digits, whitespace and hyphens is dropped, a gap of
    exactly three spaces becomes a double hyphen, other whitespace runs
    become one hyphen, hyphen runs are capped at two and edge hyphens are
    trimmed.

    Example:
        >>> finalize_slug("où est passée la 7e compagnie ?")
        'o-est-passe-la-7e-compagnie'
        >>> finalize_slug("---epreuve---")
        'epreuve'
    """
    result = text.replace("?", " ")
    result = _DISALLOWED.sub("", result)
    result = result.replace("   ", "--")
    result = _WHITESPACE.sub("-", result)
    result = _HYPHEN_RUN.sub("--", result)
    return result.strip("-")


# =============================================================================
# Slug variants
# =============================================================================

def normalized_slug(name: str, pattern: ApostrophePattern | None = None) -> str:
    """Build the slug with accented letters folded to plain ASCII.

    Example:
        >>> normalized_slug("Épreuve du Zobal")
        'epreuve-du-zobal'
    """
    return finalize_slug(fold_accents(base_normalized(name, pattern)))


def entity_slug(name: str, pattern: ApostrophePattern | None = None) -> str:
    """Build the slug with accented letters spelled as entity names.

    Example:
        >>> entity_slug("Épreuve du Zobal")
        'eacutepreuve-du-zobal'
    """
    return finalize_slug(encode_entities(base_entity(name, pattern)))


def build_slug(name: str, variant: SlugVariant, pattern: ApostrophePattern | None = None) -> str:
    """Build the requested slug variant for a name."""
    if variant is SlugVariant.ENTITY:
        return entity_slug(name, pattern)
    return normalized_slug(name, pattern)
