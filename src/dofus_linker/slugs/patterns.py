"""
Apostrophe pattern detection for French guide names.
"""

from .models import ApostrophePattern

# Name prefixes whose guides keep a hyphen after every elided article/pronoun
KEEP_ALL_HYPHEN_PREFIXES = ("on recherche", "on m'appelle")

# Guides mentioning these keep the hyphen after "d'" only
KEEP_D_HYPHEN_MARKERS = ("d'identité", "d'allister")

APPRENTISSAGE_PREFIX = "apprentissage :"

# Dark-themed apprenticeship quests use a double hyphen after the prefix
APPRENTISSAGE_DOUBLE_MARKERS = ("sombre", "douleur", "désespoir")


def detect_apostrophe_pattern(name: str) -> ApostrophePattern:
    """Classify a French name into the apostrophe regime its guide slug follows.

    Checks run in order and the first match wins.

    Args:
        name: French display name (any case)

    Returns:
        The detected ApostrophePattern

    Example:
        >>> detect_apostrophe_pattern("On recherche Ka'Youloud")
        <ApostrophePattern.KEEP_ALL_HYPHENS: 'keep-all-hyphens'>
        >>> detect_apostrophe_pattern("Le Mort dans l'Âme")
        <ApostrophePattern.STANDARD: 'standard'>
    """
    lower = name.lower()

    if lower.startswith(KEEP_ALL_HYPHEN_PREFIXES):
        return ApostrophePattern.KEEP_ALL_HYPHENS

    if any(marker in lower for marker in KEEP_D_HYPHEN_MARKERS):
        return ApostrophePattern.KEEP_D_HYPHEN_ONLY

    if lower.startswith(APPRENTISSAGE_PREFIX) and any(
        marker in lower for marker in APPRENTISSAGE_DOUBLE_MARKERS
    ):
        return ApostrophePattern.APPRENTISSAGE_DOUBLE

    return ApostrophePattern.STANDARD
