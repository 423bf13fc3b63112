"""
Heuristic choice between normalized and entity slugs.

Neither slug variant is right for every guide page. The rules below decide
which one to try first; the other becomes the fallback. The exception
regexes were collected by checking generated URLs against the live site and
are kept as data so new cases can be added without touching the rule order.
"""

import logging
import re
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger("dofus-linker")


class SelectorRules(BaseModel):
    """Rule data for VariantSelector.

    Attributes:
        rare_letters: Letters that always force an entity slug
        accented_letters: Letters counted for the accent rules
        multi_accent_exceptions: Regexes for names with several accent types
            whose guide nonetheless uses a normalized slug
        single_accent_exceptions: Regexes for names with a single é/è whose
            guide uses a normalized slug
        accent_pairs: Letter pairs that force an entity slug when both appear
        entity_markers: Substrings of the lowercased name that force an entity slug
        spaced_punctuation: Regex for "?"/"!" next to whitespace
    """
    rare_letters: list[str] = Field(default_factory=lambda: ["î", "ï"])
    accented_letters: str = Field(default="àâäéèêëïîôöùûüç")
    multi_accent_exceptions: list[str] = Field(
        default_factory=lambda: [
            r"^la croisi[èe]re",
            r"r[ée]colte l'",
            r"pictopublic[ée]phile",
            r"po[êe]lon",
        ]
    )
    single_accent_exceptions: list[str] = Field(
        default_factory=lambda: [
            r"\bd'[éè]",
            r"^f[ée]e d'",
            r"^l[ée]gende d'",
            r"^tourn[ée]e d'",
            r"^pr[ée]sence d'",
        ]
    )
    accent_pairs: list[tuple[str, str]] = Field(
        default_factory=lambda: [("à", "é"), ("è", "ê"), ("â", "ä")]
    )
    entity_markers: list[str] = Field(
        default_factory=lambda: ["kwismas", "énigme", "épreuve"]
    )
    spaced_punctuation: str = Field(default=r"\s[?!]|[?!]\s")

    @field_validator("multi_accent_exceptions", "single_accent_exceptions")
    @classmethod
    def validate_patterns(cls, v: list[str]) -> list[str]:
        """Ensure every exception is a valid regex."""
        for pattern in v:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"invalid exception regex '{pattern}': {e}") from e
        return v

    @field_validator("rare_letters", "entity_markers")
    @classmethod
    def lowercase_letters(cls, v: list[str]) -> list[str]:
        return [item.lower() for item in v]

    @classmethod
    def from_yaml(cls, path: Path) -> "SelectorRules":
        """Load rule overrides from YAML; fields not present keep their defaults.

        Raises:
            FileNotFoundError: If the YAML file doesn't exist
            yaml.YAMLError: If the YAML is malformed
            pydantic.ValidationError: If a field has the wrong shape
        """
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)


class VariantSelector:
    """Decides whether a name's guide most likely uses the entity slug.

    Rules are evaluated in order and the first one that applies decides:

    1. a rare letter (î, ï) is present -> entity
    2. two or more accents of two or more kinds -> entity, unless a
       multi-accent exception matches -> normalized
    3. exactly one accent and it is é or è -> entity, unless a
       single-accent exception matches -> normalized
    4. one of the accent pairs is present -> entity
    5. an entity marker substring is present -> entity
    6. "?" or "!" next to whitespace -> entity
    7. otherwise -> normalized
    """

    def __init__(self, rules: SelectorRules | None = None) -> None:
        self.rules = rules or SelectorRules()
        self._multi_exceptions = [
            re.compile(p, re.IGNORECASE) for p in self.rules.multi_accent_exceptions
        ]
        self._single_exceptions = [
            re.compile(p, re.IGNORECASE) for p in self.rules.single_accent_exceptions
        ]
        self._spaced_punctuation = re.compile(self.rules.spaced_punctuation)

    def prefer_entity(self, name: str) -> bool:
        """Return True when the entity slug should be the primary guess."""
        lower = name.lower()

        if any(letter in lower for letter in self.rules.rare_letters):
            return True

        accents = [c for c in lower if c in self.rules.accented_letters]
        kinds = set(accents)

        if len(accents) >= 2 and len(kinds) >= 2:
            if self._matches(self._multi_exceptions, name):
                logger.debug(f"Multi-accent exception matched for '{name}'")
                return False
            return True

        if len(accents) == 1 and accents[0] in ("é", "è"):
            if self._matches(self._single_exceptions, name):
                logger.debug(f"Single-accent exception matched for '{name}'")
                return False
            return True

        for first, second in self.rules.accent_pairs:
            if first in lower and second in lower:
                return True

        if any(marker in lower for marker in self.rules.entity_markers):
            return True

        if self._spaced_punctuation.search(name):
            return True

        return False

    @staticmethod
    def _matches(patterns: list[re.Pattern[str]], name: str) -> bool:
        return any(p.search(name) for p in patterns)


_default_selector = VariantSelector()


def analyze_url_requirements(name: str) -> bool:
    """Return True when the entity slug should be tried first, using the default rules."""
    return _default_selector.prefer_entity(name)
