"""
Hardcoded slug exceptions with O(1) case-insensitive lookup.
"""

import logging
from pathlib import Path

import yaml

from .models import ExceptionEntry

logger = logging.getLogger("dofus-linker")

DEFAULT_EXCEPTIONS_PATH = Path(__file__).resolve().parent.parent / "data" / "url_exceptions.yaml"


class ExceptionTable:
    """Maps lowercased French names to the exact slug used by the guide site.

    The table takes priority over every slug heuristic: when a name is
    listed, its slug is used verbatim for both the primary and the fallback
    URL.

    Example:
        >>> table = ExceptionTable.default()
        >>> table.lookup("Sram d'Égoutant")
        'sram-d-egoutant'
        >>> table.lookup("Unknown quest") is None
        True
    """

    def __init__(self) -> None:
        """Initialize an empty table."""
        self._lookup: dict[str, str] = {}
        self._duplicates: list[tuple[str, str, str]] = []

    @classmethod
    def default(cls) -> "ExceptionTable":
        """Build a table from the exception list bundled with the package."""
        table = cls()
        table.load_yaml(DEFAULT_EXCEPTIONS_PATH)
        return table

    @classmethod
    def from_mapping(cls, mapping: dict[str, str]) -> "ExceptionTable":
        """Build a table from a plain ``{name: slug}`` dictionary."""
        table = cls()
        for name, slug in mapping.items():
            table.add(ExceptionEntry(name=name, slug=slug))
        return table

    def load_yaml(self, path: Path) -> None:
        """Load exception entries from a YAML file.

        Expected YAML format:
            exceptions:
              - name: "sram d'égoutant"
                slug: "sram-d-egoutant"

        Existing entries are discarded first.

        Args:
            path: Path to YAML file

        Raises:
            FileNotFoundError: If the YAML file doesn't exist
            yaml.YAMLError: If the YAML is malformed
            ValueError: If the 'exceptions' key or an entry field is missing
        """
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not data or "exceptions" not in data:
            raise ValueError("YAML file must contain an 'exceptions' key")

        self._lookup.clear()
        self._duplicates.clear()

        for entry_data in data["exceptions"] or []:
            self.add(ExceptionEntry(**entry_data))

        logger.info(f"Loaded {len(self._lookup)} slug exceptions from {path}")

    def add(self, entry: ExceptionEntry) -> None:
        """Add one entry, replacing (and reporting) any previous slug for the same name."""
        key = entry.name.lower()
        previous = self._lookup.get(key)
        if previous is not None and previous != entry.slug:
            logger.warning(
                f"Duplicate slug exception for '{key}': '{previous}' replaced by '{entry.slug}'"
            )
            self._duplicates.append((key, previous, entry.slug))
        self._lookup[key] = entry.slug

    def lookup(self, name: str) -> str | None:
        """Return the known slug for a name, or None if it isn't listed."""
        return self._lookup.get(name.lower())

    @property
    def duplicates(self) -> list[tuple[str, str, str]]:
        """Conflicting entries seen while loading, as (name, replaced slug, kept slug)."""
        return list(self._duplicates)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._lookup

    def __len__(self) -> int:
        return len(self._lookup)
