"""
Data models for guide slug generation.
"""

from enum import Enum

from pydantic import BaseModel, Field


class ApostrophePattern(str, Enum):
    """Apostrophe-handling regime detected from a French name."""
    KEEP_ALL_HYPHENS = "keep-all-hyphens"
    KEEP_D_HYPHEN_ONLY = "keep-d-hyphen"
    APPRENTISSAGE_DOUBLE = "apprentissage-double"
    STANDARD = "standard"


class SlugVariant(str, Enum):
    """How accented letters are written in a guide slug."""
    NORMALIZED = "normalized"
    ENTITY = "entity"


class ExceptionEntry(BaseModel):
    """A hardcoded name → slug pair for guides the heuristic gets wrong.

    Attributes:
        name: French display name (lowercased when loaded into a table)
        slug: Exact slug used on the guide site
    """
    name: str = Field(..., description="French display name")
    slug: str = Field(..., description="Exact guide slug")


class UrlVariants(BaseModel):
    """Primary and fallback guide URLs for one French name."""

    primary: str = Field(description="URL to try first")
    fallback: str = Field(description="URL to try when the primary one is wrong")
    name: str | None = Field(default=None, description="French name the URLs were built from")
    exception_hit: bool = Field(
        default=False,
        description="True when the slug came from the exception table",
    )


class SlugReport(BaseModel):
    """Breakdown of every decision made while building guide URLs for a name."""

    name: str = Field(description="French name as given")
    pattern: ApostrophePattern = Field(description="Detected apostrophe pattern")
    normalized_slug: str = Field(description="Slug with accents folded to ASCII")
    entity_slug: str = Field(description="Slug with accents spelled as entity names")
    exception_slug: str | None = Field(
        default=None,
        description="Slug from the exception table, if the name is listed",
    )
    preferred: SlugVariant = Field(description="Variant used for the primary URL")
    urls: UrlVariants = Field(description="Final URL pair")
