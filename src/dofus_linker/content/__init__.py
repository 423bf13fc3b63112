"""
French name lookup through the DofusDB content API.
"""

from .client import ContentLookupError, DofusDBClient
from .models import (
    CATEGORY_SEARCH_ORDER,
    ContentCategory,
    ContentRecord,
    ContentSearchResult,
    LocalizedName,
    PageType,
)

__all__ = [
    "CATEGORY_SEARCH_ORDER",
    "ContentCategory",
    "ContentLookupError",
    "ContentRecord",
    "ContentSearchResult",
    "DofusDBClient",
    "LocalizedName",
    "PageType",
]
