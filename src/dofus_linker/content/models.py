"""
Content categories, page types and DofusDB API records.
"""

from enum import Enum

from pydantic import BaseModel, Field


class ContentCategory(str, Enum):
    """DofusDB endpoint names, one per kind of game entity."""
    QUESTS = "quests"
    ITEMS = "items"
    MONSTERS = "monsters"
    SUBAREAS = "subareas"
    AREAS = "areas"
    DUNGEONS = "dungeons"
    ACHIEVEMENTS = "achievements"
    EQUIPMENTS = "equipments"
    SPELLS = "spells"


class PageType(str, Enum):
    """Kind of wiki page a title was scraped from."""
    QUEST = "quest"
    ITEM = "item"
    MONSTER = "monster"
    AREA = "area"
    DUNGEON = "dungeon"
    ACHIEVEMENT = "achievement"
    EQUIPMENT = "equipment"
    SPELL = "spell"
    UNKNOWN = "unknown"


DEFAULT_SEARCH_ORDER: tuple[ContentCategory, ...] = tuple(ContentCategory)

# Categories checked first for each page type; the rest follow in default order
_PAGE_TYPE_CATEGORIES: dict[PageType, tuple[ContentCategory, ...]] = {
    PageType.QUEST: (ContentCategory.QUESTS,),
    PageType.ITEM: (ContentCategory.ITEMS, ContentCategory.EQUIPMENTS),
    PageType.MONSTER: (ContentCategory.MONSTERS,),
    PageType.AREA: (ContentCategory.SUBAREAS, ContentCategory.AREAS),
    PageType.DUNGEON: (ContentCategory.DUNGEONS,),
    PageType.ACHIEVEMENT: (ContentCategory.ACHIEVEMENTS,),
    PageType.EQUIPMENT: (ContentCategory.EQUIPMENTS, ContentCategory.ITEMS),
    PageType.SPELL: (ContentCategory.SPELLS,),
    PageType.UNKNOWN: (),
}

CATEGORY_SEARCH_ORDER: dict[PageType, tuple[ContentCategory, ...]] = {
    page_type: first + tuple(c for c in DEFAULT_SEARCH_ORDER if c not in first)
    for page_type, first in _PAGE_TYPE_CATEGORIES.items()
}


class LocalizedName(BaseModel):
    """Entity name in the languages DofusDB provides."""
    fr: str | None = None
    en: str | None = None


class ContentRecord(BaseModel):
    """A single DofusDB search hit."""
    id: int | None = None
    name: LocalizedName = Field(default_factory=LocalizedName)


class ContentSearchResult(BaseModel):
    """Search hits per category for one English name.

    Categories with no hits, or whose request failed, are absent.
    """

    query: str = Field(description="English name that was searched")
    results: dict[ContentCategory, list[ContentRecord]] = Field(default_factory=dict)
    failed: list[ContentCategory] = Field(
        default_factory=list,
        description="Categories whose request failed",
    )

    def french_name(
        self, page_type: PageType = PageType.UNKNOWN
    ) -> tuple[str, ContentCategory] | tuple[None, None]:
        """Return the first French name in the page type's search order, with its category."""
        for category in CATEGORY_SEARCH_ORDER[page_type]:
            for record in self.results.get(category, [])[:1]:
                if record.name.fr:
                    return record.name.fr, category
        return None, None
