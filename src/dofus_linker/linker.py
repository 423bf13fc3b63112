"""
Guide linking: English wiki page title to dofuspourlesnoobs.com guide URLs.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from .config import LinkerConfig
from .content.client import ContentLookupError, DofusDBClient
from .content.models import ContentCategory, PageType
from .slugs.exception_table import ExceptionTable
from .slugs.models import UrlVariants
from .slugs.selector import SelectorRules, VariantSelector
from .slugs.urls import SlugGenerator

logger = logging.getLogger("dofus-linker")


class GuideLink(BaseModel):
    """Guide URLs found for a wiki page."""

    english_name: str = Field(description="Wiki page title the lookup started from")
    french_name: str | None = Field(
        default=None,
        description="French name found on DofusDB, if any",
    )
    category: ContentCategory | None = Field(
        default=None,
        description="DofusDB category the French name came from",
    )
    urls: UrlVariants = Field(description="Primary and fallback guide URLs")
    direct_link: bool = Field(
        default=False,
        description="True when the URLs were guessed from the English name",
    )


class GuideLinker:
    """Finds guide URLs for a wiki page title.

    Looks the English title up on DofusDB, takes the French name of the
    best hit for the page type and builds guide URLs from it. When no
    French name is available the English title itself is slugged as a
    direct-link guess.

    Usage:
        linker = GuideLinker.from_config(load_config())
        link = await linker.find_guide("Wogew the Hewmit", PageType.QUEST)
        link.urls.primary
    """

    def __init__(self, generator: SlugGenerator, client: DofusDBClient) -> None:
        self.generator = generator
        self.client = client

    @classmethod
    def from_config(cls, config: LinkerConfig) -> GuideLinker:
        """Wire a linker from configuration, loading any data overrides."""
        if config.exceptions_path:
            exceptions = ExceptionTable()
            exceptions.load_yaml(config.exceptions_path)
        else:
            exceptions = ExceptionTable.default()

        rules = SelectorRules.from_yaml(config.selector_rules_path) if config.selector_rules_path else None

        generator = SlugGenerator(
            exceptions=exceptions,
            selector=VariantSelector(rules),
            base_url=config.base_url,
            suffix=config.url_suffix,
        )
        client = DofusDBClient(
            api_base_url=config.api_base_url,
            timeout=config.request_timeout,
            max_retries=config.max_retries,
            retry_backoff=config.retry_backoff,
        )
        return cls(generator, client)

    def urls_for(self, french_name: str) -> UrlVariants:
        """Build guide URLs for a name that is already French."""
        return self.generator.generate_url_variants(french_name)

    async def find_guide(
        self, english_name: str, page_type: PageType = PageType.UNKNOWN
    ) -> GuideLink | None:
        """
        Find guide URLs for an English wiki page title.

        Args:
            english_name: Page title as shown on the wiki
            page_type: Kind of page, used to pick which DofusDB category wins

        Returns:
            GuideLink, or None for an empty title
        """
        english_name = english_name.strip()
        if not english_name:
            return None

        french_name = None
        category = None
        try:
            search = await self.client.search(english_name)
            french_name, category = search.french_name(page_type)
        except ContentLookupError as e:
            logger.warning(f"Content lookup failed for '{english_name}': {e}")

        if french_name:
            logger.info(f"'{english_name}' is '{french_name}' ({category.value})")
            return GuideLink(
                english_name=english_name,
                french_name=french_name,
                category=category,
                urls=self.urls_for(french_name),
            )

        logger.info(f"No French name for '{english_name}', guessing a direct link")
        return GuideLink(
            english_name=english_name,
            urls=self.urls_for(english_name),
            direct_link=True,
        )
