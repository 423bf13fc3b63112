"""
Guide URL assembly: exception table, slug variants and primary/fallback choice.
"""

import logging

from .builder import entity_slug, normalized_slug
from .exception_table import ExceptionTable
from .models import SlugReport, SlugVariant, UrlVariants
from .patterns import detect_apostrophe_pattern
from .selector import VariantSelector

logger = logging.getLogger("dofus-linker")

GUIDE_BASE_URL = "https://www.dofuspourlesnoobs.com"
GUIDE_URL_SUFFIX = ".html"


def build_guide_url(slug: str, base_url: str = GUIDE_BASE_URL, suffix: str = GUIDE_URL_SUFFIX) -> str:
    """Join base URL, slug and suffix. The slug is expected to be URL-safe already."""
    return f"{base_url}/{slug}{suffix}"


class SlugGenerator:
    """Turns a French display name into primary and fallback guide URLs.

    Lookup order:
    1. Exception table (exact slug, primary == fallback)
    2. Heuristic slugs, ordered by the variant selector

    Stateless after construction; safe to share between threads and tasks.

    Example:
        >>> generator = SlugGenerator()
        >>> urls = generator.generate_url_variants("Épreuve du Zobal")
        >>> urls.primary
        'https://www.dofuspourlesnoobs.com/eacutepreuve-du-zobal.html'
        >>> urls.fallback
        'https://www.dofuspourlesnoobs.com/epreuve-du-zobal.html'
    """

    def __init__(
        self,
        exceptions: ExceptionTable | None = None,
        selector: VariantSelector | None = None,
        base_url: str = GUIDE_BASE_URL,
        suffix: str = GUIDE_URL_SUFFIX,
    ) -> None:
        self.exceptions = exceptions if exceptions is not None else ExceptionTable.default()
        self.selector = selector or VariantSelector()
        self.base_url = base_url
        self.suffix = suffix

    def url_for(self, slug: str) -> str:
        return build_guide_url(slug, self.base_url, self.suffix)

    def generate_url_variants(self, name: str) -> UrlVariants:
        """Build the primary and fallback guide URLs for a French name."""
        known = self.exceptions.lookup(name)
        if known is not None:
            url = self.url_for(known)
            logger.debug(f"Exception table hit for '{name}': {known}")
            return UrlVariants(primary=url, fallback=url, name=name, exception_hit=True)

        pattern = detect_apostrophe_pattern(name)
        normalized_url = self.url_for(normalized_slug(name, pattern))
        entity_url = self.url_for(entity_slug(name, pattern))

        if self.selector.prefer_entity(name):
            primary, fallback = entity_url, normalized_url
        else:
            primary, fallback = normalized_url, entity_url

        logger.debug(f"Guide URLs for '{name}' ({pattern.value}): {primary} | {fallback}")
        return UrlVariants(primary=primary, fallback=fallback, name=name)

    def explain(self, name: str) -> SlugReport:
        """Report every intermediate decision for a name."""
        pattern = detect_apostrophe_pattern(name)
        preferred = SlugVariant.ENTITY if self.selector.prefer_entity(name) else SlugVariant.NORMALIZED
        return SlugReport(
            name=name,
            pattern=pattern,
            normalized_slug=normalized_slug(name, pattern),
            entity_slug=entity_slug(name, pattern),
            exception_slug=self.exceptions.lookup(name),
            preferred=preferred,
            urls=self.generate_url_variants(name),
        )
