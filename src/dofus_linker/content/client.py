"""
DofusDB API client for looking up French names of game entities.

Searches every content category for an English name concurrently. A failing
category is logged and skipped so one broken endpoint never hides hits from
the others.
"""

import asyncio
import logging
from typing import Any, Iterable

import httpx

from .models import ContentCategory, ContentRecord, ContentSearchResult, DEFAULT_SEARCH_ORDER


logger = logging.getLogger("dofus-linker")


# API Configuration
DOFUSDB_API_BASE = "https://api.dofusdb.fr"
DEFAULT_TIMEOUT = 10.0
MAX_RETRIES = 3
RETRY_BACKOFF = 2.0


class ContentLookupError(Exception):
    """Raised when DofusDB can't be queried.

    Carries a user-facing message explaining what went wrong.
    """


class DofusDBClient:
    """
    Async client for the DofusDB search API.

    Features:
    - Queries all content categories in parallel
    - Retries timeouts, rate limiting (429) and server errors with backoff
    - Tolerates individual category failures
    """

    def __init__(
        self,
        api_base_url: str = DOFUSDB_API_BASE,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = MAX_RETRIES,
        retry_backoff: float = RETRY_BACKOFF,
    ):
        """
        Initialize the client.

        Args:
            api_base_url: DofusDB API origin, without trailing slash
            timeout: Per-request timeout in seconds
            max_retries: Attempts per request before giving up
            retry_backoff: Base of the exponential wait between attempts
        """
        self.api_base_url = api_base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_backoff = retry_backoff

    async def search(
        self,
        english_name: str,
        categories: Iterable[ContentCategory] = DEFAULT_SEARCH_ORDER,
    ) -> ContentSearchResult:
        """
        Search each category for entities with the given English name.

        Args:
            english_name: English display name (e.g. a wiki page title)
            categories: Categories to query

        Returns:
            Hits per category; failed categories are listed in ``failed``

        Raises:
            ContentLookupError: If every category request failed
        """
        categories = list(categories)
        logger.debug(f"Searching DofusDB for '{english_name}' in {len(categories)} categories")

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            outcomes = await asyncio.gather(
                *(self._search_category(client, category, english_name) for category in categories),
                return_exceptions=True,
            )

        result = ContentSearchResult(query=english_name)
        last_error: BaseException | None = None

        for category, outcome in zip(categories, outcomes):
            if isinstance(outcome, BaseException):
                logger.warning(f"DofusDB {category.value} search failed for '{english_name}': {outcome}")
                result.failed.append(category)
                last_error = outcome
            elif outcome:
                result.results[category] = outcome
                logger.debug(f"Found {category.value}: {outcome[0].name.fr or outcome[0].name.en}")

        if categories and len(result.failed) == len(categories):
            logger.error(f"All DofusDB searches failed for '{english_name}'")
            raise ContentLookupError(
                f"DofusDB is not responding, could not look up '{english_name}': {last_error}"
            )

        return result

    async def _search_category(
        self,
        client: httpx.AsyncClient,
        category: ContentCategory,
        english_name: str,
    ) -> list[ContentRecord]:
        """Fetch and parse search hits for one category."""
        url = f"{self.api_base_url}/{category.value}"
        data = await self._fetch(client, url, {"name.en": english_name})

        if not isinstance(data, dict):
            raise ContentLookupError(f"Invalid response from DofusDB {category.value}: expected JSON object")

        return [ContentRecord(**record) for record in data.get("data") or []]

    async def _fetch(self, client: httpx.AsyncClient, url: str, params: dict[str, str]) -> Any:
        """
        Fetch a URL with retry logic.

        Raises:
            ContentLookupError: On client errors, connection errors, or after
                exhausting retries
        """
        last_error: Exception | None = None

        for attempt in range(self.max_retries):
            try:
                response = await client.get(url, params=params)

                if response.status_code == 429:
                    wait = self.retry_backoff ** attempt
                    logger.warning(f"Rate limited by DofusDB, waiting {wait}s")
                    last_error = ContentLookupError("rate limited")
                    await asyncio.sleep(wait)
                    continue

                response.raise_for_status()
                return response.json()

            except httpx.TimeoutException as e:
                logger.warning(f"Timeout fetching {url}, attempt {attempt + 1}")
                last_error = e
                await asyncio.sleep(self.retry_backoff ** attempt)

            except httpx.HTTPStatusError as e:
                if e.response.status_code >= 500:
                    logger.warning(f"Server error {e.response.status_code}, attempt {attempt + 1}")
                    last_error = e
                    await asyncio.sleep(self.retry_backoff ** attempt)
                else:
                    raise ContentLookupError(
                        f"DofusDB returned HTTP {e.response.status_code} for {url}"
                    ) from e

            except httpx.RequestError as e:
                raise ContentLookupError(f"Failed to connect to DofusDB: {e}") from e

        raise ContentLookupError(f"Failed to fetch {url} after {self.max_retries} retries: {last_error}")
