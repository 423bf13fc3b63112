"""
Tests for the guide linker and the MCP tools built on it.

The DofusDB client is replaced with a mock whose ``search`` returns canned
results, so no network access is needed.
"""

import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
import yaml

from dofus_linker.config import LinkerConfig
from dofus_linker.content import (
    ContentCategory,
    ContentLookupError,
    ContentRecord,
    ContentSearchResult,
    LocalizedName,
    PageType,
)
from dofus_linker.linker import GuideLink, GuideLinker
from dofus_linker.slugs import SlugGenerator

BASE = "https://www.dofuspourlesnoobs.com"


# ─── Helpers ───────────────────────────────────────────────────────────


def make_result(query: str, **names: str) -> ContentSearchResult:
    """Build a search result with one record per category keyword."""
    return ContentSearchResult(
        query=query,
        results={
            ContentCategory(category): [ContentRecord(id=1, name=LocalizedName(fr=fr, en=query))]
            for category, fr in names.items()
        },
    )


def make_linker(generator: SlugGenerator, search: AsyncMock) -> GuideLinker:
    client = MagicMock()
    client.search = search
    return GuideLinker(generator, client)


def tool_fn(tool):
    """Return the plain function behind a registered MCP tool."""
    return getattr(tool, "fn", tool)


# ─── find_guide ────────────────────────────────────────────────────────


class TestFindGuide:

    @pytest.mark.asyncio
    async def test_french_name_found(self, generator: SlugGenerator) -> None:
        search = AsyncMock(return_value=make_result("Wogew the Hewmit", quests="Wogew l'Hewmite"))
        linker = make_linker(generator, search)

        link = await linker.find_guide("Wogew the Hewmit", PageType.QUEST)

        assert isinstance(link, GuideLink)
        assert link.french_name == "Wogew l'Hewmite"
        assert link.category == ContentCategory.QUESTS
        assert link.direct_link is False
        assert link.urls.primary == f"{BASE}/wogew-l-hewmite.html"
        assert link.urls.exception_hit is True
        search.assert_awaited_once_with("Wogew the Hewmit")

    @pytest.mark.asyncio
    async def test_page_type_picks_category(self, generator: SlugGenerator) -> None:
        search = AsyncMock(return_value=make_result(
            "Gobball", quests="Le Bouftou royal", monsters="Bouftou",
        ))
        linker = make_linker(generator, search)

        link = await linker.find_guide("Gobball", PageType.MONSTER)

        assert link.french_name == "Bouftou"
        assert link.category == ContentCategory.MONSTERS
        assert link.urls.primary == f"{BASE}/bouftou.html"

    @pytest.mark.asyncio
    async def test_entity_variant_tried_first(self, generator: SlugGenerator) -> None:
        search = AsyncMock(return_value=make_result("Zobal Trial", quests="Épreuve du Zobal"))
        linker = make_linker(generator, search)

        link = await linker.find_guide("Zobal Trial")

        assert link.urls.primary == f"{BASE}/eacutepreuve-du-zobal.html"
        assert link.urls.fallback == f"{BASE}/epreuve-du-zobal.html"

    @pytest.mark.asyncio
    async def test_no_hits_gives_direct_link(self, generator: SlugGenerator) -> None:
        search = AsyncMock(return_value=ContentSearchResult(query="Wogew the Hewmit"))
        linker = make_linker(generator, search)

        link = await linker.find_guide("Wogew the Hewmit")

        assert link.direct_link is True
        assert link.french_name is None
        assert link.category is None
        assert link.urls.primary == f"{BASE}/wogew-the-hewmit.html"

    @pytest.mark.asyncio
    async def test_lookup_error_gives_direct_link(self, generator: SlugGenerator, caplog) -> None:
        search = AsyncMock(side_effect=ContentLookupError("DofusDB is not responding"))
        linker = make_linker(generator, search)

        link = await linker.find_guide("  Wogew the Hewmit  ")

        assert link.direct_link is True
        assert link.english_name == "Wogew the Hewmit"
        assert link.urls.primary == f"{BASE}/wogew-the-hewmit.html"
        assert "Content lookup failed" in caplog.text

    @pytest.mark.asyncio
    @pytest.mark.parametrize("title", ["", "   "])
    async def test_empty_title(self, generator: SlugGenerator, title: str) -> None:
        search = AsyncMock()
        linker = make_linker(generator, search)

        assert await linker.find_guide(title) is None
        search.assert_not_awaited()


class TestUrlsFor:

    def test_matches_generator(self, generator: SlugGenerator) -> None:
        linker = make_linker(generator, AsyncMock())
        name = "La Forêt de l'Oubli"
        assert linker.urls_for(name) == generator.generate_url_variants(name)


# ─── from_config ───────────────────────────────────────────────────────


class TestFromConfig:

    def test_defaults(self) -> None:
        linker = GuideLinker.from_config(LinkerConfig())
        assert len(linker.generator.exceptions) == 163
        assert linker.client.api_base_url == "https://api.dofusdb.fr"
        assert linker.urls_for("Le Dragon Cochon").primary == f"{BASE}/le-dragon-cochon.html"

    def test_overrides(self, tmp_path: Path) -> None:
        exceptions = tmp_path / "exceptions.yaml"
        exceptions.write_text(
            yaml.dump({"exceptions": [{"name": "Le Dragon Cochon", "slug": "dragon-cochon"}]}),
            encoding="utf-8",
        )
        rules = tmp_path / "rules.yaml"
        rules.write_text(yaml.dump({"entity_markers": ["cochon"]}), encoding="utf-8")

        config = LinkerConfig(
            base_url="https://mirror.example/",
            url_suffix=".htm",
            request_timeout=2.5,
            max_retries=5,
            exceptions_path=exceptions,
            selector_rules_path=rules,
        )
        linker = GuideLinker.from_config(config)

        assert len(linker.generator.exceptions) == 1
        assert linker.urls_for("Le Dragon Cochon").primary == "https://mirror.example/dragon-cochon.htm"
        assert linker.generator.selector.prefer_entity("Cochon d'Inde") is True
        assert linker.client.timeout == 2.5
        assert linker.client.max_retries == 5


# ─── MCP tools ─────────────────────────────────────────────────────────


class TestTools:

    @pytest.fixture
    def main_module(self):
        from dofus_linker import main as m
        return m

    def test_guide_urls(self, main_module) -> None:
        result = json.loads(tool_fn(main_module.guide_urls)("Épreuve du Zobal"))
        assert result["primary"] == f"{BASE}/eacutepreuve-du-zobal.html"
        assert result["fallback"] == f"{BASE}/epreuve-du-zobal.html"

    def test_explain_slug(self, main_module) -> None:
        result = json.loads(tool_fn(main_module.explain_slug)("On recherche Ka'Youloud"))
        assert result["pattern"] == "keep-all-hyphens"
        assert result["exception_slug"] == "on-recherche-ka-youloud"

    @pytest.mark.asyncio
    async def test_find_guide_empty_title(self, main_module) -> None:
        result = await tool_fn(main_module.find_guide)("   ")
        assert result.startswith("❌")

    @pytest.mark.asyncio
    async def test_find_guide(self, main_module, monkeypatch) -> None:
        search = AsyncMock(return_value=make_result("Gobball", monsters="Bouftou"))
        monkeypatch.setattr(main_module.linker.client, "search", search)

        result = json.loads(await tool_fn(main_module.find_guide)("Gobball", PageType.MONSTER))

        assert result["french_name"] == "Bouftou"
        assert result["urls"]["primary"] == f"{BASE}/bouftou.html"
