"""
Dofus Guide Linker MCP Server
Finds dofuspourlesnoobs.com guides for Dofus wiki pages, built with FastMCP.
"""

import json
import logging
from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from .config import load_config
from .content import ContentLookupError, PageType
from .linker import GuideLinker

logger = logging.getLogger("dofus-linker")

logging.basicConfig(
    level=logging.INFO,
    )

config = load_config()
logger.debug(f"🔧 Guide site: {config.base_url}, API: {config.api_base_url}")

linker = GuideLinker.from_config(config)
logger.debug(f"📚 Slug exceptions loaded ({len(linker.generator.exceptions)} entries)")

mcp = FastMCP(
    name="dofus-linker"
)


@mcp.tool
def guide_urls(
    french_name: Annotated[str, Field(description="French name of a quest, item, monster, area, ...")]
) -> str:
    """Build the primary and fallback guide URLs for a French entity name.

    Try the primary URL first; if that page doesn't exist, the fallback uses
    the other accent encoding.
    """
    urls = linker.urls_for(french_name)
    return urls.model_dump_json(indent=2)


@mcp.tool
async def find_guide(
    english_name: Annotated[str, Field(description="English page title from the Dofus wiki")],
    page_type: Annotated[PageType, Field(description="Kind of wiki page")] = PageType.UNKNOWN,
) -> str:
    """Look up the French name on DofusDB and build guide URLs for it.

    Falls back to guessing URLs from the English title when no French name is found.
    """
    try:
        link = await linker.find_guide(english_name, page_type)
    except (ContentLookupError, ValueError) as e:
        return f"❌ Error: {e}"

    if link is None:
        return "❌ Empty page title, nothing to look up."
    return link.model_dump_json(indent=2)


@mcp.tool
def explain_slug(
    name: Annotated[str, Field(description="French name to analyse")]
) -> str:
    """Show how guide URLs are derived for a name.

    Includes the apostrophe pattern, both slug variants, any exception table
    entry and which variant is tried first.
    """
    report = linker.generator.explain(name)
    return json.dumps(report.model_dump(mode="json"), indent=2, ensure_ascii=False)


logger.debug("✅ All tools registered. Dofus guide linker ready! 📖")

def main() -> None:
    """Main entry point for the Dofus guide linker MCP server."""
    mcp.run()

if __name__ == "__main__":
    main()
