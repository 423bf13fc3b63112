"""
Dofus Guide Linker - finds dofuspourlesnoobs.com guides for Dofus wiki pages.
"""

from .config import LinkerConfig, load_config
from .linker import GuideLink, GuideLinker
from .slugs import SlugGenerator, UrlVariants

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("dofus-guide-linker")
except Exception:
    __version__ = "0.1.0"  # Fallback if metadata unavailable
__all__ = [
    "GuideLink",
    "GuideLinker",
    "LinkerConfig",
    "SlugGenerator",
    "UrlVariants",
    "load_config",
]
