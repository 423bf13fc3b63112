"""
Guide slug generation for French Dofus entity names.

Builds dofuspourlesnoobs.com guide URLs from a French display name using a
hardcoded exception table, apostrophe pattern detection, two accent
encodings and a heuristic that picks which encoding to try first.
"""

from .builder import entity_slug, finalize_slug, normalized_slug
from .exception_table import ExceptionTable
from .models import ApostrophePattern, ExceptionEntry, SlugReport, SlugVariant, UrlVariants
from .patterns import detect_apostrophe_pattern
from .selector import SelectorRules, VariantSelector, analyze_url_requirements
from .urls import SlugGenerator, build_guide_url

__all__ = [
    "ApostrophePattern",
    "ExceptionEntry",
    "ExceptionTable",
    "SelectorRules",
    "SlugGenerator",
    "SlugReport",
    "SlugVariant",
    "UrlVariants",
    "VariantSelector",
    "analyze_url_requirements",
    "build_guide_url",
    "detect_apostrophe_pattern",
    "entity_slug",
    "finalize_slug",
    "normalized_slug",
]
