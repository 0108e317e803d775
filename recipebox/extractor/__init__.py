"""
Recipebox ingredient extractor

Heuristic, deterministic extraction of ingredient names from free-text
YouTube video descriptions:
- Locate the materials section (材料 / Ingredients ... 作り方 / Method)
- Classify each line against an ordered list of patterns
- Keep the part that looks like a name rather than an amount

Nothing in this package should talk directly to Flask, Supabase, or YouTube.
It is pure logic.
"""

from .classifier import classify_line, is_valid_ingredient, looks_like_quantity
from .engine import extract
from .tables import DEFAULT_CONFIG, ExtractorConfig

__all__ = [
    "extract",
    "classify_line",
    "looks_like_quantity",
    "is_valid_ingredient",
    "ExtractorConfig",
    "DEFAULT_CONFIG",
]
