"""
Embedded symbol and style tables plus the indexes derived from them.
"""
from __future__ import annotations

from .indexes import from_tex, symbol_collisions
from .styles import STYLE_REGISTRY, destylize, resolve_style, style_names, style_table, stylize
from .symbols import FAMILIES, SYMBOLS, to_tex
from .variations import VARIATION_SEQUENCES, VariationSequence

__all__ = [
    "FAMILIES",
    "STYLE_REGISTRY",
    "SYMBOLS",
    "VARIATION_SEQUENCES",
    "VariationSequence",
    "destylize",
    "from_tex",
    "resolve_style",
    "style_names",
    "style_table",
    "stylize",
    "symbol_collisions",
    "to_tex",
]
