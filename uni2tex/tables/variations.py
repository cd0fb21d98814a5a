"""
Standardized variation sequences for mathematical symbols.

Each entry pairs a base character with VARIATION SELECTOR-1 (U+FE00) and
the glyph variant it requests.  The list is informational: no conversion
consults it.
"""
from __future__ import annotations

from typing import NamedTuple

VARIATION_SELECTOR_1 = "\ufe00"


class VariationSequence(NamedTuple):
    base: str
    selector: str
    description: str

    @property
    def sequence(self) -> str:
        return self.base + self.selector


VARIATION_SEQUENCES: tuple[VariationSequence, ...] = tuple(
    VariationSequence(base, VARIATION_SELECTOR_1, description)
    for base, description in (
        ("∩", "with serifs"),
        ("∪", "with serifs"),
        ("≨", "with vertical stroke"),
        ("≩", "with vertical stroke"),
        ("≲", "following the slant of the lower leg"),
        ("≳", "following the slant of the lower leg"),
        ("⊊", "with stroke through bottom members"),
        ("⊋", "with stroke through bottom members"),
        ("⊓", "with serifs"),
        ("⊔", "with serifs"),
        ("⊕", "with white rim"),
        ("⊗", "with white rim"),
        ("⊜", "with equal sign touching the circle"),
        ("⋚", "with slanted equal"),
        ("⋛", "with slanted equal"),
        ("⨼", "tall variant with narrow foot"),
        ("⨽", "tall variant with narrow foot"),
        ("⪝", "with similar following the slant of the upper leg"),
        ("⪞", "with similar following the slant of the upper leg"),
        ("⪬", "with slanted equal"),
        ("⪭", "with slanted equal"),
        ("⫋", "with stroke through bottom members"),
        ("⫌", "with stroke through bottom members"),
    )
)


def variation_sequences_for(base: str) -> tuple[VariationSequence, ...]:
    """Return the variation sequences registered for *base*."""
    return tuple(v for v in VARIATION_SEQUENCES if v.base == base)
