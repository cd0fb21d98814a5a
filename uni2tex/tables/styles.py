"""
Style tables: base character → styled Unicode variant.

The alphanumeric styles are read out of the Mathematical Alphanumeric
Symbols block by character name (``MATHEMATICAL BOLD CAPITAL A`` …).  Code
points the block reserves because the glyph already lived in the
Letterlike Symbols block (italic h, script B, fraktur C, double-struck R …)
come from ``_LETTERLIKE``.  Superscript and subscript have no systematic
naming, so their tables are spelled out in full; look-alikes such as ``ª``
are found through their ``<super>``/``<sub>`` compatibility decomposition.

Every table is a read-only mapping built once at import time.
"""
from __future__ import annotations

import unicodedata
from types import MappingProxyType
from typing import Mapping

from ..errors import UnknownStyleError

# ---------------------------------------------------------------------------
# Base alphabet shared by the alphanumeric styles
# ---------------------------------------------------------------------------
_LATIN = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
_DIGITS = "0123456789"
_GREEK = (
    "ΑΒΓΔΕΖΗΘΙΚΛΜΝΞΟΠΡΣΤΥΦΧΨΩ"
    "ϴ∇"
    "αβγδεζηθικλμνξοπρςστυφχψω"
    "∂ϵϑϰϕϱϖ"
    "Ϝϝ"
)
_DOTLESS = "ıȷ"

BASE_CHARACTERS = _LATIN + _DIGITS + _GREEK + _DOTLESS

# Base characters whose Unicode name does not reduce to the descriptor used
# in the math block's names.
_DESCRIPTOR_ALIASES: dict[str, str] = {
    "ϵ": "EPSILON SYMBOL",  # GREEK LUNATE EPSILON SYMBOL
    "Ϝ": "CAPITAL DIGAMMA",  # GREEK LETTER DIGAMMA
    "ϝ": "SMALL DIGAMMA",
}

# Holes in the Mathematical Alphanumeric Symbols block
_LETTERLIKE: dict[str, dict[str, str]] = {
    "ITALIC": {"h": "ℎ"},
    "SCRIPT": {
        "B": "ℬ", "E": "ℰ", "F": "ℱ", "H": "ℋ", "I": "ℐ", "L": "ℒ",
        "M": "ℳ", "R": "ℛ", "e": "ℯ", "g": "ℊ", "o": "ℴ",
    },
    "FRAKTUR": {"C": "ℭ", "H": "ℌ", "I": "ℑ", "R": "ℜ", "Z": "ℨ"},
    "DOUBLE-STRUCK": {
        "C": "ℂ", "H": "ℍ", "N": "ℕ", "P": "ℙ", "Q": "ℚ", "R": "ℝ", "Z": "ℤ",
        "Γ": "ℾ", "Π": "ℿ", "γ": "ℽ", "π": "ℼ",
    },
}

_ALPHANUMERIC_STYLES = (
    "BOLD",
    "BOLD FRAKTUR",
    "BOLD ITALIC",
    "BOLD SCRIPT",
    "DOUBLE-STRUCK",
    "FRAKTUR",
    "ITALIC",
    "MONOSPACE",
    "SANS-SERIF",
    "SANS-SERIF BOLD",
    "SANS-SERIF BOLD ITALIC",
    "SANS-SERIF ITALIC",
    "SCRIPT",
)

# ---------------------------------------------------------------------------
# Superscript / subscript tables
# ---------------------------------------------------------------------------
_SUPERSCRIPT: dict[str, str] = {
    "0": "⁰", "1": "¹", "2": "²", "3": "³", "4": "⁴",
    "5": "⁵", "6": "⁶", "7": "⁷", "8": "⁸", "9": "⁹",
    "+": "⁺", "-": "⁻", "=": "⁼", "(": "⁽", ")": "⁾",
    "a": "ᵃ", "b": "ᵇ", "c": "ᶜ", "d": "ᵈ", "e": "ᵉ",
    "f": "ᶠ", "g": "ᵍ", "h": "ʰ", "i": "ⁱ", "j": "ʲ",
    "k": "ᵏ", "l": "ˡ", "m": "ᵐ", "n": "ⁿ", "o": "ᵒ",
    "p": "ᵖ", "r": "ʳ", "s": "ˢ", "t": "ᵗ", "u": "ᵘ",
    "v": "ᵛ", "w": "ʷ", "x": "ˣ", "y": "ʸ", "z": "ᶻ",
    "A": "ᴬ", "B": "ᴮ", "D": "ᴰ", "E": "ᴱ", "G": "ᴳ",
    "H": "ᴴ", "I": "ᴵ", "J": "ᴶ", "K": "ᴷ", "L": "ᴸ",
    "M": "ᴹ", "N": "ᴺ", "O": "ᴼ", "P": "ᴾ", "R": "ᴿ",
    "T": "ᵀ", "U": "ᵁ", "V": "ⱽ", "W": "ᵂ",
    "α": "ᵅ", "β": "ᵝ", "γ": "ᵞ", "δ": "ᵟ", "ε": "ᵋ",
    "θ": "ᶿ", "ι": "ᶥ", "φ": "ᵠ", "χ": "ᵡ",
}

_SUBSCRIPT: dict[str, str] = {
    "0": "₀", "1": "₁", "2": "₂", "3": "₃", "4": "₄",
    "5": "₅", "6": "₆", "7": "₇", "8": "₈", "9": "₉",
    "+": "₊", "-": "₋", "=": "₌", "(": "₍", ")": "₎",
    "a": "ₐ", "e": "ₑ", "h": "ₕ", "i": "ᵢ", "j": "ⱼ",
    "k": "ₖ", "l": "ₗ", "m": "ₘ", "n": "ₙ", "o": "ₒ",
    "p": "ₚ", "r": "ᵣ", "s": "ₛ", "t": "ₜ", "u": "ᵤ",
    "v": "ᵥ", "x": "ₓ",
    "β": "ᵦ", "γ": "ᵧ", "ρ": "ᵨ", "φ": "ᵩ", "χ": "ᵪ",
}


def _descriptor(base: str) -> str:
    """Return the part of *base*'s Unicode name the math block reuses.

    ``LATIN CAPITAL LETTER A`` → ``CAPITAL A``,
    ``GREEK SMALL LETTER FINAL SIGMA`` → ``SMALL FINAL SIGMA``,
    ``DIGIT ZERO`` and ``NABLA`` are kept as they are.
    """
    if base in _DESCRIPTOR_ALIASES:
        return _DESCRIPTOR_ALIASES[base]
    name = unicodedata.name(base)
    for prefix in ("LATIN ", "GREEK "):
        if name.startswith(prefix):
            name = name[len(prefix):]
    return name.replace(" LETTER ", " ")


def _build_alphanumeric(style: str) -> Mapping[str, str]:
    holes = _LETTERLIKE.get(style, {})
    table: dict[str, str] = {}
    for base in BASE_CHARACTERS:
        try:
            table[base] = unicodedata.lookup(f"MATHEMATICAL {style} {_descriptor(base)}")
        except KeyError:
            if base in holes:
                table[base] = holes[base]
    return MappingProxyType(table)


def _build_registry() -> tuple[tuple[str, Mapping[str, str]], ...]:
    tables = {style: _build_alphanumeric(style) for style in _ALPHANUMERIC_STYLES}
    tables["SUPERSCRIPT"] = MappingProxyType(dict(_SUPERSCRIPT))
    tables["SUBSCRIPT"] = MappingProxyType(dict(_SUBSCRIPT))
    return tuple(sorted(tables.items()))


# Ordered (style name, table) pairs
STYLE_REGISTRY: tuple[tuple[str, Mapping[str, str]], ...] = _build_registry()
_TABLES: Mapping[str, Mapping[str, str]] = MappingProxyType(dict(STYLE_REGISTRY))

SUPERSCRIPT: Mapping[str, str] = _TABLES["SUPERSCRIPT"]
SUBSCRIPT: Mapping[str, str] = _TABLES["SUBSCRIPT"]
ITALIC: Mapping[str, str] = _TABLES["ITALIC"]

# Blocks holding ordinal indicators and modifier letters
_LOOKALIKE_BLOCKS = (
    range(0x00A0, 0x0100),
    range(0x02B0, 0x0300),
    range(0x1D00, 0x1DC0),
    range(0x2070, 0x20A0),
    range(0x2C60, 0x2C80),
    range(0xA700, 0xA800),
)


def _build_lookalikes(table: Mapping[str, str], tag: str) -> Mapping[str, str]:
    """Map characters decomposing as *tag* onto a base of *table* to that base.

    ``ª`` is ``<super> a``, so it is read as a superscript ``a`` even though
    the table produces ``ᵃ``.  Characters the table already produces are
    left out.
    """
    produced = set(table.values())
    found: dict[str, str] = {}
    for block in _LOOKALIKE_BLOCKS:
        for char in map(chr, block):
            if char in produced or not unicodedata.decomposition(char).startswith(tag):
                continue
            base = unicodedata.normalize("NFKC", char)
            if base in table:
                found[char] = base
    return MappingProxyType(found)


SUPERSCRIPT_LOOKALIKES: Mapping[str, str] = _build_lookalikes(SUPERSCRIPT, "<super>")
SUBSCRIPT_LOOKALIKES: Mapping[str, str] = _build_lookalikes(SUBSCRIPT, "<sub>")


def _build_destyled() -> Mapping[str, str]:
    destyled: dict[str, str] = {}
    for _style, table in STYLE_REGISTRY:
        for base, styled in table.items():
            destyled[styled] = base
    return MappingProxyType(destyled)


_DESTYLED = _build_destyled()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def style_names() -> tuple[str, ...]:
    """Return the registered style names in registry order."""
    return tuple(name for name, _table in STYLE_REGISTRY)


def resolve_style(style: str) -> str:
    """Return the canonical registry name for *style*.

    Matching ignores case and surrounding whitespace and treats ``_`` like
    ``-``; word separators may be spaces, so ``"sans_serif bold"`` resolves
    to ``SANS-SERIF BOLD``.
    """
    key = " ".join(str(style).strip().upper().replace("_", "-").split())
    if key == "SANS SERIF" or key.startswith("SANS SERIF "):
        key = "SANS-SERIF" + key[len("SANS SERIF"):]
    elif key == "DOUBLE STRUCK":
        key = "DOUBLE-STRUCK"
    if key not in _TABLES:
        raise UnknownStyleError(style, style_names())
    return key


def style_table(style: str) -> Mapping[str, str]:
    """Return the read-only table registered under *style*."""
    return _TABLES[resolve_style(style)]


def stylize(char: str, style: str) -> str | None:
    """Return the *style* variant of *char*, or ``None`` if it has none."""
    return style_table(style).get(char)


def destylize(char: str) -> str | None:
    """Return the base character of a styled *char*, or ``None``."""
    return _DESTYLED.get(char)
