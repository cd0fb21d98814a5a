"""
Symbol table: one Unicode math character → its TeX command name.

Plain command names come from unicodeit's replacement data: every
``\\name`` spelled with letters only that stands for exactly one character.
The data runs from the longest name to the shortest, and a character listed
under several names keeps the last one (``¬`` is ``neg``, not ``lnot``)
unless one of its names is in ``_PREFERRED_NAMES`` (``≤`` is ``leq``, not
``le``).  Every name, not only the kept one, is registered for the reverse
index, so ``\\le`` and ``\\leq`` both read as ``≤``.

Parameterized names (``mathbb{C}``, ``mathbf{\\alpha}``) are generated from
the style tables for every family in ``FAMILIES``.  They replace the
unicode-math aliases (``BbbC``, ``mbfalpha``, ``Re``) as the name of a styled
character; the aliases still resolve.

ASCII characters and superscript/subscript characters have no entry: the
first would rewrite ordinary text, the second belong to the ``^``/``_``
notation pass.
"""
from __future__ import annotations

import re
import unicodedata
from types import MappingProxyType
from typing import Iterable, Mapping

from unicodeit.data import REPLACEMENTS

from .styles import (
    SUBSCRIPT,
    SUBSCRIPT_LOOKALIKES,
    SUPERSCRIPT,
    SUPERSCRIPT_LOOKALIKES,
    style_table,
)

_COMMAND_RE = re.compile(r"\\([A-Za-z]+)")

# Conventional names kept over the shorter aliases that follow them
_PREFERRED_NAMES = frozenset({
    "varepsilon",
    "leq", "geq", "neq", "lesssim", "gtrsim", "triangleq",
    "leftarrow", "rightarrow", "leftrightarrow",
    "Leftrightarrow", "Longleftarrow", "Longrightarrow",
    "wedge", "vee", "exists", "nexists", "notin", "notni", "perp",
    "coprod", "uplus", "bigcap", "bigcup",
    "ldots", "iddots", "trprime", "blacksquare",
})

# TeX font family → style table it is generated from
FAMILIES: dict[str, str] = {
    "mathbf": "BOLD",
    "mathbfit": "BOLD ITALIC",
    "mathcal": "SCRIPT",
    "mathfrak": "FRAKTUR",
    "mathbb": "DOUBLE-STRUCK",
    "mathsf": "SANS-SERIF",
    "mathsfbf": "SANS-SERIF BOLD",
    "mathsfit": "SANS-SERIF ITALIC",
    "mathsfbfit": "SANS-SERIF BOLD ITALIC",
    "mathtt": "MONOSPACE",
}

_SCRIPT_CHARACTERS = frozenset(
    [*SUPERSCRIPT.values(), *SUBSCRIPT.values(), *SUPERSCRIPT_LOOKALIKES, *SUBSCRIPT_LOOKALIKES]
)


def _named_commands() -> tuple[tuple[str, str], ...]:
    pairs: list[tuple[str, str]] = []
    for command, value in REPLACEMENTS:
        m = _COMMAND_RE.fullmatch(command)
        if m is None or len(value) != 1:
            continue
        category = unicodedata.category(value)
        # accents take an argument; private-use values have no standard glyph
        if category.startswith("M") or category == "Co":
            continue
        pairs.append((m.group(1), value))
    return tuple(pairs)


def _canonical_names(pairs: Iterable[tuple[str, str]]) -> dict[str, str]:
    """Pick one name per character: the last one, or a preferred one."""
    names: dict[str, str] = {}
    for name, char in pairs:
        if names.get(char) not in _PREFERRED_NAMES:
            names[char] = name
    return names


def _family_argument(base: str, names: Mapping[str, str]) -> str | None:
    """Return the brace argument naming *base*, or ``None`` if it has no name."""
    if base.isascii():
        return base
    name = names.get(base)
    return f"\\{name}" if name is not None else None


def _family_commands(names: Mapping[str, str]) -> tuple[tuple[str, str], ...]:
    pairs: list[tuple[str, str]] = []
    for family, style in FAMILIES.items():
        for base, styled in style_table(style).items():
            argument = _family_argument(base, names)
            if argument is not None:
                pairs.append((f"{family}{{{argument}}}", styled))
    return tuple(pairs)


NAMED_COMMANDS: tuple[tuple[str, str], ...] = _named_commands()
_CANONICAL: dict[str, str] = _canonical_names(NAMED_COMMANDS)
FAMILY_COMMANDS: tuple[tuple[str, str], ...] = _family_commands(_CANONICAL)

# Every (name, character) registration, in the order the reverse index applies them
REGISTRATIONS: tuple[tuple[str, str], ...] = NAMED_COMMANDS + FAMILY_COMMANDS


def _build_symbols() -> Mapping[str, str]:
    symbols = {
        char: name
        for char, name in sorted(_CANONICAL.items())
        if not char.isascii() and char not in _SCRIPT_CHARACTERS
    }
    for name, styled in FAMILY_COMMANDS:
        symbols[styled] = name
    return MappingProxyType(symbols)


SYMBOLS: Mapping[str, str] = _build_symbols()


def to_tex(char: str) -> str | None:
    """Return the TeX command name registered for *char*, without backslash."""
    return SYMBOLS.get(char)
