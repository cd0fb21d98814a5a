"""
Lookup structures derived from the symbol and style tables.

Everything here is a pure function of the base tables and is computed once
at import time.
"""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Iterable, Mapping

from .styles import (
    ITALIC,
    SUBSCRIPT,
    SUBSCRIPT_LOOKALIKES,
    SUPERSCRIPT,
    SUPERSCRIPT_LOOKALIKES,
)
from .symbols import REGISTRATIONS


def _index(pairs: Iterable[tuple[str, str]]) -> Mapping[str, str]:
    """Map each key to its value; when a key repeats the later pair wins."""
    return MappingProxyType(dict(pairs))


def _invert(table: Mapping[str, str]) -> Mapping[str, str]:
    return _index((value, key) for key, value in table.items())


def _find_collisions(pairs: Iterable[tuple[str, str]]) -> Mapping[str, tuple[str, ...]]:
    owners: dict[str, list[str]] = {}
    for name, char in pairs:
        chars = owners.setdefault(name, [])
        if char not in chars:
            chars.append(char)
    return MappingProxyType(
        {name: tuple(chars) for name, chars in owners.items() if len(chars) > 1}
    )


def _alternation(names: Iterable[str]) -> str:
    """Alternation over *names*, longest first so the longest name wins."""
    ordered = sorted(names, key=lambda name: (-len(name), name))
    return "|".join(re.escape(name) for name in ordered)


def _char_class(chars: Iterable[str]) -> str:
    return "[" + "".join(re.escape(c) for c in sorted(chars)) + "]"


# ---------------------------------------------------------------------------
# Symbol table
# ---------------------------------------------------------------------------
TEX_TO_SYMBOL: Mapping[str, str] = _index(REGISTRATIONS)
SYMBOL_COLLISIONS: Mapping[str, tuple[str, ...]] = _find_collisions(REGISTRATIONS)

# "\" followed by the longest registered name
COMMAND_RE = re.compile(r"\\(" + _alternation(TEX_TO_SYMBOL) + ")")

# ---------------------------------------------------------------------------
# Superscript / subscript tables
# ---------------------------------------------------------------------------
# script character or look-alike → base character
FROM_SUPERSCRIPT: Mapping[str, str] = _index(
    [*_invert(SUPERSCRIPT).items(), *SUPERSCRIPT_LOOKALIKES.items()]
)
FROM_SUBSCRIPT: Mapping[str, str] = _index(
    [*_invert(SUBSCRIPT).items(), *SUBSCRIPT_LOOKALIKES.items()]
)
FROM_ITALIC: Mapping[str, str] = _invert(ITALIC)

SUPERSCRIPT_KEYS = _char_class(SUPERSCRIPT.keys())
SUBSCRIPT_KEYS = _char_class(SUBSCRIPT.keys())

# ^{...} / ^x / _{...} / _x over registered base characters only
SCRIPT_NOTATION_RE = re.compile(
    rf"\^\{{(?P<sup_group>{SUPERSCRIPT_KEYS}+)\}}"
    rf"|\^(?P<sup_char>{SUPERSCRIPT_KEYS})"
    rf"|_\{{(?P<sub_group>{SUBSCRIPT_KEYS}+)\}}"
    rf"|_(?P<sub_char>{SUBSCRIPT_KEYS})"
)

# Runs of Unicode superscript or subscript characters, look-alikes included
SCRIPT_RUN_RE = re.compile(
    rf"(?P<sup>{_char_class(FROM_SUPERSCRIPT)}+)|(?P<sub>{_char_class(FROM_SUBSCRIPT)}+)"
)


def from_tex(name: str) -> str | None:
    """Return the character registered under the TeX command *name*."""
    return TEX_TO_SYMBOL.get(name)


def symbol_collisions() -> dict[str, tuple[str, ...]]:
    """Return every TeX name registered for several characters.

    The characters are in registration order; the last one is what
    ``from_tex`` returns for that name.
    """
    return dict(SYMBOL_COLLISIONS)
