"""
Rewrite spans of text between Unicode math characters and TeX notation.

to_tex_region, for each span:
  1. Fold math italic letters back to plain letters (off by default)
  2. Replace every character with a symbol-table entry by ``\\<name>``
  3. Replace runs of Unicode superscript/subscript characters with
     ``^x`` / ``^{xy}`` and ``_x`` / ``_{xy}``; look-alikes such as ``ª``
     count as superscripts

from_tex_region, for each span:
  1. Replace ``\\<name>`` by its character, longest registered name first
  2. Replace ``^{...}`` / ``^x`` and ``_{...}`` / ``_x`` by Unicode
     superscript/subscript characters when every character has one
  3. Italicize the characters that came through steps 1 and 2 untouched,
     as LaTeX does for letters in math mode

Every function returns a new string; unmapped characters pass through.
"""
from __future__ import annotations

import re
import unicodedata
from typing import Mapping

from .tables.indexes import (
    COMMAND_RE,
    FROM_ITALIC,
    FROM_SUBSCRIPT,
    FROM_SUPERSCRIPT,
    SCRIPT_NOTATION_RE,
    SCRIPT_RUN_RE,
    from_tex,
)
from .tables.styles import ITALIC, STYLE_REGISTRY, resolve_style
from .tables.symbols import to_tex

# One str.translate table per registered style
_TRANSLATIONS: dict[str, dict[int, str]] = {
    name: str.maketrans(dict(table)) for name, table in STYLE_REGISTRY
}

# A span is rewritten as (character, converted) pieces so the italic pass
# can tell literal input from characters produced by a conversion.
_Pieces = list[tuple[str, bool]]


# ---------------------------------------------------------------------------
# Stylization
# ---------------------------------------------------------------------------

def stylize_region(text: str, style: str) -> str:
    """Replace every character of *text* that has a *style* variant."""
    return text.translate(_TRANSLATIONS[resolve_style(style)])


def superscript_of(text: str) -> str:
    """Convert *text* to Unicode superscript characters where they exist."""
    return text.translate(_TRANSLATIONS["SUPERSCRIPT"])


def subscript_of(text: str) -> str:
    """Convert *text* to Unicode subscript characters where they exist."""
    return text.translate(_TRANSLATIONS["SUBSCRIPT"])


# ---------------------------------------------------------------------------
# Symbols → TeX
# ---------------------------------------------------------------------------

def to_tex_region(text: str, *, fold_italic: bool = False) -> str:
    """Rewrite Unicode math characters in *text* as TeX source."""
    if fold_italic:
        text = "".join(FROM_ITALIC.get(ch, ch) for ch in text)
    text = "".join(_symbol_to_tex(ch) for ch in text)
    return SCRIPT_RUN_RE.sub(_script_run_to_tex, text)


def _symbol_to_tex(ch: str) -> str:
    name = to_tex(ch)
    return ch if name is None else f"\\{name}"


def _unscript(ch: str, reverse: Mapping[str, str]) -> str:
    """Map one script character or look-alike to TeX for its base character."""
    return _symbol_to_tex(reverse.get(ch, ch))


def _script_run_to_tex(m: re.Match[str]) -> str:
    if m.group("sup") is not None:
        marker, run, reverse = "^", m.group("sup"), FROM_SUPERSCRIPT
    else:
        marker, run, reverse = "_", m.group("sub"), FROM_SUBSCRIPT

    units = [_unscript(ch, reverse) for ch in unicodedata.normalize("NFD", run)]
    body = "".join(units)
    if len(units) == 1 and not _needs_group(body, m.string, m.end()):
        return f"{marker}{body}"
    return f"{marker}{{{body}}}"


def _needs_group(unit: str, text: str, end: int) -> bool:
    """True when *unit* cannot follow ``^``/``_`` without braces."""
    if unit.startswith("\\"):
        # \alpha directly followed by a letter would read as a longer name
        return end < len(text) and text[end].isalpha()
    return len(unit) != 1


# ---------------------------------------------------------------------------
# TeX → symbols
# ---------------------------------------------------------------------------

def from_tex_region(text: str, *, italicize: bool = True) -> str:
    """Rewrite TeX commands and ``^``/``_`` notation in *text* as Unicode."""
    pieces = _commands_to_symbols(text)
    pieces = _notation_to_scripts(pieces)
    if italicize:
        return "".join(ch if converted else ITALIC.get(ch, ch) for ch, converted in pieces)
    return "".join(ch for ch, _converted in pieces)


def _commands_to_symbols(text: str) -> _Pieces:
    pieces: _Pieces = []
    pos = 0
    for m in COMMAND_RE.finditer(text):
        pieces.extend((ch, False) for ch in text[pos:m.start()])
        pieces.append((from_tex(m.group(1)), True))
        pos = m.end()
    pieces.extend((ch, False) for ch in text[pos:])
    return pieces


def _notation_to_scripts(pieces: _Pieces) -> _Pieces:
    # Every piece holds exactly one character, so match offsets index pieces.
    text = "".join(ch for ch, _converted in pieces)
    result: _Pieces = []
    pos = 0
    for m in SCRIPT_NOTATION_RE.finditer(text):
        result.extend(pieces[pos:m.start()])
        result.extend((ch, True) for ch in _notation_to_script(m))
        pos = m.end()
    result.extend(pieces[pos:])
    return result


def _notation_to_script(m: re.Match[str]) -> str:
    sup = m.group("sup_group") or m.group("sup_char")
    if sup is not None:
        return superscript_of(sup)
    return subscript_of(m.group("sub_group") or m.group("sub_char"))
