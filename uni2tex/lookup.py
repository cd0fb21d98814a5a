"""
Find symbols by TeX name.

Only plain named symbols (``alpha``, ``rightarrow``) are offered here.
Parameterized names such as ``mathbb{C}`` are reached by stylizing the base
letter instead.
"""
from __future__ import annotations

import re

from .errors import SymbolNotFoundError
from .tables.indexes import from_tex
from .tables.symbols import SYMBOLS

# "<name> (<char>)"
_CANDIDATE_RE = re.compile(r"\((.)\)\s*\Z", re.DOTALL)

_CANDIDATES: tuple[str, ...] = tuple(
    f"{name} ({char})" for char, name in SYMBOLS.items() if "{" not in name
)
_CANDIDATE_SET = frozenset(_CANDIDATES)


def symbol_candidates() -> tuple[str, ...]:
    """Return ``"<name> (<char>)"`` for every plain named symbol."""
    return _CANDIDATES


def lookup_symbol_by_name(query: str) -> str:
    """Resolve *query* to a single character.

    *query* may be a candidate string as returned by ``symbol_candidates``,
    a bare name (``alpha``) or a backslashed name (``\\alpha``).

    Raises:
        SymbolNotFoundError: nothing matches, or *query* names a
            parameterized symbol.
    """
    text = query.strip()
    m = _CANDIDATE_RE.search(text)
    if m is not None and text in _CANDIDATE_SET:
        return m.group(1)

    name = text[1:] if text.startswith("\\") else text
    if name and "{" not in name:
        char = from_tex(name)
        if char is not None:
            return char
    raise SymbolNotFoundError(query)


def search_symbols(query: str) -> list[str]:
    """Return candidates whose name contains *query*.

    Exact name matches come first, then prefix matches, then the rest, each
    group in table order.
    """
    needle = query.strip().lstrip("\\")
    if not needle:
        return list(_CANDIDATES)

    exact: list[str] = []
    prefix: list[str] = []
    inner: list[str] = []
    for candidate in _CANDIDATES:
        name = candidate.rsplit(" (", 1)[0]
        if name == needle:
            exact.append(candidate)
        elif name.startswith(needle):
            prefix.append(candidate)
        elif needle in name:
            inner.append(candidate)
    return exact + prefix + inner
