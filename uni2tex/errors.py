"""
Exceptions raised by uni2tex.

Character-level misses are never errors: a character without a mapping in
the active table passes through unchanged.  Only caller-facing usage
mistakes raise.
"""
from __future__ import annotations


class Uni2TexError(Exception):
    """Base class for all uni2tex errors."""


class UnknownStyleError(Uni2TexError, ValueError):
    """Raised when a style name is not in the style registry."""

    def __init__(self, style: str, known: tuple[str, ...] = ()) -> None:
        self.style = style
        message = f"Unknown style: {style!r}."
        if known:
            message += f" Supported: {', '.join(known)}"
        super().__init__(message)


class SymbolNotFoundError(Uni2TexError, LookupError):
    """Raised when a symbol-name query does not resolve to a catalog entry."""

    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__(f"No symbol named {query!r}.")
