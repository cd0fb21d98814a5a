"""Programmatic API for converting spans of text."""
from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from . import rewrite
from .config import Config, load_config, load_config_from_dict
from .lookup import lookup_symbol_by_name, search_symbols, symbol_candidates
from .tables.styles import style_names


def list_style_names() -> list[str]:
    """Return the registered style names in registry order."""
    return list(style_names())


def stylize_region(
    text: str,
    style: str | None = None,
    *,
    config: Config | Mapping[str, Any] | str | Path | None = None,
) -> str:
    """Replace every character of *text* that has a variant in *style*.

    Args:
        text: Span to rewrite.
        style: Style name as listed by ``list_style_names``; defaults to the
            configured ``default_style``.
        config: ``None``, a ``Config``, a dict-like mapping or a YAML path.

    Raises:
        UnknownStyleError: *style* is not registered.
    """
    if style is None:
        style = _resolve_config(config).default_style
    return rewrite.stylize_region(text, style)


def to_tex_region(
    text: str,
    *,
    config: Config | Mapping[str, Any] | str | Path | None = None,
) -> str:
    """Rewrite Unicode math characters in *text* as TeX source."""
    resolved = _resolve_config(config)
    return rewrite.to_tex_region(text, fold_italic=resolved.to_tex.fold_italic)


def from_tex_region(
    text: str,
    *,
    config: Config | Mapping[str, Any] | str | Path | None = None,
) -> str:
    """Rewrite TeX commands and ``^``/``_`` notation in *text* as Unicode."""
    resolved = _resolve_config(config)
    return rewrite.from_tex_region(text, italicize=resolved.from_tex.italicize)


def superscript_of(text: str) -> str:
    """Convert *text* to superscript characters where they exist."""
    return rewrite.superscript_of(text)


def subscript_of(text: str) -> str:
    """Convert *text* to subscript characters where they exist."""
    return rewrite.subscript_of(text)


def _resolve_config(
    config: Config | Mapping[str, Any] | str | Path | None,
) -> Config:
    if config is None:
        return Config()
    if isinstance(config, Config):
        return config
    if isinstance(config, Mapping):
        return load_config_from_dict(config)
    if isinstance(config, (str, Path)):
        return load_config(Path(config))
    raise TypeError(
        "config must be None, Config, dict-like mapping, or a config file path."
    )


__all__ = [
    "from_tex_region",
    "list_style_names",
    "lookup_symbol_by_name",
    "search_symbols",
    "stylize_region",
    "subscript_of",
    "superscript_of",
    "symbol_candidates",
    "to_tex_region",
]
