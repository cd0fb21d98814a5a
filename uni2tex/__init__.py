from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .api import (
    from_tex_region,
    list_style_names,
    lookup_symbol_by_name,
    search_symbols,
    stylize_region,
    subscript_of,
    superscript_of,
    symbol_candidates,
    to_tex_region,
)
from .config import Config, FromTexConfig, ToTexConfig, load_config
from .errors import SymbolNotFoundError, Uni2TexError, UnknownStyleError

try:
    __version__ = version("uni2tex")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "Config",
    "FromTexConfig",
    "SymbolNotFoundError",
    "ToTexConfig",
    "Uni2TexError",
    "UnknownStyleError",
    "from_tex_region",
    "list_style_names",
    "load_config",
    "lookup_symbol_by_name",
    "search_symbols",
    "stylize_region",
    "subscript_of",
    "superscript_of",
    "symbol_candidates",
    "to_tex_region",
]
