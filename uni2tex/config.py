from __future__ import annotations

import warnings
import yaml
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from .tables.styles import resolve_style


@dataclass
class ToTexConfig:
    """Settings for rewriting Unicode math characters as TeX source."""

    fold_italic: bool = False  # turn math italic letters back into plain letters first


@dataclass
class FromTexConfig:
    """Settings for rewriting TeX source as Unicode math characters."""

    italicize: bool = True  # italicize letters left over after conversion


@dataclass
class Config:
    """Top-level configuration aggregating per-direction settings."""

    default_style: str = "BOLD"  # style used when none is given
    to_tex: ToTexConfig = field(default_factory=ToTexConfig)
    from_tex: FromTexConfig = field(default_factory=FromTexConfig)


def load_config(path: Optional[Path]) -> Config:
    """Load configuration from a YAML file, returning defaults if *path* is None or missing."""
    if path is None or not path.exists():
        return Config()

    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    return load_config_from_dict(data)


def load_config_from_dict(data: Mapping[str, Any]) -> Config:
    """Build a Config from a mapping using the same schema as ``config.yaml``.

    Unknown keys are ignored with a warning.  ``default_style`` is resolved
    to its canonical name and raises ``UnknownStyleError`` if unregistered.
    """
    if not isinstance(data, Mapping):
        raise TypeError("config must be a mapping at the top level.")

    _warn_unknown(data, Config.__dataclass_fields__, "")
    to_tex_fields = _section(data, "to_tex", ToTexConfig)
    from_tex_fields = _section(data, "from_tex", FromTexConfig)

    default_style = resolve_style(data.get("default_style", Config.default_style))

    return Config(
        default_style=default_style,
        to_tex=ToTexConfig(**to_tex_fields),
        from_tex=FromTexConfig(**from_tex_fields),
    )


def _section(data: Mapping[str, Any], name: str, cls: type) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, Mapping):
        raise TypeError(f"config section '{name}' must be a mapping.")
    _warn_unknown(section, cls.__dataclass_fields__, f"{name}.")
    return {k: v for k, v in section.items() if k in cls.__dataclass_fields__}


def _warn_unknown(section: Mapping[str, Any], known: Mapping[str, Any], prefix: str) -> None:
    for key in section:
        if key not in known:
            warnings.warn(
                f"Ignoring unknown config key '{prefix}{key}'.",
                UserWarning,
                stacklevel=3,
            )
