"""Utility helpers shared by the Marrow UI configuration loader."""

from __future__ import annotations

import typing as typ

from .models import ConfigError


def _require(payload: typ.Mapping[str, typ.Any], key: str, *, path: str) -> typ.Any:
    """Return ``payload[key]`` or raise a ConfigError naming the dotted path."""
    value = payload.get(key)
    if value is None:
        msg = f"Missing required config field '{path}'."
        raise ConfigError(msg)
    return value


def _require_mapping(
    payload: typ.Mapping[str, typ.Any], key: str, *, path: str
) -> typ.Mapping[str, typ.Any]:
    """Return a nested mapping, rejecting absent or scalar values."""
    value = _require(payload, key, path=path)
    if not isinstance(value, typ.Mapping):
        msg = f"Config field '{path}' must be a mapping."
        raise ConfigError(msg)
    return value


def _as_text(value: object) -> str:
    """Coerce a YAML scalar into the string written to CSS."""
    match value:
        case bool():
            return "true" if value else "false"
        case str():
            return value
        case _:
            return str(value)


def _build_palette(
    payload: typ.Mapping[str, typ.Any], key: str
) -> dict[str, str]:
    """Build an ordered palette mapping from ``colors.<key>``."""
    palette = _require_mapping(payload, key, path=f"colors.{key}")
    return {str(name): _as_text(value) for name, value in palette.items()}


__all__ = [
    "_as_text",
    "_build_palette",
    "_require",
    "_require_mapping",
]
