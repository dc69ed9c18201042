"""Load theme configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _as_text, _build_palette, _require, _require_mapping
from .models import ColorPalettes, ConfigError, FontConfig, MarrowConfig

# YAML key -> MarrowConfig attribute for scalar settings with defaults.
OPTIONAL_FIELDS: dict[str, str] = {
    "theme": "theme",
    "radius": "radius",
    "compactness": "compactness",
    "menuAccent": "menu_accent",
    "iconLibrary": "icon_library",
    "transitionDuration": "transition_duration",
    "shadow": "shadow",
}


def load_config(path: Path) -> MarrowConfig:
    """Load the YAML file describing the theme of a Marrow UI project.

    Parameters
    ----------
    path : Path
        Filesystem path to the configuration file (for example,
        ``marrow.config.yaml``).

    Returns
    -------
    MarrowConfig
        Parsed configuration with defaults applied to optional fields.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    ConfigError
        If the top-level structure is not a mapping or a required field
        (``colors.light``, ``colors.dark``, ``fonts.heading``,
        ``fonts.body``) is missing.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from marrow_ui.config import load_config
    >>> config = load_config(Path("marrow.config.yaml"))  # doctest: +SKIP
    >>> config.radius  # doctest: +SKIP
    'lg'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = f"Top-level YAML structure in '{path}' must be a mapping."
        raise ConfigError(msg)
    return build_config(loaded)


def build_config(raw: typ.Mapping[str, typ.Any]) -> MarrowConfig:
    """Build a MarrowConfig from an already parsed mapping.

    Keys follow the camelCase names used in ``marrow.config.yaml``
    (``transitionDuration``, ``menuAccent``, ``iconLibrary``).
    """
    colors = _require_mapping(raw, "colors", path="colors")
    fonts = _require_mapping(raw, "fonts", path="fonts")
    overrides = {
        attr: _as_text(raw[key])
        for key, attr in OPTIONAL_FIELDS.items()
        if raw.get(key) is not None
    }

    return MarrowConfig(
        colors=ColorPalettes(
            light=_build_palette(colors, "light"),
            dark=_build_palette(colors, "dark"),
        ),
        fonts=FontConfig(
            heading=_as_text(_require(fonts, "heading", path="fonts.heading")),
            body=_as_text(_require(fonts, "body", path="fonts.body")),
        ),
        **overrides,
    )


__all__ = ["ConfigError", "build_config", "load_config"]
