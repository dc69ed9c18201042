"""Render Marrow UI theme configuration into CSS custom properties.

The generator resolves the enum-like config fields through the lookup tables
in :mod:`marrow_ui.theme.tables`, converts palette keys to kebab-case, and
renders ``theme.css.jinja``. Output depends only on the config, so the same
input always produces byte-identical CSS.

Example
-------
>>> from marrow_ui.config import build_config
>>> from marrow_ui.theme import generate_css
>>> css = generate_css(
...     build_config(
...         {
...             "radius": "sm",
...             "colors": {"light": {"primary": "220 90% 56%"}, "dark": {}},
...             "fonts": {"heading": "Inter", "body": "Inter"},
...         }
...     )
... )
>>> "--marrow-radius: 0.25rem;" in css
True
"""

from __future__ import annotations

import re
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from marrow_ui._constants import CONFIG_FILENAME, CSS_VAR_PREFIX

from .tables import (
    DURATION_MAP,
    RADIUS_MAP,
    SHADOW_MAP,
    resolve,
    resolve_compactness,
)

if typ.TYPE_CHECKING:
    from marrow_ui.config import MarrowConfig

FONT_FALLBACK = "ui-sans-serif, system-ui, sans-serif"
UPPERCASE_PATTERN = re.compile(r"([A-Z])")
TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


def css_var_name(key: str) -> str:
    """Return the kebab-case custom property suffix for a camelCase key.

    >>> css_var_name("sidebarAccentForeground")
    'sidebar-accent-foreground'
    """
    return UPPERCASE_PATTERN.sub(r"-\1", key).lower()


def _palette_entries(palette: typ.Mapping[str, str]) -> list[tuple[str, str]]:
    return [(css_var_name(key), value) for key, value in palette.items()]


def _build_environment(templates_dir: Path | None = None) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(templates_dir or TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def generate_css(config: MarrowConfig) -> str:
    """Render the theme stylesheet for ``config``.

    Parameters
    ----------
    config : MarrowConfig
        Resolved theme configuration.

    Returns
    -------
    str
        CSS text containing a ``:root`` block (light palette plus sizing,
        motion, and typography variables) and a ``.dark`` block (dark
        palette only).
    """
    template = _build_environment().get_template("theme.css.jinja")
    return template.render(
        config_filename=CONFIG_FILENAME,
        prefix=CSS_VAR_PREFIX,
        light=_palette_entries(config.colors.light),
        dark=_palette_entries(config.colors.dark),
        radius=resolve(RADIUS_MAP, config.radius),
        compactness=resolve_compactness(config.compactness),
        duration=resolve(DURATION_MAP, config.transition_duration),
        shadow=resolve(SHADOW_MAP, config.shadow),
        font_heading=config.fonts.heading,
        font_body=config.fonts.body,
        font_fallback=FONT_FALLBACK,
    )


class ThemeBuilder:
    """Write the generated theme stylesheet for a config to disk."""

    def __init__(self, config: MarrowConfig, output: Path) -> None:
        """Store the config and the destination path for the stylesheet."""
        self.config = config
        self.output = output

    def run(self) -> Path:
        """Render and write the theme CSS, returning the output path.

        Parent directories are created as needed and the file is written as
        UTF-8, replacing any existing content.
        """
        self.output.parent.mkdir(parents=True, exist_ok=True)
        self.output.write_text(generate_css(self.config), encoding="utf-8")
        return self.output


__all__ = ["FONT_FALLBACK", "ThemeBuilder", "css_var_name", "generate_css"]
