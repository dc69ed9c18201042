"""Typed dataclasses describing Marrow UI theme configuration structures."""

from __future__ import annotations

import dataclasses as dc


class ConfigError(ValueError):
    """Raised when the theme configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class FontConfig:
    """Font families for headings and body text."""

    heading: str
    body: str


@dc.dataclass(slots=True)
class ColorPalettes:
    """Light and dark color palettes keyed by camelCase token name.

    Values are HSL triples written as ``"H S% L%"`` so the generated custom
    properties can be wrapped in ``hsl()`` with an alpha channel.
    """

    light: dict[str, str]
    dark: dict[str, str]


@dc.dataclass(slots=True)
class MarrowConfig:
    """A fully resolved theme definition sourced from ``marrow.config.yaml``.

    Enum-like fields (``radius``, ``compactness``, ``transition_duration``,
    ``shadow``) hold the raw configured value; the theme generator resolves
    them through its lookup tables.
    """

    colors: ColorPalettes
    fonts: FontConfig
    theme: str = "light"
    radius: str = "lg"
    compactness: str = "normal"
    menu_accent: str = "subtle"
    icon_library: str = "lucide"
    transition_duration: str = "base"
    shadow: str = "sm"


__all__ = ["ColorPalettes", "ConfigError", "FontConfig", "MarrowConfig"]
