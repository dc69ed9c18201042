"""Lookup tables resolving theme config enums into CSS values."""

from __future__ import annotations

import dataclasses as dc

RADIUS_MAP: dict[str, str] = {
    "none": "0px",
    "sm": "0.25rem",
    "md": "0.375rem",
    "lg": "0.5rem",
    "xl": "0.75rem",
    "2xl": "1rem",
    "full": "9999px",
}

DURATION_MAP: dict[str, str] = {
    "none": "0ms",
    "fast": "100ms",
    "base": "150ms",
    "slow": "300ms",
    "lazy": "500ms",
}

SHADOW_MAP: dict[str, str] = {
    "none": "none",
    "sm": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
    "md": "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)",
    "lg": "0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1)",
    "xl": "0 20px 25px -5px rgb(0 0 0 / 0.1), 0 8px 10px -6px rgb(0 0 0 / 0.1)",
}


@dc.dataclass(frozen=True, slots=True)
class CompactnessPreset:
    """Sizing values applied together for one density level.

    Attributes
    ----------
    text : str
        Base font size.
    text_label : str
        Font size for labels and helper text.
    space : str
        Unitless multiplier applied to spacing utilities.
    btn_py, btn_px : str
        Vertical and horizontal button padding.
    input_py, input_px : str
        Vertical and horizontal input padding.
    card_p : str
        Card padding.
    """

    text: str
    text_label: str
    space: str
    btn_py: str
    btn_px: str
    input_py: str
    input_px: str
    card_p: str


COMPACTNESS_MAP: dict[str, CompactnessPreset] = {
    "minimal": CompactnessPreset(
        "0.75rem", "0.625rem", "0.7", "0.25rem", "0.5rem", "0.25rem", "0.5rem", "0.75rem"
    ),
    "compact": CompactnessPreset(
        "0.875rem", "0.75rem", "0.85", "0.375rem", "0.75rem", "0.375rem", "0.75rem", "1rem"
    ),
    "normal": CompactnessPreset(
        "1rem", "0.875rem", "1", "0.5rem", "1rem", "0.5rem", "0.75rem", "1.5rem"
    ),
    "relaxed": CompactnessPreset(
        "1.125rem", "1rem", "1.2", "0.625rem", "1.25rem", "0.625rem", "1rem", "2rem"
    ),
    "spacious": CompactnessPreset(
        "1.25rem", "1.125rem", "1.5", "0.75rem", "1.5rem", "0.75rem", "1.25rem", "2.5rem"
    ),
}
DEFAULT_COMPACTNESS = "normal"


def resolve(table: dict[str, str], value: str) -> str:
    """Return the table entry for ``value`` or ``value`` itself as raw CSS."""
    return table.get(value) or value


def resolve_compactness(value: str) -> CompactnessPreset:
    """Return the named preset, falling back to ``normal`` for unknown names."""
    return COMPACTNESS_MAP.get(value) or COMPACTNESS_MAP[DEFAULT_COMPACTNESS]


__all__ = [
    "COMPACTNESS_MAP",
    "DEFAULT_COMPACTNESS",
    "DURATION_MAP",
    "RADIUS_MAP",
    "SHADOW_MAP",
    "CompactnessPreset",
    "resolve",
    "resolve_compactness",
]
