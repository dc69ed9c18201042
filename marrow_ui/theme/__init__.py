"""Utilities for turning theme configuration into ``marrow-theme.css``."""

from .generator import ThemeBuilder, css_var_name, generate_css
from .tables import (
    COMPACTNESS_MAP,
    DURATION_MAP,
    RADIUS_MAP,
    SHADOW_MAP,
    CompactnessPreset,
)

__all__ = [
    "COMPACTNESS_MAP",
    "DURATION_MAP",
    "RADIUS_MAP",
    "SHADOW_MAP",
    "CompactnessPreset",
    "ThemeBuilder",
    "css_var_name",
    "generate_css",
]
