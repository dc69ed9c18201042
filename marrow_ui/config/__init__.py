"""Load and validate Marrow UI theme configuration.

This subpackage parses a project's ``marrow.config.yaml``, checks that the
required palette and font fields are present, applies defaults to the
optional enum-like settings, and produces a :class:`MarrowConfig` that the
theme generator consumes. The primary entry point is :func:`load_config`;
:func:`build_config` performs the same conversion on an in-memory mapping.

Examples
--------
>>> from marrow_ui.config import build_config
>>> config = build_config(
...     {
...         "colors": {"light": {"primary": "220 90% 56%"}, "dark": {}},
...         "fonts": {"heading": "Inter", "body": "Inter"},
...     }
... )
>>> config.compactness
'normal'
"""

from .loader import build_config, load_config
from .models import ColorPalettes, ConfigError, FontConfig, MarrowConfig

__all__ = [
    "ColorPalettes",
    "ConfigError",
    "FontConfig",
    "MarrowConfig",
    "build_config",
    "load_config",
]
