"""Common literal values used across marrow_ui.

These constants keep filenames and naming prefixes centralized so the CLI,
generators, and tests can import the same values without drifting. Intended
for internal use within the marrow_ui package.

Examples
--------
>>> from marrow_ui import _constants
>>> _constants.CSS_VAR_PREFIX + "radius"
'--marrow-radius'
>>> _constants.COMPONENTS_DEST.as_posix()
'components/ui'
"""

from pathlib import Path

CONFIG_FILENAME = "marrow.config.yaml"
THEME_FILENAME = "marrow-theme.css"
BASE_CSS_FILENAME = "marrow.css"
ALPINE_JS_FILENAME = "marrow.js"
CSS_VAR_PREFIX = "--marrow-"
COMPONENTS_DEST = Path("components") / "ui"
ASSETS_DIR = Path(__file__).parent / "assets"
COMPONENT_TEMPLATES_DIR = ASSETS_DIR / "components"
