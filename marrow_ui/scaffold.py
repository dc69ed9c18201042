"""Scaffold the Marrow UI starter files into a project directory."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from ._constants import (
    ALPINE_JS_FILENAME,
    ASSETS_DIR,
    BASE_CSS_FILENAME,
    CONFIG_FILENAME,
    THEME_FILENAME,
)
from .config import load_config
from .theme import generate_css

DEFAULT_CONFIG_PATH = ASSETS_DIR / CONFIG_FILENAME


@dc.dataclass(slots=True)
class ScaffoldResult:
    """Files written or left untouched by :func:`init_project`.

    ``outcomes`` holds ``(path, created)`` pairs in the order the starter
    files are processed.
    """

    outcomes: list[tuple[Path, bool]] = dc.field(default_factory=list)

    @property
    def created(self) -> list[Path]:
        return [path for path, created in self.outcomes if created]

    @property
    def skipped(self) -> list[Path]:
        return [path for path, created in self.outcomes if not created]


def _starter_files() -> list[tuple[str, str]]:
    """Return ``(filename, content)`` pairs in the order they are written."""
    return [
        (CONFIG_FILENAME, DEFAULT_CONFIG_PATH.read_text(encoding="utf-8")),
        (
            BASE_CSS_FILENAME,
            (ASSETS_DIR / "css" / BASE_CSS_FILENAME).read_text(encoding="utf-8"),
        ),
        (
            ALPINE_JS_FILENAME,
            (ASSETS_DIR / "js" / ALPINE_JS_FILENAME).read_text(encoding="utf-8"),
        ),
        (THEME_FILENAME, generate_css(load_config(DEFAULT_CONFIG_PATH))),
    ]


def init_project(target_dir: Path, *, force: bool = False) -> ScaffoldResult:
    """Write the config, base CSS, Alpine.js definitions, and theme CSS.

    Parameters
    ----------
    target_dir : Path
        Project root receiving the starter files.
    force : bool, optional
        Overwrite files that already exist instead of skipping them.

    Returns
    -------
    ScaffoldResult
        Paths created and paths skipped because they already existed.
    """
    target_dir.mkdir(parents=True, exist_ok=True)
    result = ScaffoldResult()
    for filename, content in _starter_files():
        destination = target_dir / filename
        if destination.exists() and not force:
            result.outcomes.append((destination, False))
            continue
        destination.write_text(content, encoding="utf-8")
        result.outcomes.append((destination, True))
    return result


__all__ = ["DEFAULT_CONFIG_PATH", "ScaffoldResult", "init_project"]
