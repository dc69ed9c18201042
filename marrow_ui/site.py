"""Marrow UI documentation site build.

This module turns a site source tree into a static output folder:

* ``pages/**/*.html`` are rendered through their layouts
  (``layouts/<layout>.html``) with :func:`marrow_ui.page_renderer.render_page`
  and written to the same relative path under the output folder.
* ``css/`` and ``js/`` files are copied verbatim.
* ``css/marrow-theme.css`` is generated from the theme config.

The output folder is deleted and recreated on every run, so stale pages
never survive a rebuild. Output folders that would take the sources or the
working directory with them are refused with :class:`UnsafeOutputError`.

>>> from pathlib import Path
>>> from marrow_ui.config import load_config
>>> builder = SiteBuilder(Path("site"), Path("dist"), load_config(Path("marrow.config.yaml")))  # doctest: +SKIP
>>> pages = builder.run()  # doctest: +SKIP
"""

from __future__ import annotations

import shutil
import typing as typ
from pathlib import Path

from ._constants import THEME_FILENAME
from .page_renderer import render_page
from .theme import ThemeBuilder

if typ.TYPE_CHECKING:
    from .config import MarrowConfig

STATIC_DIRS: tuple[str, ...] = ("css", "js")


class UnsafeOutputError(ValueError):
    """Raised when clearing the output folder would delete site sources."""


class SiteBuilder:
    """Render the docs site pages and assets into an output folder."""

    def __init__(
        self, source_dir: Path, output_dir: Path, config: MarrowConfig
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        source_dir : Path
            Site source holding ``pages/``, ``layouts/`` and optional
            ``css/`` and ``js/`` folders.
        output_dir : Path
            Destination folder; removed and recreated by :meth:`run`.
        config : MarrowConfig
            Theme used to generate ``css/marrow-theme.css``.
        """
        self.source_dir = source_dir
        self.output_dir = output_dir
        self.config = config

    @property
    def pages_dir(self) -> Path:
        """Return the folder scanned for page fragments."""
        return self.source_dir / "pages"

    @property
    def layouts_dir(self) -> Path:
        """Return the folder holding layout templates."""
        return self.source_dir / "layouts"

    def run(self) -> list[Path]:
        """Build the site and return the rendered page paths.

        Raises
        ------
        UnsafeOutputError
            If the output folder is the source folder, sits inside it,
            contains it, or contains the working directory. Nothing is
            deleted in that case.
        LayoutNotFoundError
            If a page names a layout missing from ``layouts/``. Files
            written before the failure stay on disk.
        """
        self._check_output_dir()
        if self.output_dir.exists():
            shutil.rmtree(self.output_dir)
        self.output_dir.mkdir(parents=True)

        ThemeBuilder(self.config, self.output_dir / "css" / THEME_FILENAME).run()
        self._copy_static()

        written: list[Path] = []
        for page_path in self._discover_pages():
            relative = page_path.relative_to(self.pages_dir)
            output_path = self.output_dir / relative
            output_path.parent.mkdir(parents=True, exist_ok=True)
            html = render_page(page_path.read_text(encoding="utf-8"), self.layouts_dir)
            output_path.write_text(html, encoding="utf-8")
            written.append(output_path)
        return written

    def _check_output_dir(self) -> None:
        output = self.output_dir.resolve()
        protected = (self.source_dir.resolve(), Path.cwd().resolve())
        for path in protected:
            if output == path or output in path.parents:
                msg = (
                    f"Refusing to clear output folder '{self.output_dir}': "
                    f"it is or contains '{path}'."
                )
                raise UnsafeOutputError(msg)
        if protected[0] in output.parents:
            msg = (
                f"Output folder '{self.output_dir}' must not be inside the "
                f"source folder '{self.source_dir}'."
            )
            raise UnsafeOutputError(msg)

    def _discover_pages(self) -> list[Path]:
        if not self.pages_dir.is_dir():
            return []
        return sorted(path for path in self.pages_dir.rglob("*.html") if path.is_file())

    def _copy_static(self) -> None:
        for name in STATIC_DIRS:
            source = self.source_dir / name
            if not source.is_dir():
                continue
            destination = self.output_dir / name
            destination.mkdir(parents=True, exist_ok=True)
            for entry in sorted(source.iterdir()):
                if entry.is_file():
                    shutil.copyfile(entry, destination / entry.name)


__all__ = ["SiteBuilder", "UnsafeOutputError"]
