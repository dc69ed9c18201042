"""Cyclopts CLI entrypoint for scaffolding and theming Marrow UI projects.

The ``marrow-ui`` console script defined here copies the starter files into
a project (``init``), copies component templates (``add``), regenerates
``marrow-theme.css`` from ``marrow.config.yaml`` (``build``), lists the
bundled components (``list``), and builds the documentation site
(``site``). Every command runs once against the current directory and
either finishes or exits with status 1.

Examples
--------
Scaffold a project and pull in two components:

>>> from marrow_ui.cli import app
>>> app(["init"])  # doctest: +SKIP
>>> app(["add", "button", "card"])  # doctest: +SKIP

Regenerate the theme after editing the config:

>>> from marrow_ui.cli import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from ruamel.yaml.error import YAMLError

from ._constants import COMPONENTS_DEST, CONFIG_FILENAME, THEME_FILENAME
from .components import add_components, available_components
from .config import ConfigError, MarrowConfig, load_config
from .interactivity import data_components_in
from .scaffold import init_project
from .site import SiteBuilder, UnsafeOutputError
from .theme import ThemeBuilder

LIST_COLUMNS = 3
LIST_COLUMN_WIDTH = 22
INIT_INSTRUCTIONS = """
  Done! Add these to your HTML <head>:

  <!-- Marrow UI -->
  <link rel="stylesheet" href="./marrow-theme.css">
  <link rel="stylesheet" href="./marrow.css">
  <script src="./marrow.js"></script>

  <!-- Tailwind CSS -->
  <script src="https://cdn.tailwindcss.com"></script>

  <!-- Alpine.js -->
  <script defer src="https://cdn.jsdelivr.net/npm/alpinejs@3.x.x/dist/cdn.min.js"></script>

  Then customize marrow.config.yaml and run:
    marrow-ui build

  Add components:
    marrow-ui add button card dialog
"""

app = App(
    name="marrow-ui",
    help="A sleek UI kit built with Tailwind CSS and Alpine.js.",
    config=cyclopts.config.Env("MARROW_", command=False),  # type: ignore[unknown-argument]
)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _fail(*lines: str) -> typ.NoReturn:
    """Print ``lines`` to stderr and exit with status 1."""
    for line in lines:
        print(f"  {line}", file=sys.stderr)
    raise SystemExit(1)


def _load_theme_config(config: Path) -> MarrowConfig:
    """Load ``config`` or exit with a message when it is missing or invalid."""
    if not config.exists():
        _fail(f'No {config.name} found. Run "marrow-ui init" first.')
    try:
        return load_config(config)
    except (ConfigError, YAMLError) as exc:
        _fail(f"Invalid config {_format_path(config)}: {exc}")


@app.command(help="Initialize Marrow UI in the current project.")
def init(
    *,
    force: typ.Annotated[
        bool, Parameter(help="Overwrite files that already exist")
    ] = False,
) -> None:
    """Write the starter config, stylesheets, and Alpine.js definitions.

    Parameters
    ----------
    force : bool, optional
        Replace existing files instead of skipping them.

    Returns
    -------
    None
        Prints one line per file created or skipped, then setup notes.
    """
    print("\n  Initializing Marrow UI...\n")
    result = init_project(Path.cwd(), force=force)
    for path, created in result.outcomes:
        if created:
            print(f"  Created: {path.name}")
        else:
            print(f"  Skipped (exists): {_format_path(path)}")
    print(INIT_INSTRUCTIONS)


@app.command(help="Add component templates to components/ui/.")
def add(
    *names: str,
    all_: typ.Annotated[
        bool, Parameter(name="--all", help="Add every bundled component")
    ] = False,
) -> None:
    """Copy the named component templates into ``components/ui``.

    Parameters
    ----------
    *names : str
        Component names, matched case-insensitively. Unknown names are
        reported and skipped without failing the command.
    all_ : bool, optional
        Ignore ``names`` and copy every bundled component.

    Raises
    ------
    SystemExit
        With status 1 when no templates are bundled or no names were given.
    """
    available = available_components()
    if not available:
        _fail("No component templates found in package.")

    requested = available if all_ else list(names)
    if not requested:
        _fail(
            "Specify component names or use --all:",
            "  marrow-ui add button card dialog",
            "  marrow-ui add --all",
        )

    print("\n  Adding components...\n")
    dest_dir = Path.cwd() / COMPONENTS_DEST
    result = add_components(requested, dest_dir)
    for outcome in result.outcomes:
        path = outcome.path
        if path is None:
            print(f"  Unknown: {outcome.name} (skipped)")
            continue
        print(f"  Added: {(COMPONENTS_DEST / path.name).as_posix()}")
        kinds = data_components_in(path.read_text(encoding="utf-8"))
        if kinds:
            print(f"    uses marrow.js: {', '.join(kinds)}")
    print(
        f"\n  {len(result.added)} component(s) added to "
        f"{COMPONENTS_DEST.as_posix()}/\n"
    )


@app.command(help="Generate theme CSS from marrow.config.yaml.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to the theme config")
    ] = Path(CONFIG_FILENAME),
    output: typ.Annotated[
        Path, Parameter(help="Where to write the generated CSS")
    ] = Path(THEME_FILENAME),
) -> None:
    """Regenerate the theme stylesheet from the project config.

    Parameters
    ----------
    config : Path, optional
        Config file to read; defaults to ``marrow.config.yaml``.
    output : Path, optional
        Stylesheet to write; defaults to ``marrow-theme.css``.

    Raises
    ------
    SystemExit
        With status 1 when the config is missing or invalid.
    """
    theme_config = _load_theme_config(config)
    written = ThemeBuilder(theme_config, output).run()
    print(f"\n  Generated theme CSS → {_format_path(written)}\n")


@app.command(name="list", help="List all available components.")
def list_components() -> None:
    """Print the bundled component names in fixed-width columns."""
    components = available_components()
    print(f"\n  Marrow UI Components ({len(components)}):\n")
    for start in range(0, len(components), LIST_COLUMNS):
        row = components[start : start + LIST_COLUMNS]
        print("  " + "".join(name.ljust(LIST_COLUMN_WIDTH) for name in row))
    print("")


@app.command(help="Build the documentation site from pages and layouts.")
def site(
    *,
    source: typ.Annotated[Path, Parameter(help="Site source folder")] = Path("site"),
    output: typ.Annotated[Path, Parameter(help="Output folder")] = Path("dist"),
    config: typ.Annotated[
        Path, Parameter(help="Path to the theme config")
    ] = Path(CONFIG_FILENAME),
) -> None:
    """Render every page under ``<source>/pages`` into ``output``."""
    theme_config = _load_theme_config(config)
    print("Building Marrow UI...")
    try:
        written = SiteBuilder(source, output, theme_config).run()
    except UnsafeOutputError as exc:
        _fail(str(exc))
    for path in written:
        print(f"wrote {_format_path(path)}")
    print(f"Built {len(written)} pages.")


@app.command(name="help", help="Show this help message.")
def help_() -> None:
    """Print usage for every command."""
    app.help_print([])


@app.default
def default() -> None:
    """Show usage when no command is given."""
    app.help_print([])


def main() -> None:
    """Invoke the Cyclopts application behind the ``marrow-ui`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
