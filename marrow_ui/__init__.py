"""Tooling for the Marrow UI component kit.

This package exposes the ``marrow-ui`` CLI, which scaffolds projects, copies
component templates, and generates ``marrow-theme.css`` from
``marrow.config.yaml``, together with the library functions behind it.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from marrow_ui import app
>>> app(["list"])  # doctest: +SKIP
>>> from marrow_ui import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
