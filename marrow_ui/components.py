"""Discover bundled component templates and copy them into a project.

The package ships one ``<name>.html`` file per component under
``marrow_ui/assets/components``. :func:`add_components` copies a selection of
them into a project's ``components/ui`` folder, matching names
case-insensitively and skipping names it does not know.
"""

from __future__ import annotations

import dataclasses as dc
import shutil
import typing as typ
from pathlib import Path

from ._constants import COMPONENT_TEMPLATES_DIR
from .template_loader import template_path

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@dc.dataclass(slots=True)
class AddOutcome:
    """What happened to one requested component name.

    Attributes
    ----------
    name : str
        Normalized component name.
    path : Path or None
        Destination written, or ``None`` when no bundled template matched.
    """

    name: str
    path: Path | None = None


@dc.dataclass(slots=True)
class AddResult:
    """Outcome of copying component templates into a project.

    ``outcomes`` keeps one entry per requested name in request order;
    ``added`` and ``skipped`` are views over it.
    """

    outcomes: list[AddOutcome] = dc.field(default_factory=list)

    @property
    def added(self) -> list[Path]:
        """Return the destination paths written, in request order."""
        return [outcome.path for outcome in self.outcomes if outcome.path is not None]

    @property
    def skipped(self) -> list[str]:
        """Return the names that matched no bundled template."""
        return [outcome.name for outcome in self.outcomes if outcome.path is None]


def available_components(templates_dir: Path | None = None) -> list[str]:
    """Return the sorted names of the bundled component templates.

    An absent templates directory yields an empty list.
    """
    directory = templates_dir or COMPONENT_TEMPLATES_DIR
    if not directory.is_dir():
        return []
    return sorted(path.stem for path in directory.glob("*.html") if path.is_file())


def normalize_name(name: str) -> str:
    """Return the lookup form of a user-supplied component name."""
    return name.lower().strip()


def add_components(
    names: cabc.Iterable[str],
    dest_dir: Path,
    *,
    templates_dir: Path | None = None,
) -> AddResult:
    """Copy the named component templates into ``dest_dir``.

    Parameters
    ----------
    names : Iterable[str]
        Requested component names; matched case-insensitively after
        stripping surrounding whitespace.
    dest_dir : Path
        Folder receiving ``<name>.html`` copies. Created when missing.
        Existing copies are overwritten.
    templates_dir : Path, optional
        Source folder; defaults to the bundled templates.

    Returns
    -------
    AddResult
        Written paths and skipped names. Unknown names never abort the batch.
    """
    available = set(available_components(templates_dir))
    dest_dir.mkdir(parents=True, exist_ok=True)
    result = AddResult()
    for name in names:
        normalized = normalize_name(name)
        if normalized not in available:
            result.outcomes.append(AddOutcome(normalized))
            continue
        destination = dest_dir / f"{normalized}.html"
        shutil.copyfile(template_path(normalized, templates_dir), destination)
        result.outcomes.append(AddOutcome(normalized, destination))
    return result


__all__ = [
    "AddOutcome",
    "AddResult",
    "add_components",
    "available_components",
    "normalize_name",
]
