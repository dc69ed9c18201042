r"""Load component templates and split them into named sections.

Component templates start with a short header of HTML comments (title,
description, requirements) followed by a blank line. The body may contain
``<!-- @section: Name -->`` markers that divide it into examples the docs
site can show one at a time.

Example
-------
>>> from marrow_ui.template_loader import split_template
>>> result = split_template(
...     "<!-- Marrow UI: Button -->\n\n"
...     "<!-- @section: Primary -->\n<button>Go</button>\n"
... )
>>> result.sections
{'Primary': '<button>Go</button>'}
"""

from __future__ import annotations

import dataclasses as dc
import re
from pathlib import Path

from ._constants import COMPONENT_TEMPLATES_DIR

HEADER_PREFIX = "<!-- "
SECTION_TOKEN = "<!-- @section:"
SECTION_PATTERN = re.compile(r"^<!-- @section:\s*(.+?)\s*-->$", re.MULTILINE)
SECTION_MARKER_PATTERN = re.compile(r"<!-- @section:\s*.+?\s*-->\n?")


class TemplateNotFoundError(FileNotFoundError):
    """Raised when a component template file does not exist."""


class SectionNotFoundError(LookupError):
    """Raised when a template has no section with the requested name."""


@dc.dataclass(slots=True)
class TemplateResult:
    """Sections and marker-free body of a component template.

    Attributes
    ----------
    sections : dict[str, str]
        Section name to stripped section content, in marker order.
    full : str
        Header-stripped body with every section marker removed.
    """

    sections: dict[str, str]
    full: str


def _strip_header(text: str) -> str:
    """Drop leading comment lines and the blank line that follows them."""
    lines = text.split("\n")
    body_start = 0
    for idx, line in enumerate(lines):
        if line.startswith(HEADER_PREFIX):
            continue
        body_start = idx + (1 if not line.strip() else 0)
        break
    return "\n".join(lines[body_start:])


def _split_sections(body: str) -> dict[str, str]:
    """Return section contents keyed by marker name.

    A section ends at the last ``<!-- @section:`` token starting at or before
    the end of the next marker, not simply at the next marker's start. The
    two agree unless a marker name itself contains the token.
    """
    markers = [(match.group(1), match.end()) for match in SECTION_PATTERN.finditer(body)]
    sections: dict[str, str] = {}
    for idx, (name, start) in enumerate(markers):
        if idx + 1 < len(markers):
            next_end = markers[idx + 1][1]
            end = body.rfind(SECTION_TOKEN, 0, next_end + len(SECTION_TOKEN))
        else:
            end = len(body)
        sections[name] = body[start:end].strip()
    return sections


def split_template(text: str) -> TemplateResult:
    """Split raw template text into sections and a marker-free body.

    Parameters
    ----------
    text : str
        Full template file content, header included.

    Returns
    -------
    TemplateResult
        Parsed sections (empty when the body has no markers) and the
        stripped body with markers removed.
    """
    body = _strip_header(text)
    full = SECTION_MARKER_PATTERN.sub("", body).strip()
    return TemplateResult(sections=_split_sections(body), full=full)


def template_path(name: str, templates_dir: Path | None = None) -> Path:
    """Return the on-disk path of the template called ``name``."""
    return (templates_dir or COMPONENT_TEMPLATES_DIR) / f"{name}.html"


def load_template(name: str, *, templates_dir: Path | None = None) -> TemplateResult:
    """Read the ``name`` component template and split it.

    Raises
    ------
    TemplateNotFoundError
        If ``<templates_dir>/<name>.html`` does not exist.
    """
    path = template_path(name, templates_dir)
    if not path.is_file():
        msg = f"Template '{name}' not found at '{path}'."
        raise TemplateNotFoundError(msg)
    return split_template(path.read_text(encoding="utf-8"))


def load_section(
    name: str, section: str, *, templates_dir: Path | None = None
) -> str:
    """Return one named section from a component template.

    A section that exists but has no content returns an empty string.

    Raises
    ------
    SectionNotFoundError
        If the template has no such section; the message lists the
        sections that do exist.
    """
    result = load_template(name, templates_dir=templates_dir)
    try:
        return result.sections[section]
    except KeyError as exc:
        available = ", ".join(result.sections)
        msg = (
            f'Section "{section}" not found in template "{name}". '
            f"Available: {available}"
        )
        raise SectionNotFoundError(msg) from exc


def load_full(name: str, *, templates_dir: Path | None = None) -> str:
    """Return the template body with the header and markers removed."""
    return load_template(name, templates_dir=templates_dir).full


__all__ = [
    "SECTION_PATTERN",
    "SECTION_TOKEN",
    "SectionNotFoundError",
    "TemplateNotFoundError",
    "TemplateResult",
    "load_full",
    "load_section",
    "load_template",
    "split_template",
    "template_path",
]
