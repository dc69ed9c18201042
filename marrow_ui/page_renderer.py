r"""Render documentation pages into layout templates.

Pages are HTML fragments with an optional front-matter block of flat
``key: value`` pairs between two ``---`` lines. The fragment is placed into
a layout (``layouts/<layout>.html``, ``base`` by default) by substituting
``{{slot}}`` and the metadata placeholders.

Example
-------
>>> from marrow_ui.page_renderer import parse_front_matter
>>> page = parse_front_matter("---\ntitle: Button\n---\n<p>Hi</p>")
>>> page.meta, page.body
({'title': 'Button'}, '<p>Hi</p>')
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ
from pathlib import Path

FRONT_MATTER_DELIMITER = "---"
META_PATTERN = re.compile(r"^(\w+):\s*(.+)$")
PLACEHOLDER_PATTERN = re.compile(
    r"\{\{(title|description|activeSection|activeComponent)\}\}"
)
SLOT_PLACEHOLDER = "{{slot}}"
DEFAULT_LAYOUT = "base"
DEFAULT_TITLE = "Marrow UI"
DEFAULT_DESCRIPTION = "A sleek UI kit built with Tailwind CSS and Alpine.js"


class LayoutNotFoundError(FileNotFoundError):
    """Raised when a page references a layout that does not exist."""


@dc.dataclass(slots=True)
class FrontMatter:
    """Metadata and body content split from a page file."""

    meta: dict[str, str]
    body: str


def parse_front_matter(text: str) -> FrontMatter:
    """Split ``text`` into front-matter metadata and body.

    The first line equal to ``---`` (ignoring surrounding whitespace) opens
    the metadata block and the next one closes it. Later ``---`` lines are
    ordinary body text. Without a closing delimiter every following line is
    read as metadata.
    """
    meta: dict[str, str] = {}
    body: list[str] = []
    delimiters_seen = 0
    for line in text.split("\n"):
        if line.strip() == FRONT_MATTER_DELIMITER and delimiters_seen < 2:
            delimiters_seen += 1
            continue
        if delimiters_seen == 1:
            match = META_PATTERN.match(line)
            if match:
                meta[match.group(1).strip()] = match.group(2).strip()
        else:
            body.append(line)
    return FrontMatter(meta=meta, body="\n".join(body))


def placeholder_values(meta: typ.Mapping[str, str]) -> dict[str, str]:
    """Return layout placeholder values for ``meta`` with defaults applied."""
    return {
        "title": meta.get("title") or DEFAULT_TITLE,
        "description": meta.get("description") or DEFAULT_DESCRIPTION,
        "activeSection": meta.get("section") or "",
        "activeComponent": meta.get("component") or "",
    }


def fill_layout(layout: str, page: FrontMatter) -> str:
    """Substitute the page body and metadata into ``layout``.

    ``{{slot}}`` is filled first so placeholders written in the page body
    are resolved too; the remaining placeholders are then replaced in one
    pass, so substituted values are never scanned again.
    """
    values = placeholder_values(page.meta)
    with_body = layout.replace(SLOT_PLACEHOLDER, page.body)
    return PLACEHOLDER_PATTERN.sub(lambda match: values[match.group(1)], with_body)


def load_layout(name: str, layouts_dir: Path) -> str:
    """Read ``<layouts_dir>/<name>.html``.

    Raises
    ------
    LayoutNotFoundError
        If the layout file is missing.
    """
    path = layouts_dir / f"{name}.html"
    if not path.is_file():
        msg = f"Layout '{name}' not found at '{path}'."
        raise LayoutNotFoundError(msg)
    return path.read_text(encoding="utf-8")


def render_page(text: str, layouts_dir: Path) -> str:
    """Render raw page text into its layout.

    Parameters
    ----------
    text : str
        Page content, optionally starting with front matter.
    layouts_dir : Path
        Directory holding ``<layout>.html`` files.

    Returns
    -------
    str
        The layout with every placeholder substituted. Nothing is written
        to disk.
    """
    page = parse_front_matter(text)
    layout = load_layout(page.meta.get("layout") or DEFAULT_LAYOUT, layouts_dir)
    return fill_layout(layout, page)


__all__ = [
    "DEFAULT_DESCRIPTION",
    "DEFAULT_LAYOUT",
    "DEFAULT_TITLE",
    "FrontMatter",
    "LayoutNotFoundError",
    "fill_layout",
    "load_layout",
    "parse_front_matter",
    "placeholder_values",
    "render_page",
]
