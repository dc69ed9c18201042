"""Unit tests for front-matter parsing and layout rendering.

Rendered pages are parsed with BeautifulSoup so assertions target the
document structure (title, meta description, body data attributes) rather
than raw string offsets.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from marrow_ui.page_renderer import (
    DEFAULT_DESCRIPTION,
    DEFAULT_TITLE,
    LayoutNotFoundError,
    parse_front_matter,
    render_page,
)

BASE_LAYOUT = (
    "<html><head><title>{{title}}</title>"
    '<meta name="description" content="{{description}}"></head>'
    '<body data-section="{{activeSection}}" data-component="{{activeComponent}}">'
    "<main>{{slot}}</main><footer>{{title}}</footer></body></html>"
)


@pytest.fixture
def layouts_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "layouts"
    directory.mkdir()
    (directory / "base.html").write_text(BASE_LAYOUT, encoding="utf-8")
    (directory / "bare.html").write_text("[{{slot}}]", encoding="utf-8")
    return directory


def test_front_matter_is_split_from_body() -> None:
    page = parse_front_matter(
        "---\ntitle: Button\ndescription:  Clickable things \n---\n<p>Body</p>\n"
    )
    assert page.meta == {"title": "Button", "description": "Clickable things"}
    assert page.body == "<p>Body</p>\n"


def test_page_without_front_matter_is_all_body() -> None:
    page = parse_front_matter("<p>Only body</p>")
    assert page.meta == {}
    assert page.body == "<p>Only body</p>"


def test_lines_without_key_value_shape_are_ignored() -> None:
    page = parse_front_matter("---\ntitle: Ok\nnot a pair\nempty:\n---\nx")
    assert page.meta == {"title": "Ok"}


def test_later_delimiters_stay_in_body() -> None:
    page = parse_front_matter("---\ntitle: T\n---\nabove\n---\nbelow")
    assert page.body == "above\n---\nbelow"


def test_unterminated_front_matter_consumes_rest() -> None:
    page = parse_front_matter("---\ntitle: T\n<p>lost</p>")
    assert page.meta == {"title": "T"}
    assert page.body == ""


def test_render_page_substitutes_metadata(layouts_dir: Path) -> None:
    html = render_page(
        "---\ntitle: Dialog\ndescription: Modal windows\nsection: components\n"
        "component: dialog\n---\n<h1>Dialog</h1>",
        layouts_dir,
    )
    soup = BeautifulSoup(html, "html.parser")
    assert soup.title.get_text() == "Dialog"
    assert soup.find("meta", attrs={"name": "description"})["content"] == "Modal windows"
    assert soup.body["data-section"] == "components"
    assert soup.body["data-component"] == "dialog"
    assert soup.main.h1.get_text() == "Dialog"
    assert soup.footer.get_text() == "Dialog", "every occurrence should be replaced"


def test_render_page_applies_defaults(layouts_dir: Path) -> None:
    html = render_page("<p>Hello</p>", layouts_dir)
    soup = BeautifulSoup(html, "html.parser")
    assert soup.title.get_text() == DEFAULT_TITLE
    assert soup.find("meta", attrs={"name": "description"})["content"] == (
        DEFAULT_DESCRIPTION
    )
    assert soup.body["data-section"] == ""
    assert soup.body["data-component"] == ""


def test_body_placeholders_are_resolved(layouts_dir: Path) -> None:
    html = render_page("---\ntitle: Tabs\n---\n<h1>{{title}}</h1>", layouts_dir)
    soup = BeautifulSoup(html, "html.parser")
    assert soup.main.h1.get_text() == "Tabs"


def test_substituted_values_are_not_rescanned(layouts_dir: Path) -> None:
    html = render_page(
        "---\ntitle: {{description}}\ndescription: D\n---\n",
        layouts_dir,
    )
    soup = BeautifulSoup(html, "html.parser")
    assert soup.title.get_text() == "{{description}}"


def test_layout_is_selected_from_front_matter(layouts_dir: Path) -> None:
    html = render_page("---\nlayout: bare\n---\nX", layouts_dir)
    assert html == "[X]"


def test_missing_layout_names_path(layouts_dir: Path) -> None:
    with pytest.raises(LayoutNotFoundError, match="missing.html"):
        render_page("---\nlayout: missing\n---\n", layouts_dir)
