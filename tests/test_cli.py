"""Tests for the ``marrow-ui`` command functions.

Commands are called directly so each test controls the working directory
with ``monkeypatch.chdir`` and inspects printed output through ``capsys``.
Failures surface as ``SystemExit`` with status 1 and a message on stderr.
"""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from marrow_ui import cli
from marrow_ui.components import available_components

ProjectDir = Path


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> ProjectDir:
    """Run each command inside an empty temporary project."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_init_reports_created_files(
    project_dir: ProjectDir, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.init()
    out = capsys.readouterr().out
    assert "  Created: marrow.config.yaml" in out
    assert "  Created: marrow-theme.css" in out
    assert "marrow-ui build" in out
    assert (project_dir / "marrow.js").is_file()


def test_second_init_skips_everything(
    project_dir: ProjectDir, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.init()
    capsys.readouterr()
    cli.init()
    out = capsys.readouterr().out
    assert "  Skipped (exists): marrow.config.yaml" in out
    assert "Created:" not in out


def test_init_reports_files_in_processing_order(
    project_dir: ProjectDir, capsys: pytest.CaptureFixture[str]
) -> None:
    (project_dir / "marrow.css").write_text("/* mine */", encoding="utf-8")
    cli.init()
    lines = [
        line.strip()
        for line in capsys.readouterr().out.splitlines()
        if line.strip().startswith(("Created:", "Skipped"))
    ]
    assert lines == [
        "Created: marrow.config.yaml",
        "Skipped (exists): marrow.css",
        "Created: marrow.js",
        "Created: marrow-theme.css",
    ]


def test_add_reports_copied_components(
    project_dir: ProjectDir, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.add("Button", "dialog")
    out = capsys.readouterr().out
    assert "  Added: components/ui/button.html" in out
    assert "  Added: components/ui/dialog.html" in out
    assert "    uses marrow.js: mwDialog, mwAlertDialog" in out
    assert "2 component(s) added to components/ui/" in out
    assert (project_dir / "components" / "ui" / "dialog.html").is_file()


def test_add_with_only_unknown_names_succeeds(
    project_dir: ProjectDir, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.add("nope")
    out = capsys.readouterr().out
    assert "  Unknown: nope (skipped)" in out
    assert "0 component(s) added to components/ui/" in out


def test_add_reports_names_in_request_order(
    project_dir: ProjectDir, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.add("card", "nope", "badge")
    lines = [
        line.strip()
        for line in capsys.readouterr().out.splitlines()
        if line.strip().startswith(("Added:", "Unknown:"))
    ]
    assert lines == [
        "Added: components/ui/card.html",
        "Unknown: nope (skipped)",
        "Added: components/ui/badge.html",
    ]


def test_add_with_mixed_names_adds_known(
    project_dir: ProjectDir, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.add("nope", "card")
    out = capsys.readouterr().out
    assert "  Unknown: nope (skipped)" in out
    assert "1 component(s) added to components/ui/" in out


def test_add_all_copies_every_component(
    project_dir: ProjectDir, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.add(all_=True)
    out = capsys.readouterr().out
    expected = len(available_components())
    assert f"{expected} component(s) added" in out
    assert len(list((project_dir / "components" / "ui").iterdir())) == expected


def test_add_without_names_fails(
    project_dir: ProjectDir, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.add()
    assert excinfo.value.code == 1
    assert "Specify component names or use --all" in capsys.readouterr().err
    assert not (project_dir / "components").exists()


def test_build_without_config_fails(
    project_dir: ProjectDir, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.build()
    assert excinfo.value.code == 1
    assert 'No marrow.config.yaml found. Run "marrow-ui init" first.' in (
        capsys.readouterr().err
    )
    assert not (project_dir / "marrow-theme.css").exists()


def test_build_writes_theme(
    project_dir: ProjectDir, capsys: pytest.CaptureFixture[str]
) -> None:
    (project_dir / "marrow.config.yaml").write_text(
        dedent(
            """
            radius: sm
            compactness: compact
            transitionDuration: fast
            shadow: none
            colors:
              light: {primary: "220 90% 56%"}
              dark: {primary: "220 90% 56%"}
            fonts: {heading: Inter, body: Inter}
            """
        ).strip()
        + "\n",
        encoding="utf-8",
    )
    cli.build()
    assert "Generated theme CSS → marrow-theme.css" in capsys.readouterr().out
    css = (project_dir / "marrow-theme.css").read_text(encoding="utf-8")
    assert "--marrow-radius: 0.25rem;" in css
    assert "--marrow-duration: 100ms;" in css


def test_build_with_invalid_config_fails(
    project_dir: ProjectDir, capsys: pytest.CaptureFixture[str]
) -> None:
    (project_dir / "marrow.config.yaml").write_text("colors: {}\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        cli.build()
    assert excinfo.value.code == 1
    assert "colors.light" in capsys.readouterr().err


def test_build_with_malformed_yaml_fails(
    project_dir: ProjectDir, capsys: pytest.CaptureFixture[str]
) -> None:
    (project_dir / "marrow.config.yaml").write_text(
        "colors: [unclosed\n", encoding="utf-8"
    )
    with pytest.raises(SystemExit) as excinfo:
        cli.build()
    assert excinfo.value.code == 1
    assert "Invalid config marrow.config.yaml" in capsys.readouterr().err
    assert not (project_dir / "marrow-theme.css").exists()


def test_build_honours_custom_paths(
    project_dir: ProjectDir, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.init()
    capsys.readouterr()
    cli.build(
        config=Path("marrow.config.yaml"), output=Path("static") / "theme.css"
    )
    assert (project_dir / "static" / "theme.css").is_file()


def test_list_prints_three_columns(
    project_dir: ProjectDir, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.list_components()
    out = capsys.readouterr().out
    names = available_components()
    assert f"  Marrow UI Components ({len(names)}):" in out
    first_row = "  " + "".join(name.ljust(22) for name in names[:3])
    assert first_row in out.splitlines()


def test_site_builds_pages(
    project_dir: ProjectDir, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.init()
    source = project_dir / "site"
    (source / "pages").mkdir(parents=True)
    (source / "layouts").mkdir()
    (source / "layouts" / "base.html").write_text(
        "<main>{{slot}}</main>", encoding="utf-8"
    )
    (source / "pages" / "index.html").write_text("<p>Hi</p>", encoding="utf-8")
    capsys.readouterr()
    cli.site()
    out = capsys.readouterr().out
    assert out.startswith("Building Marrow UI...")
    assert "Built 1 pages." in out
    assert (project_dir / "dist" / "index.html").read_text(encoding="utf-8") == (
        "<main><p>Hi</p></main>"
    )


def test_help_lists_commands(capsys: pytest.CaptureFixture[str]) -> None:
    cli.help_()
    out = capsys.readouterr().out
    for command in ("init", "add", "build", "list"):
        assert command in out


def test_site_refuses_to_clear_its_sources(
    project_dir: ProjectDir, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.init()
    source = project_dir / "site"
    (source / "pages").mkdir(parents=True)
    (source / "layouts").mkdir()
    layout = source / "layouts" / "base.html"
    layout.write_text("<main>{{slot}}</main>", encoding="utf-8")
    (source / "pages" / "index.html").write_text("<p>Hi</p>", encoding="utf-8")
    capsys.readouterr()
    with pytest.raises(SystemExit) as excinfo:
        cli.site(output=Path("site"))
    assert excinfo.value.code == 1
    assert "Refusing to clear output folder" in capsys.readouterr().err
    assert layout.is_file()
    assert (source / "pages" / "index.html").is_file()
