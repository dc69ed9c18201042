"""Shared pytest-bdd fixtures and steps for the Marrow UI scenarios."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, then

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Share mutable scenario data across pytest-bdd steps.

    Returns
    -------
    ScenarioState
        Mutable dictionary used to exchange state between ``given``, ``when``,
        and ``then`` steps. Command steps store ``exit_code``, ``out`` and
        ``err`` here.
    """
    return {}


@given("an empty project directory")
def given_empty_project(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, scenario_state: ScenarioState
) -> None:
    """Switch into an empty temporary project directory."""
    monkeypatch.chdir(tmp_path)
    scenario_state["project_dir"] = tmp_path


@then("the command exits with status 1")
def then_exit_status(scenario_state: ScenarioState) -> None:
    assert scenario_state["exit_code"] == 1


@then(parsers.parse('the output reports "{text}"'))
def then_output_reports(scenario_state: ScenarioState, text: str) -> None:
    assert text in scenario_state["out"]


@then(parsers.parse('stderr mentions "{text}"'))
def then_stderr_mentions(scenario_state: ScenarioState, text: str) -> None:
    assert text in scenario_state["err"]
