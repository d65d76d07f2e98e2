"""Tests for the objkit CLI commands."""
from __future__ import annotations

import logging

import pytest
from click.testing import CliRunner

from objkit import __version__
from objkit.cli.main import cli
from objkit.cli.selector import build_selector


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OBJKIT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("OBJKIT_MATCH_FIELDS_BY_NAME", raising=False)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "area" in result.output
        assert "selector" in result.output
        assert "roundtrip" in result.output

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_log_level_option(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--log-level", "info", "area", "1", "1"])
        assert result.exit_code == 0
        assert logging.getLogger("objkit").level == logging.INFO

    def test_invalid_env_log_level(
        self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("OBJKIT_LOG_LEVEL", "LOUD")
        result = runner.invoke(cli, ["area", "1", "1"])
        assert result.exit_code == 2
        assert "Unknown log level" in result.output


# ---------------------------------------------------------------------------
# area command
# ---------------------------------------------------------------------------


class TestAreaCommand:
    def test_integer_area(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["area", "10", "20"])
        assert result.exit_code == 0
        assert result.output.strip() == "200"

    def test_fractional_area(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["area", "1.5", "3"])
        assert result.output.strip() == "4.5"

    def test_non_numeric(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["area", "wide", "3"])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# selector command
# ---------------------------------------------------------------------------


class TestSelectorCommand:
    def test_compound(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["selector", "element=a", 'attr=href$=".png"', "pseudo-class=focus"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == 'a[href$=".png"]:focus'

    def test_combinator(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["selector", "element=div", "combinator=+", "element=span"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "div + span"

    def test_duplicate_part(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["selector", "element=div", "element=p"])
        assert result.exit_code == 1
        assert "Selector error" in result.output
        assert "more than one time" in result.output

    def test_order_error(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["selector", "class=a", "id=main"])
        assert result.exit_code == 1
        assert "arranged in the following order" in result.output

    def test_bad_token(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["selector", "tag=div"])
        assert result.exit_code == 2

    def test_dangling_combinator(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["selector", "element=div", "combinator=>"])
        assert result.exit_code == 2

    def test_requires_tokens(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["selector"])
        assert result.exit_code == 2


class TestBuildSelector:
    def test_descendant_default(self) -> None:
        state = build_selector(("element=ul", "combinator=", "element=li"))
        assert state.stringify() == "ul   li"

    def test_chain_of_three(self) -> None:
        state = build_selector(
            ("id=nav", "combinator=>", "element=ul", "combinator=~", "class=x")
        )
        assert state.stringify() == "#nav > ul ~ .x"


# ---------------------------------------------------------------------------
# roundtrip command
# ---------------------------------------------------------------------------


class TestRoundtripCommand:
    def test_positional(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["roundtrip", "10", "20"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines[0] == '{"width":10.0,"height":20.0}'
        assert lines[1] == "area: 200"

    def test_by_name(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["roundtrip", "--by-name", "2", "3"])
        assert result.exit_code == 0
        assert "area: 6" in result.output

    def test_by_name_from_env(
        self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("OBJKIT_MATCH_FIELDS_BY_NAME", "yes")
        result = runner.invoke(cli, ["roundtrip", "2", "3"])
        assert result.exit_code == 0
        assert "area: 6" in result.output
