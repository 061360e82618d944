"""Tests for the check command."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

from click.testing import CliRunner

from whencal.cli import cli


class TestCheckCommand:
    def test_healthy(self, cli_runner: CliRunner, write_calendar: Callable[..., Path]) -> None:
        path = write_calendar("* Dec 25,Christmas")
        result = cli_runner.invoke(cli, ["--calendar", str(path), "check"])
        assert result.exit_code == 0
        assert "No issues found" in result.stdout

    def test_lists_issues(
        self, cli_runner: CliRunner, write_calendar: Callable[..., Path]
    ) -> None:
        path = write_calendar("* Dec 25,Christmas", "m=9 & w=2 &,Dangling")
        result = cli_runner.invoke(cli, ["--calendar", str(path), "check"])
        assert result.exit_code == 0
        assert "line 2 [bad_shape]" in result.stdout

    def test_strict_fails_on_issues(
        self, cli_runner: CliRunner, write_calendar: Callable[..., Path]
    ) -> None:
        path = write_calendar("bogus")
        result = cli_runner.invoke(cli, ["--calendar", str(path), "check", "--strict"])
        assert result.exit_code == 1

    def test_json(self, cli_runner: CliRunner, write_calendar: Callable[..., Path]) -> None:
        path = write_calendar("1999 Ju 17,x")
        result = cli_runner.invoke(cli, ["--json", "--calendar", str(path), "check"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["op"] == "check"
        assert data["data"]["issues"][0]["kind"] == "bad_month"

    def test_no_calendar(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check"])
        assert result.exit_code == 1
