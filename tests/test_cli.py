"""Tests for the root whencal CLI."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from whencal import __version__
from whencal.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "whencal" in result.output
    assert "--future" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_examples(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--examples"])
    assert result.exit_code == 0
    assert "whencal --future 30" in result.output


@pytest.mark.parametrize(
    "flag", ["--json", "-q", "-v", "--log-json", "--no-interact", "--header", "--noheader"]
)
def test_flags_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


EXPECTED_COMMANDS = ["w", "m", "y", "e", "init", "check"]


@pytest.mark.parametrize("name", EXPECTED_COMMANDS)
def test_command_registered(cli_runner: CliRunner, name: str) -> None:
    result = cli_runner.invoke(cli, [name, "--help"])
    assert result.exit_code == 0


def test_invalid_preference_value(cli_runner: CliRunner, tmp_path: Path) -> None:
    prefs = tmp_path / "prefs"
    prefs.write_text("future = two weeks\n")
    result = cli_runner.invoke(cli, ["-p", str(prefs)])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "future" in result.stderr
    assert str(prefs) in result.stderr
    assert "Traceback" not in result.output
