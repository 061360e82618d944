"""Shared pytest fixtures and test helpers for whencal tests."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from whencal.config.settings import WhenSettings


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at a temp directory and drop any WHENCAL_* env vars.

    Keeps tests from reading the developer's real preferences file.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for key in list(os.environ):
        if key.startswith("WHENCAL_"):
            monkeypatch.delenv(key)
    return home


@pytest.fixture
def home(_isolated_home: Path) -> Path:
    """The temporary HOME directory."""
    return _isolated_home


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_calendar(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing calendar lines to ``tmp_path/calendar``."""

    def _write(*lines: str) -> Path:
        path = tmp_path / "calendar"
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_settings() -> Callable[..., WhenSettings]:
    """Factory building settings without touching a preferences file."""

    def _make(calendar: Path | None = None, **kwargs: Any) -> WhenSettings:
        return WhenSettings(calendar=calendar, **kwargs)

    return _make
