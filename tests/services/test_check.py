"""Tests for CheckService."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from whencal.config.settings import WhenSettings
from whencal.services.check import CheckService


class TestCheck:
    def test_healthy_calendar(
        self,
        write_calendar: Callable[..., Path],
        make_settings: Callable[..., WhenSettings],
    ) -> None:
        path = write_calendar("# birthdays", "* Jun 17,Me", "m=nov & w=4 & a=4,Thanksgiving")
        result = CheckService(make_settings(path)).check()
        assert result.ok
        assert result.data["healthy"] is True
        assert result.data["count"] == 0
        assert result.data["entries"] == 2
        assert result.data["path"] == str(path)

    def test_reports_each_bad_line(
        self,
        write_calendar: Callable[..., Path],
        make_settings: Callable[..., WhenSettings],
    ) -> None:
        path = write_calendar(
            "* Ju 17,Ambiguous month",
            "no comma",
            "q=1,Unknown key",
            "* Dec 25,Fine",
            "w=2 &,Dangling",
        )
        result = CheckService(make_settings(path)).check()
        assert result.ok
        assert result.data["healthy"] is False
        issues = result.data["issues"]
        assert [(i["line"], i["kind"]) for i in issues] == [
            (1, "bad_month"),
            (2, "bad_line"),
            (3, "unknown_key"),
            (5, "bad_shape"),
        ]
        assert all(i["severity"] == "error" for i in issues)
        assert issues[0]["text"] == "* Ju 17"

    def test_no_calendar(self, make_settings: Callable[..., WhenSettings]) -> None:
        result = CheckService(make_settings()).check()
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NO_CALENDAR"
