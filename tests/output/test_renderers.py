"""Tests for Rich renderers and the formatter layer."""

from __future__ import annotations

import json
from datetime import date

from whencal.output.formatters import OutputSettings, format_result
from whencal.output.renderers import format_date, render_quiet, render_result
from whencal.services.result import ServiceError, ServiceResult

REPORT = ServiceResult(
    ok=True,
    op="report",
    data={
        "today": "2021-09-20",
        "time": "14:03",
        "first": "2021-09-19",
        "last": "2021-10-04",
        "count": 3,
        "items": [
            {"date": "2021-09-20", "label": "today", "description": "Dentist", "line": 2},
            {"date": "2021-09-21", "label": "tomorrow", "description": "Club [x]", "line": 3},
            {"date": "2021-10-02", "label": "", "description": "Party", "line": 4},
        ],
    },
)


class TestFormatDate:
    def test_single_digit_day_is_padded(self) -> None:
        assert format_date(date(2021, 1, 9)) == "2021 Jan  9"

    def test_two_digit_day(self) -> None:
        assert format_date(date(1999, 6, 17)) == "1999 Jun 17"


class TestReportRendering:
    def test_header_and_lines(self) -> None:
        lines = render_result(REPORT).splitlines()
        assert lines[0] == "Mon 2021 Sep 20 14:03"
        assert lines[1] == ""
        assert lines[2] == "today      2021 Sep 20 Dentist"
        assert lines[3] == "tomorrow   2021 Sep 21 Club [x]"
        assert lines[4] == "           2021 Oct  2 Party"

    def test_no_header(self) -> None:
        lines = render_result(REPORT, header=False).splitlines()
        assert lines[0] == "today      2021 Sep 20 Dentist"
        assert len(lines) == 3

    def test_quiet_has_no_header(self) -> None:
        out = render_quiet(REPORT)
        assert out.splitlines()[0] == "today      2021 Sep 20 Dentist"

    def test_empty_report_with_header(self) -> None:
        empty = REPORT.model_copy(update={"data": {**REPORT.data, "items": [], "count": 0}})
        assert render_result(empty) == "Mon 2021 Sep 20 14:03"


class TestCheckRendering:
    def test_healthy(self) -> None:
        result = ServiceResult(ok=True, op="check", data={"count": 0, "issues": []})
        assert "No issues found" in render_result(result)

    def test_issues(self) -> None:
        result = ServiceResult(
            ok=True,
            op="check",
            data={
                "path": "/tmp/cal",
                "entries": 4,
                "count": 1,
                "issues": [
                    {
                        "line": 3,
                        "severity": "error",
                        "kind": "bad_month",
                        "message": "Bad month: 'Ju'",
                        "text": "* Ju 17",
                    }
                ],
            },
        )
        out = render_result(result)
        assert "line 3 [bad_month]: Bad month: 'Ju'" in out
        assert "1 issue in 4 entries" in out
        assert "* Ju 17" not in out
        assert "* Ju 17" in render_result(result, verbose=True)

    def test_quiet_prints_count(self) -> None:
        result = ServiceResult(ok=True, op="check", data={"count": 2, "issues": []})
        assert render_quiet(result) == "2"


class TestErrorRendering:
    def test_error_line(self) -> None:
        result = ServiceResult(
            ok=False,
            op="report",
            error=ServiceError(code="NO_CALENDAR", message="No calendar configured"),
        )
        assert render_result(result) == "ERROR  report — No calendar configured"
        assert render_quiet(result) == "ERROR: report — No calendar configured"

    def test_verbose_detail(self) -> None:
        result = ServiceResult(
            ok=False,
            op="report",
            error=ServiceError(code="X", message="boom", detail={"path": "/tmp/cal"}),
        )
        assert "path: /tmp/cal" in render_result(result, verbose=True)


class TestFormatResult:
    def test_json(self) -> None:
        out = format_result(REPORT, settings=OutputSettings(json_output=True))
        parsed = json.loads(out)
        assert parsed["ok"] is True
        assert parsed["data"]["count"] == 3

    def test_quiet(self) -> None:
        out = format_result(REPORT, settings=OutputSettings(quiet=True))
        assert not out.startswith("Mon")

    def test_default_is_human(self) -> None:
        assert format_result(REPORT).startswith("Mon 2021 Sep 20")

    def test_generic_op(self) -> None:
        result = ServiceResult(ok=True, op="edit", data={"path": "/tmp/cal"})
        out = format_result(result)
        assert "OK" in out
        assert "path: /tmp/cal" in out
