"""Tests for the Rich renderers."""

from vecmin.output.renderers import render_quiet, render_result
from vecmin.services.result import ServiceResult


def _read_result() -> ServiceResult:
    return ServiceResult.success(
        "read_min",
        {
            "values": [18, 5, 7],
            "count": 3,
            "minimum": 5,
            "display": "The number is: 5",
            "skipped": [{"line_no": 3, "text": "abc", "reason": "invalid_digit"}],
        },
    )


class TestRenderMinimum:
    def test_plain_is_single_line(self) -> None:
        output = render_result(_read_result())
        assert output == "The number is: 5"
        assert "\n" not in output

    def test_verbose_lists_values(self) -> None:
        output = render_result(_read_result(), verbose=True)
        lines = output.splitlines()
        assert lines[0] == "The number is: 5"
        assert "3 value(s)" in output
        assert "18" in output

    def test_verbose_lists_skipped(self) -> None:
        output = render_result(_read_result(), verbose=True)
        assert "1 skipped line(s)" in output
        assert "'abc'" in output
        assert "invalid_digit" in output

    def test_verbose_empty_has_no_tables(self) -> None:
        result = ServiceResult.success(
            "sample_min",
            {"values": [], "count": 0, "minimum": None, "display": "The number is: <nothing>"},
        )
        assert render_result(result, verbose=True) == "The number is: <nothing>"

    def test_display_not_treated_as_markup(self) -> None:
        result = ServiceResult.success(
            "sample_min", {"minimum": 1, "display": "The number is: [bold]1[/bold]"}
        )
        assert render_result(result) == "The number is: [bold]1[/bold]"


class TestRenderError:
    def test_error_line(self) -> None:
        result = ServiceResult.failure("sample_min", "OUT_OF_RANGE", "too big", values=[1])
        output = render_result(result)
        assert output.startswith("ERROR")
        assert "sample_min" in output
        assert "too big" in output
        assert "detail" not in output

    def test_verbose_error_shows_detail(self) -> None:
        result = ServiceResult.failure("sample_min", "OUT_OF_RANGE", "too big", values=[1])
        output = render_result(result, verbose=True)
        assert "detail:" in output
        assert "values: [1]" in output


class TestRenderQuiet:
    def test_minimum(self) -> None:
        assert render_quiet(_read_result()) == "5"

    def test_nothing(self) -> None:
        result = ServiceResult.success("sample_min", {"minimum": None})
        assert render_quiet(result) == "<nothing>"

    def test_error(self) -> None:
        result = ServiceResult.failure("sample_min", "OUT_OF_RANGE", "too big")
        assert render_quiet(result) == "ERROR: sample_min — too big"
