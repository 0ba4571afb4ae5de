"""Unit tests for CLI output formatters."""

import click

from ggsa_export.cli.utils.formatters import (
    format_error,
    format_info,
    format_success,
    format_table,
    format_warning,
)


class TestMessageFormatters:
    """Test suite for coloured message formatters."""

    def test_messages_keep_their_text(self):
        """Test that every formatter includes the message."""
        for formatter in (format_success, format_error, format_warning, format_info):
            assert "Export rendered" in click.unstyle(formatter("Export rendered"))

    def test_symbols(self):
        assert click.unstyle(format_success("ok")).startswith("✓")
        assert click.unstyle(format_error("failed")).startswith("✗")


class TestFormatTable:
    """Test suite for plain-text tables."""

    def test_headers_and_rows(self):
        result = format_table(
            ["Id", "Name"], [["ggsa", "GGSA"], ["csv", "Comma separated"]]
        )
        lines = result.splitlines()

        assert lines[0] == "+------+-----------------+"
        assert lines[1] == "| Id   | Name            |"
        assert lines[3] == "| ggsa | GGSA            |"
        assert lines[-1] == lines[0]

    def test_empty_rows(self):
        """Test that an empty table still shows its headers."""
        result = format_table(["Id", "Name"], [])

        assert result.splitlines() == [
            "+----+------+",
            "| Id | Name |",
            "+----+------+",
        ]

    def test_long_values_are_truncated(self):
        result = format_table(["Template"], [["x" * 80]], max_width=10)

        assert "| xxxxxxxxxx |" in result
        assert "x" * 11 not in result

    def test_non_string_cells(self):
        assert "| 42 |" in format_table(["N"], [[42]])

    def test_no_headers(self):
        assert format_table([], [["value"]]) == ""
