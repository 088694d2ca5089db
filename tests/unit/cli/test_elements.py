"""Tests for CLI elements module."""

from io import StringIO

import pytest
from rich.console import Console

from fillup_stats.cli import elements
from fillup_stats.models import Settings, StatisticRow, StatisticsReport
from fillup_stats.report.compiler import compile_statistics
from fillup_stats.report.generator import RenderContext, build_report


def _console() -> Console:
    return Console(file=StringIO(), force_terminal=True, width=100)


class TestDisplayStatisticsTable:
    """Tests for display_statistics_table function."""

    @pytest.mark.unit
    def test_shows_title_labels_and_values(
        self, sample_records, sample_summary, ansi_stripper
    ):
        """Test every row label and value is displayed."""
        console = _console()
        stats = compile_statistics(sample_records, sample_summary)
        report = build_report(
            stats, "October 2026", RenderContext.from_settings(Settings())
        )

        elements.display_statistics_table(console, report)

        output = ansi_stripper(console.file.getvalue())
        assert "October 2026" in output
        for row in report.rows:
            assert row.label in output
        assert "25.00 mpg" in output
        assert "$3.00 per gallon" in output

    @pytest.mark.unit
    def test_breaks_before_parenthesis(self, ansi_stripper):
        """Test parenthesized sub-values go to their own line."""
        console = _console()
        report = StatisticsReport(
            title="Cost",
            rows=(
                StatisticRow(
                    index=0, key="k", label="Cost", value="$45.00 ($0.15 per mile)"
                ),
            ),
        )

        elements.display_statistics_table(console, report)

        lines = ansi_stripper(console.file.getvalue()).splitlines()
        assert any("$45.00" in line and "per mile" not in line for line in lines)
        assert any("($0.15 per mile)" in line for line in lines)

    @pytest.mark.unit
    def test_markup_is_not_interpreted(self, ansi_stripper):
        """Test rich markup in labels is printed literally."""
        console = _console()
        report = StatisticsReport(
            title="[bold]T[/bold]",
            rows=(StatisticRow(index=0, key="k", label="[red]L[/red]", value="-"),),
        )

        elements.display_statistics_table(console, report)

        output = ansi_stripper(console.file.getvalue())
        assert "[red]L[/red]" in output
        assert "[bold]T[/bold]" in output
