"""Reusable CLI elements for displaying output."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fillup_stats.formatting import insert_line_breaks
from fillup_stats.models import StatisticsReport


def display_statistics_table(console: Console, report: StatisticsReport) -> None:
    """Display a statistics report as a terminal table.

    Args:
        console: Rich console for output
        report: Built statistics report
    """
    table = Table(title=escape(report.title), show_header=False, show_lines=False)
    table.add_column("Statistic", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    for row in report.rows:
        table.add_row(
            escape(row.label),
            escape(insert_line_breaks(row.value, "\n")),
            style="dim" if row.alternate else None,
        )

    console.print(table)
