"""Statistics table compilation and rendering."""

from fillup_stats.report.compiler import compile_statistics
from fillup_stats.report.generator import (
    RenderContext,
    StatisticsMonthTable,
    build_report,
    generate_statistics_table,
    render_html,
)

__all__ = [
    "RenderContext",
    "StatisticsMonthTable",
    "build_report",
    "compile_statistics",
    "generate_statistics_table",
    "render_html",
]
