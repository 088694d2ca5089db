"""Report generators for fillup-stats.

Builds formatted StatisticsReport rows from MonthStatistics and renders them
as an HTML table.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from importlib import resources

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup, escape

from fillup_stats import labels as keys
from fillup_stats.formatting import (
    UNAVAILABLE,
    LocaleCurrencyFormatter,
    format_decimal,
    format_optional,
    insert_line_breaks,
)
from fillup_stats.labels import CatalogLabelProvider
from fillup_stats.models import (
    MonthStatistics,
    RefuelingRecord,
    Settings,
    StatisticRow,
    StatisticsReport,
    TripSummary,
    UnitContext,
)
from fillup_stats.protocols import CurrencyFormatter, LabelProvider
from fillup_stats.report.compiler import compile_statistics

logger = logging.getLogger(__name__)

# Template directory path
TEMPLATES_DIR = resources.files("fillup_stats.report") / "templates"

TABLE_TEMPLATE = "statistics_table.html"

# CSS classes of the table markup
TABLE_CSS_CLASS = "month"
ALTERNATE_CSS_CLASS = "odd"

# Label and value cell per row
COLUMN_COUNT = 2

HTML_LINE_BREAK = "<br/>"


@dataclass(frozen=True)
class RenderContext:
    """Collaborators used to format statistics for display."""

    units: UnitContext
    labels: LabelProvider
    currency: CurrencyFormatter
    decimal_point: str = "."

    @classmethod
    def from_settings(cls, settings: Settings) -> "RenderContext":
        """Create a render context from user settings.

        Args:
            settings: Loaded user settings

        Returns:
            RenderContext with catalog labels and locale currency formatting
        """
        return cls(
            units=UnitContext.for_system(settings.units),
            labels=CatalogLabelProvider(settings.labels),
            currency=LocaleCurrencyFormatter(settings.locale),
            decimal_point=settings.locale.decimal_point,
        )


def _mileage_rows(
    statistics: MonthStatistics, context: RenderContext
) -> list[tuple[str, str]]:
    unit = context.units.mileage
    point = context.decimal_point
    return [
        (keys.MILEAGE_AVG, format_optional(statistics.mileage_average, unit, point)),
        (keys.MILEAGE_MIN, format_optional(statistics.mileage_minimum, unit, point)),
        (keys.MILEAGE_MAX, format_optional(statistics.mileage_maximum, unit, point)),
    ]


def _distance_row(
    statistics: MonthStatistics, context: RenderContext
) -> tuple[str, str]:
    value = context.labels.resolve(keys.DISTANCE_TEMPLATE).format(
        value=format_decimal(statistics.distance, context.decimal_point),
        unit=context.units.distance,
    )
    return keys.DISTANCE, value


def _cost_row(statistics: MonthStatistics, context: RenderContext) -> tuple[str, str]:
    value = context.labels.resolve(keys.COST_TEMPLATE).format(
        total=context.currency.format(statistics.cost),
        per_distance=context.currency.format(statistics.cost_per_distance),
        unit=context.units.distance_ratio,
    )
    return keys.COST, value


def _gallons_row(
    statistics: MonthStatistics, context: RenderContext
) -> tuple[str, str]:
    value = context.labels.resolve(keys.GALLONS_TEMPLATE).format(
        value=format_decimal(statistics.volume, context.decimal_point),
        unit=context.units.liquid_volume,
    )
    return keys.GALLONS, value


def _price_row(statistics: MonthStatistics, context: RenderContext) -> tuple[str, str]:
    value = UNAVAILABLE
    if statistics.price_per_volume is not None:
        price = context.currency.format(statistics.price_per_volume)
        value = f"{price} {context.units.liquid_volume_ratio}"
    return keys.PRICE, value


def build_report(
    statistics: MonthStatistics, title: str, context: RenderContext
) -> StatisticsReport:
    """Build the formatted rows of a statistics table.

    Row order is fixed: mileage average, minimum and maximum, then distance,
    cost, fuel volume and price.

    Args:
        statistics: Compiled statistics
        title: Table title
        context: Unit labels, label lookup and currency formatting

    Returns:
        StatisticsReport with one row per statistic
    """
    pairs = [
        *_mileage_rows(statistics, context),
        _distance_row(statistics, context),
        _cost_row(statistics, context),
        _gallons_row(statistics, context),
        _price_row(statistics, context),
    ]
    rows = tuple(
        StatisticRow(
            index=index, key=key, label=context.labels.resolve(key), value=value
        )
        for index, (key, value) in enumerate(pairs)
    )
    return StatisticsReport(title=title, rows=rows)


def _break_before_parens(value: str) -> Markup:
    """Escape a cell value and add line breaks before parenthesized parts."""
    return Markup(insert_line_breaks(str(escape(value)), HTML_LINE_BREAK))


def _create_jinja_env() -> Environment:
    """Create Jinja2 environment configured for templates.

    Returns:
        Configured Jinja2 environment
    """
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["break_before_parens"] = _break_before_parens
    return env


def render_html(report: StatisticsReport) -> str:
    """Render a statistics report as an HTML table.

    Args:
        report: Built statistics report

    Returns:
        HTML table markup
    """
    env = _create_jinja_env()
    template = env.get_template(TABLE_TEMPLATE)
    html = template.render(
        report=report,
        css_class=TABLE_CSS_CLASS,
        alternate_class=ALTERNATE_CSS_CLASS,
        colspan=COLUMN_COUNT,
    )
    logger.debug("Rendered statistics table with %d rows", len(report.rows))
    return html


def generate_statistics_table(
    records: Iterable[RefuelingRecord],
    summary: TripSummary,
    title: str,
    context: RenderContext,
) -> str:
    """Compile, format and render a statistics table in one step.

    Args:
        records: Refueling records of the period
        summary: Precomputed totals for the same period
        title: Table title
        context: Unit labels, label lookup and currency formatting

    Returns:
        HTML table markup
    """
    return StatisticsMonthTable(records, summary, title, context).html


class StatisticsMonthTable:
    """A table of statistics derived from one month of trip data.

    The table is fully built on construction and is read-only afterwards.
    """

    def __init__(
        self,
        records: Iterable[RefuelingRecord],
        summary: TripSummary,
        title: str,
        context: RenderContext,
    ) -> None:
        """Build the table.

        Args:
            records: Refueling records of the period
            summary: Precomputed totals for the same period
            title: Table title
            context: Unit labels, label lookup and currency formatting
        """
        self._statistics = compile_statistics(records, summary)
        self._report = build_report(self._statistics, title, context)
        self._html = render_html(self._report)

    @property
    def statistics(self) -> MonthStatistics:
        """Compiled statistics the table was built from."""
        return self._statistics

    @property
    def report(self) -> StatisticsReport:
        """Formatted table rows."""
        return self._report

    @property
    def html(self) -> str:
        """Table as an HTML string."""
        return self._html
