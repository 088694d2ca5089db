"""Number and currency formatting for statistics values.

Formatting follows explicit LocaleConventions rather than the process-wide
locale, so output is deterministic for a given configuration.

Examples:
    >>> format_decimal(25.0)
    '25.00'
    >>> format_decimal(3.14159, decimal_point=",")
    '3,14'
    >>> LocaleCurrencyFormatter(LocaleConventions.for_locale("en_US")).format(1234.5)
    '$1,234.50'
"""

from fillup_stats.models import LocaleConventions

# Display text of a statistic that cannot be computed
UNAVAILABLE = "-"


def format_decimal(value: float, decimal_point: str = ".", digits: int = 2) -> str:
    """Format a number with fixed fraction digits and no grouping.

    Args:
        value: Number to format
        decimal_point: Locale decimal separator
        digits: Number of fraction digits

    Returns:
        Formatted number (e.g. "25.00")
    """
    return f"{value:.{digits}f}".replace(".", decimal_point)


def format_optional(
    value: float | None, unit: str, decimal_point: str = "."
) -> str:
    """Format a value with its unit, or the unavailable marker for None."""
    if value is None:
        return UNAVAILABLE
    return f"{format_decimal(value, decimal_point)} {unit}"


def insert_line_breaks(value: str, marker: str) -> str:
    """Insert a line-break marker before each opening parenthesis.

    Args:
        value: Display value, possibly with parenthesized sub-values
        marker: Line-break text for the target output (e.g. "<br/>")

    Returns:
        Value with the marker inserted
    """
    return value.replace("(", f"{marker}(")


class LocaleCurrencyFormatter:
    """Currency formatter driven by LocaleConventions."""

    def __init__(self, conventions: LocaleConventions) -> None:
        self.conventions = conventions

    def format(self, amount: float) -> str:
        """Format an amount with grouping and the currency symbol."""
        conv = self.conventions
        grouped = f"{abs(amount):,.{conv.currency_digits}f}"
        integer, _, fraction = grouped.partition(".")
        number = integer.replace(",", conv.thousands_sep)
        if fraction:
            number = f"{number}{conv.decimal_point}{fraction}"

        space = " " if conv.currency_space else ""
        if conv.currency_prefix:
            text = f"{conv.currency_symbol}{space}{number}"
        else:
            text = f"{number}{space}{conv.currency_symbol}"

        # Rounding can turn tiny negatives into zero
        if amount < 0 and any(c in "123456789" for c in number):
            return f"-{text}"
        return text
