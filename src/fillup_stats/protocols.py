"""Collaborator protocols for statistics rendering.

This module defines Protocol interfaces for the capabilities the statistics
table depends on but does not own: resolving localized label strings and
formatting currency amounts. Production code uses the defaults from
fillup_stats.labels and fillup_stats.formatting; tests substitute fakes.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LabelProvider(Protocol):
    """Protocol for resolving label strings by symbolic key."""

    def resolve(self, key: str) -> str:
        """Resolve a label or value template.

        Args:
            key: Symbolic label key (e.g. "stats_label_cost")

        Returns:
            Localized text for the key
        """
        ...


@runtime_checkable
class CurrencyFormatter(Protocol):
    """Protocol for locale-aware currency formatting."""

    def format(self, amount: float) -> str:
        """Format an amount of money for display.

        Args:
            amount: Amount in the active currency

        Returns:
            Formatted amount including the currency symbol
        """
        ...
