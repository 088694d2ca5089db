"""FillUp Statistics - monthly fuel economy and cost tables for refueling
records."""

__version__ = "0.1.0"

from fillup_stats.cli.app import main

__all__ = ["main"]
