"""Pytest configuration and shared fixtures for fillup-stats tests."""

from pathlib import Path

import pytest
from _pytest.config import Config

from fillup_stats.labels import CatalogLabelProvider
from fillup_stats.models import FuelCalculation, RefuelingRecord, TripSummary


def pytest_configure(config: Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch) -> Path:
    """Set up isolated HOME environment for testing.

    HOME points to a temp directory and XDG_CONFIG_HOME / XDG_CACHE_HOME are
    unset, so default path resolution never touches the real user files.

    Returns:
        Path: The temporary home directory
    """
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("XDG_CACHE_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


def _make_record(
    odometer: float, mileage: float | None = None, hidden: bool = False
) -> RefuelingRecord:
    """Create a refueling record, with a calculation when mileage is given."""
    calculation = None
    if mileage is not None:
        calculation = FuelCalculation(mileage=mileage, hidden=hidden)
    return RefuelingRecord(odometer=odometer, calculation=calculation)


@pytest.fixture
def make_record():
    """Provide a factory for refueling records."""
    return _make_record


@pytest.fixture
def sample_records() -> list[RefuelingRecord]:
    """Three visible mileage samples: 20, 25 and 30."""
    return [
        _make_record(12100, 25.0),
        _make_record(12000, 20.0),
        _make_record(12200, 30.0),
    ]


@pytest.fixture
def sample_summary() -> TripSummary:
    """Trip summary matching sample_records."""
    return TripSummary(distance=300.0, cost=45.0, volume=15.0)


class FixedCurrencyFormatter:
    """Deterministic currency formatter for tests."""

    def format(self, amount: float) -> str:
        return f"¤{amount:.3f}"


@pytest.fixture
def fixed_currency() -> FixedCurrencyFormatter:
    """Provide a deterministic currency formatter."""
    return FixedCurrencyFormatter()


@pytest.fixture
def default_labels() -> CatalogLabelProvider:
    """Provide the default English label catalog."""
    return CatalogLabelProvider()
