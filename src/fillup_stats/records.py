"""Trip data file loading.

A trip data file is a YAML (or JSON) mapping with a precomputed summary and
the refueling records of one period:

    title: October 2026
    summary: {distance: 300, cost: 45.0, volume: 15.0}
    records:
      - odometer: 12000
        date: 2026-10-02
        calculation: {mileage: 20.0}
"""

import logging
from pathlib import Path

import yaml

from fillup_stats.models import TripData

logger = logging.getLogger(__name__)


class TripDataError(Exception):
    """Trip data file cannot be loaded."""

    pass


def load_trip_data(path: Path) -> TripData:
    """Load and validate a trip data file.

    Args:
        path: Path to the YAML or JSON trip data file

    Returns:
        Validated TripData

    Raises:
        TripDataError: If the file is missing, unreadable, or invalid
    """
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise TripDataError(f"Trip data file not found: {path}") from e
    except OSError as e:
        raise TripDataError(f"Cannot read trip data file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise TripDataError(f"Invalid YAML in trip data file {path}:\n{e}") from e

    if not isinstance(data, dict):
        raise TripDataError(
            f"Invalid trip data file format in {path}: expected a mapping"
        )

    try:
        trip = TripData.model_validate(data)
    except ValueError as e:
        raise TripDataError(f"Invalid trip data in {path}:\n{e}") from e

    logger.info("Loaded %d refueling records from %s", len(trip.records), path)
    return trip
