"""Statistics compiler for fillup-stats.

Compiles refueling records and a trip summary into MonthStatistics ready for
rendering.
"""

import logging
from collections.abc import Iterable
from operator import attrgetter

from fillup_stats.models import MonthStatistics, RefuelingRecord, TripSummary

logger = logging.getLogger(__name__)


def sort_by_odometer(records: Iterable[RefuelingRecord]) -> list[RefuelingRecord]:
    """Return a new list of records in ascending odometer order.

    The sort is stable and never mutates the caller's collection.
    """
    return sorted(records, key=attrgetter("odometer"))


def compute_mileage_statistics(
    records: Iterable[RefuelingRecord],
) -> tuple[float | None, float | None, float | None, int]:
    """Compute average, minimum and maximum mileage.

    Only records with a calculation that is not hidden are samples.

    Args:
        records: Refueling records to scan

    Returns:
        Tuple of (average, minimum, maximum, sample count). All three values
        are None when there are no samples.
    """
    samples = [
        record.calculation.mileage
        for record in records
        if record.contributes_to_statistics
    ]
    if not samples:
        return None, None, None, 0

    return sum(samples) / len(samples), min(samples), max(samples), len(samples)


def compile_statistics(
    records: Iterable[RefuelingRecord], summary: TripSummary
) -> MonthStatistics:
    """Compile MonthStatistics from records and their trip summary.

    Distance, cost and volume are taken from the summary as-is. The two
    ratios are guarded differently:

    - cost per distance is 0 when there is no distance
    - price per volume is unavailable (None) when there is no volume

    Args:
        records: Refueling records of the period
        summary: Precomputed totals for the same period

    Returns:
        Compiled statistics; never raises for any record set
    """
    working = sort_by_odometer(records)
    average, minimum, maximum, count = compute_mileage_statistics(working)
    logger.debug(
        "Mileage statistics from %d of %d records", count, len(working)
    )

    cost_per_distance = 0.0
    if summary.distance > 0:
        cost_per_distance = summary.cost / summary.distance
    else:
        logger.debug("No distance in summary, cost per distance is 0")

    price_per_volume = None
    if summary.volume > 0:
        price_per_volume = summary.cost / summary.volume
    else:
        logger.debug("No fuel volume in summary, price per volume unavailable")

    return MonthStatistics(
        mileage_average=average,
        mileage_minimum=minimum,
        mileage_maximum=maximum,
        distance=summary.distance,
        cost=summary.cost,
        cost_per_distance=cost_per_distance,
        volume=summary.volume,
        price_per_volume=price_per_volume,
        sample_count=count,
    )
