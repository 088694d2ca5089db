"""Label catalog for the statistics table.

Row labels and value templates are looked up by symbolic key. Value
templates use str.format fields.
"""

from collections.abc import Mapping

# Row labels
MILEAGE_AVG = "stats_label_mileage_avg"
MILEAGE_MIN = "stats_label_mileage_min"
MILEAGE_MAX = "stats_label_mileage_max"
DISTANCE = "stats_label_distance"
COST = "stats_label_cost"
GALLONS = "stats_label_gallons"
PRICE = "stats_label_price"

# Value templates
DISTANCE_TEMPLATE = "stats_calc_distance_noavg"
COST_TEMPLATE = "stats_calc_cost_noavg"
GALLONS_TEMPLATE = "stats_calc_gallons_noavg"

DEFAULT_LABELS: dict[str, str] = {
    MILEAGE_AVG: "Average Mileage",
    MILEAGE_MIN: "Minimum Mileage",
    MILEAGE_MAX: "Maximum Mileage",
    DISTANCE: "Distance",
    COST: "Cost",
    GALLONS: "Fuel",
    PRICE: "Price",
    DISTANCE_TEMPLATE: "{value} {unit}",
    COST_TEMPLATE: "{total} ({per_distance} {unit})",
    GALLONS_TEMPLATE: "{value} {unit}",
}

# Fields each value template is formatted with
TEMPLATE_FIELDS: dict[str, tuple[str, ...]] = {
    DISTANCE_TEMPLATE: ("value", "unit"),
    COST_TEMPLATE: ("total", "per_distance", "unit"),
    GALLONS_TEMPLATE: ("value", "unit"),
}


class CatalogLabelProvider:
    """Label provider backed by the default catalog plus overrides."""

    def __init__(self, overrides: Mapping[str, str] | None = None) -> None:
        """Initialize the provider.

        Args:
            overrides: Replacement texts keyed by label key
        """
        self._labels = {**DEFAULT_LABELS, **(overrides or {})}

    def resolve(self, key: str) -> str:
        """Resolve a label key.

        Raises:
            KeyError: If the key is not in the catalog
        """
        return self._labels[key]
