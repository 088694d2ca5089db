"""Pydantic data models for fillup-stats.

This module defines the value objects consumed and produced by the
statistics table: refueling records and trip summaries coming in, unit and
locale conventions used for display, and the compiled statistics and report
rows going out.
"""

from datetime import date
from enum import Enum
from pathlib import Path
from typing import Annotated, Any

import yaml
from pydantic import (
    AliasChoices,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    computed_field,
    field_validator,
)

from fillup_stats import labels as label_catalog


class FuelCalculation(BaseModel):
    """Fuel economy derived for one fill-up.

    A calculation can be hidden to exclude it from statistics without
    deleting the record it belongs to.
    """

    model_config = ConfigDict(frozen=True)

    mileage: float = Field(
        ...,
        description="Fuel economy in the active mileage unit (e.g. mpg)",
    )
    hidden: bool = Field(
        default=False,
        description="Exclude this calculation from statistics",
    )


class RefuelingRecord(BaseModel):
    """One logged fuel purchase."""

    model_config = ConfigDict(frozen=True)

    odometer: float = Field(
        ...,
        description="Odometer reading at the fill-up",
    )
    fill_date: date | None = Field(
        default=None,
        validation_alias=AliasChoices("fill_date", "date"),
        description="Date of the fill-up ('date' in trip data files)",
    )
    calculation: FuelCalculation | None = Field(
        default=None,
        description="Fuel economy calculation, if one could be derived",
    )

    @property
    def has_calculation(self) -> bool:
        """Check whether a fuel economy calculation exists."""
        return self.calculation is not None

    @property
    def is_calculation_hidden(self) -> bool:
        """Check whether the calculation is hidden from statistics."""
        return self.calculation is not None and self.calculation.hidden

    @property
    def contributes_to_statistics(self) -> bool:
        """Check whether this record is a mileage sample."""
        return self.has_calculation and not self.is_calculation_hidden


class TripSummary(BaseModel):
    """Totals precomputed by the trip storage layer for a period."""

    model_config = ConfigDict(frozen=True)

    distance: float = Field(default=0.0, description="Total distance driven")
    cost: float = Field(default=0.0, description="Total fuel cost")
    volume: float = Field(default=0.0, description="Total fuel volume")


class TripData(BaseModel):
    """Contents of a trip data file: a summary and its refueling records."""

    title: str | None = Field(
        default=None,
        description="Table title (e.g. 'October 2026')",
    )
    summary: TripSummary = Field(
        ...,
        description="Precomputed totals for the period",
    )
    records: list[RefuelingRecord] = Field(
        default_factory=list,
        description="Refueling records of the period",
    )


class UnitSystem(str, Enum):
    """Measurement system used for display labels."""

    US = "us"
    IMPERIAL = "imperial"
    METRIC = "metric"
    METRIC_L100KM = "metric_l100km"


class UnitContext(BaseModel):
    """Unit labels for the active measurement system.

    Only labels are provided; values are never converted.
    """

    model_config = ConfigDict(frozen=True)

    distance: str = Field(..., description="Distance label, lower case")
    distance_ratio: str = Field(..., description="Per-distance label")
    liquid_volume: str = Field(..., description="Liquid volume label, lower case")
    liquid_volume_ratio: str = Field(..., description="Per-volume label")
    mileage: str = Field(..., description="Fuel economy label")

    @classmethod
    def for_system(cls, system: UnitSystem | str) -> "UnitContext":
        """Get the label set for a measurement system.

        Args:
            system: Unit system or its string value

        Returns:
            UnitContext with the system's labels

        Raises:
            ValueError: If the system is unknown
        """
        return UNIT_CONTEXTS[UnitSystem(system)]


UNIT_CONTEXTS = {
    UnitSystem.US: UnitContext(
        distance="miles",
        distance_ratio="per mile",
        liquid_volume="gallons",
        liquid_volume_ratio="per gallon",
        mileage="mpg",
    ),
    UnitSystem.IMPERIAL: UnitContext(
        distance="miles",
        distance_ratio="per mile",
        liquid_volume="imperial gallons",
        liquid_volume_ratio="per gallon",
        mileage="mpg",
    ),
    UnitSystem.METRIC: UnitContext(
        distance="kilometers",
        distance_ratio="per km",
        liquid_volume="liters",
        liquid_volume_ratio="per liter",
        mileage="km/L",
    ),
    UnitSystem.METRIC_L100KM: UnitContext(
        distance="kilometers",
        distance_ratio="per km",
        liquid_volume="liters",
        liquid_volume_ratio="per liter",
        mileage="L/100km",
    ),
}


class LocaleConventions(BaseModel):
    """Number and currency conventions of a locale."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Locale name (e.g. 'en_US')")
    decimal_point: str = Field(default=".", description="Decimal separator")
    thousands_sep: str = Field(default=",", description="Grouping separator")
    currency_symbol: str = Field(default="$", description="Currency symbol")
    currency_prefix: bool = Field(
        default=True,
        description="Place the currency symbol before the amount",
    )
    currency_space: bool = Field(
        default=False,
        description="Separate symbol and amount with a space",
    )
    currency_digits: int = Field(
        default=2,
        description="Number of fraction digits for currency amounts",
        ge=0,
    )

    @classmethod
    def for_locale(cls, name: str) -> "LocaleConventions":
        """Get the built-in conventions for a locale name.

        Args:
            name: Locale name such as 'en_US' or 'de-DE'

        Returns:
            Matching LocaleConventions preset

        Raises:
            ValueError: If no preset exists for the locale
        """
        key = name.replace("-", "_")
        try:
            return LOCALE_PRESETS[key]
        except KeyError:
            known = ", ".join(sorted(LOCALE_PRESETS))
            raise ValueError(
                f"Unknown locale '{name}'. Must be one of: {known}"
            ) from None


LOCALE_PRESETS = {
    "en_US": LocaleConventions(name="en_US"),
    "en_GB": LocaleConventions(name="en_GB", currency_symbol="£"),
    "de_DE": LocaleConventions(
        name="de_DE",
        decimal_point=",",
        thousands_sep=".",
        currency_symbol="€",
        currency_prefix=False,
        currency_space=True,
    ),
    "fr_FR": LocaleConventions(
        name="fr_FR",
        decimal_point=",",
        thousands_sep="\u202f",
        currency_symbol="€",
        currency_prefix=False,
        currency_space=True,
    ),
    "pl_PL": LocaleConventions(
        name="pl_PL",
        decimal_point=",",
        thousands_sep="\xa0",
        currency_symbol="zł",
        currency_prefix=False,
        currency_space=True,
    ),
}


def _coerce_locale(v: Any) -> Any:
    """Accept a preset name wherever full locale conventions are expected."""
    if isinstance(v, str):
        return LocaleConventions.for_locale(v)
    return v


LocaleSetting = Annotated[LocaleConventions, BeforeValidator(_coerce_locale)]


class MonthStatistics(BaseModel):
    """Statistics derived from one month of refueling records.

    None marks a statistic that is unavailable (no mileage samples, or no
    fuel volume to divide by).
    """

    model_config = ConfigDict(frozen=True)

    mileage_average: float | None = None
    mileage_minimum: float | None = None
    mileage_maximum: float | None = None
    distance: float = 0.0
    cost: float = 0.0
    cost_per_distance: float = 0.0
    volume: float = 0.0
    price_per_volume: float | None = None
    sample_count: int = Field(
        default=0,
        description="Number of records that contributed mileage samples",
    )


class StatisticRow(BaseModel):
    """One labelled row of the statistics table."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., description="Zero-based data row index", ge=0)
    key: str = Field(..., description="Label key the row was built from")
    label: str
    value: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def alternate(self) -> bool:
        """Odd rows carry the alternate banding marker."""
        return self.index % 2 == 1


class StatisticsReport(BaseModel):
    """Title and formatted rows of a statistics table."""

    model_config = ConfigDict(frozen=True)

    title: str
    rows: tuple[StatisticRow, ...] = ()


class Settings(BaseModel):
    """User settings loaded from ~/.config/fillup-stats/settings.yaml."""

    units: UnitSystem = Field(
        default=UnitSystem.US,
        description="Measurement system used for labels",
    )
    locale: LocaleSetting = Field(
        default_factory=lambda: LocaleConventions.for_locale("en_US"),
        description="Locale preset name or explicit number/currency conventions",
    )
    labels: dict[str, str] = Field(
        default_factory=dict,
        description="Overrides for row labels and value templates",
    )

    @field_validator("labels")
    @classmethod
    def validate_labels(cls, v: dict[str, str]) -> dict[str, str]:
        """Validate label overrides against the label catalog.

        Keys must exist in the catalog, texts must not be blank, and value
        templates may only use the fields they are formatted with.
        """
        for key, text in v.items():
            if key not in label_catalog.DEFAULT_LABELS:
                known = ", ".join(sorted(label_catalog.DEFAULT_LABELS))
                raise ValueError(f"Unknown label '{key}'. Must be one of: {known}")
            if not text.strip():
                raise ValueError(f"Label '{key}' cannot be empty")
            fields = label_catalog.TEMPLATE_FIELDS.get(key)
            if fields is None:
                continue
            try:
                text.format(**dict.fromkeys(fields, ""))
            except (KeyError, IndexError, ValueError) as e:
                allowed = ", ".join(f"{{{name}}}" for name in fields)
                raise ValueError(
                    f"Invalid template for label '{key}': {e!r}. "
                    f"Available fields: {allowed}"
                ) from e
        return v

    @classmethod
    def from_yaml_file(cls, path: Path) -> "Settings":
        """Load settings from a YAML file.

        Args:
            path: Path to the YAML settings file

        Returns:
            Settings instance loaded from the file

        Raises:
            FileNotFoundError: If the settings file doesn't exist
            TypeError: If the YAML is not a mapping
        """
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")

        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise TypeError(
                f"Invalid settings file format in {path}: expected a mapping"
            )

        return cls(**data)

    def to_yaml_file(self, path: Path) -> None:
        """Save settings to a YAML file.

        Args:
            path: Path where the settings file should be saved
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        data = self.model_dump(mode="json")
        preset = LOCALE_PRESETS.get(self.locale.name)
        if preset == self.locale:
            # Presets are stored by name
            data["locale"] = self.locale.name

        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(
                data,
                f,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False,
            )

        path.chmod(0o600)
