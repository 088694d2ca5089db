"""Unit tests for fillup_stats.records module."""

import json

import pytest

from fillup_stats.records import TripDataError, load_trip_data

TRIP_YAML = """\
title: October 2026
summary:
  distance: 300
  cost: 45.0
  volume: 15.0
records:
  - odometer: 12100
    date: 2026-10-12
    calculation: {mileage: 25.0}
  - odometer: 12000
    calculation: {mileage: 20.0, hidden: true}
  - odometer: 11900
"""


class TestLoadTripData:
    """Test load_trip_data function."""

    def test_loads_yaml(self, tmp_path):
        """Test a YAML trip file is parsed into models."""
        path = tmp_path / "october.yaml"
        path.write_text(TRIP_YAML, encoding="utf-8")

        trip = load_trip_data(path)

        assert trip.title == "October 2026"
        assert trip.summary.distance == 300.0
        assert len(trip.records) == 3
        assert trip.records[0].fill_date.day == 12
        assert trip.records[1].is_calculation_hidden
        assert not trip.records[2].has_calculation

    def test_loads_json(self, tmp_path):
        """Test JSON files are accepted."""
        path = tmp_path / "october.json"
        path.write_text(
            json.dumps(
                {
                    "summary": {"distance": 10, "cost": 2, "volume": 1},
                    "records": [{"odometer": 5, "calculation": {"mileage": 10}}],
                }
            ),
            encoding="utf-8",
        )

        trip = load_trip_data(path)

        assert trip.title is None
        assert trip.records[0].calculation.mileage == 10.0

    def test_missing_file(self, tmp_path):
        """Test a missing file raises TripDataError."""
        with pytest.raises(TripDataError, match="not found"):
            load_trip_data(tmp_path / "missing.yaml")

    def test_directory_instead_of_file(self, tmp_path):
        """Test unreadable paths raise TripDataError."""
        with pytest.raises(TripDataError, match="Cannot read"):
            load_trip_data(tmp_path)

    def test_invalid_yaml(self, tmp_path):
        """Test syntax errors raise TripDataError."""
        path = tmp_path / "broken.yaml"
        path.write_text("summary: {distance: 1\n", encoding="utf-8")

        with pytest.raises(TripDataError, match="Invalid YAML"):
            load_trip_data(path)

    def test_not_a_mapping(self, tmp_path):
        """Test list documents are rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- odometer: 1\n", encoding="utf-8")

        with pytest.raises(TripDataError, match="expected a mapping"):
            load_trip_data(path)

    def test_missing_summary(self, tmp_path):
        """Test validation errors raise TripDataError with the cause."""
        path = tmp_path / "nosummary.yaml"
        path.write_text("records: []\n", encoding="utf-8")

        with pytest.raises(TripDataError, match="Invalid trip data") as exc_info:
            load_trip_data(path)

        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_invalid_record(self, tmp_path):
        """Test a record without odometer is rejected."""
        path = tmp_path / "bad.yaml"
        path.write_text(
            "summary: {distance: 1}\nrecords:\n  - calculation: {mileage: 2}\n",
            encoding="utf-8",
        )

        with pytest.raises(TripDataError, match="odometer"):
            load_trip_data(path)
