"""Unit tests for fillup_stats.labels module."""

import pytest

from fillup_stats.labels import COST, DEFAULT_LABELS, CatalogLabelProvider
from fillup_stats.protocols import LabelProvider


class TestCatalogLabelProvider:
    """Test CatalogLabelProvider class."""

    def test_satisfies_protocol(self):
        """Test the provider implements LabelProvider."""
        assert isinstance(CatalogLabelProvider(), LabelProvider)

    def test_default_labels(self):
        """Test default catalog lookups."""
        provider = CatalogLabelProvider()

        assert provider.resolve(COST) == "Cost"
        assert provider.resolve("stats_label_mileage_avg") == "Average Mileage"

    def test_overrides_replace_defaults(self):
        """Test overrides take precedence over the catalog."""
        provider = CatalogLabelProvider({COST: "Kosten"})

        assert provider.resolve(COST) == "Kosten"
        assert provider.resolve("stats_label_price") == "Price"

    def test_overrides_do_not_leak(self):
        """Test overrides never modify the default catalog."""
        CatalogLabelProvider({COST: "Kosten"})

        assert DEFAULT_LABELS[COST] == "Cost"

    def test_unknown_key(self):
        """Test unknown keys raise KeyError."""
        with pytest.raises(KeyError):
            CatalogLabelProvider().resolve("stats_label_unknown")
