"""Tests for input models and filter options validation."""

from datetime import datetime

import pytest

from pos_analytics import FilterOptions
from pos_analytics.exceptions import AnalyticsError, ConfigError, DataQualityError
from pos_analytics.models import Sale, SaleItem


class TestSale:
    def test_negative_total_is_rejected(self) -> None:
        with pytest.raises(DataQualityError, match="total must be >= 0"):
            Sale(id="s1", timestamp=datetime(2025, 1, 6), total=-1.0)

    @pytest.mark.parametrize("total", [float("nan"), float("inf")])
    def test_non_finite_total_is_rejected(self, total) -> None:
        with pytest.raises(DataQualityError, match="finite"):
            Sale(id="s1", timestamp=datetime(2025, 1, 6), total=total)

    def test_timestamp_must_be_datetime(self) -> None:
        with pytest.raises(DataQualityError):
            Sale(id="s1", timestamp="2025-01-06", total=1.0)

    def test_items_are_stored_as_tuple(self) -> None:
        item = SaleItem(product_id="p1", product_name="Tea", quantity=1, price=5.0, total=5.0)
        sale = Sale(id="s1", timestamp=datetime(2025, 1, 6), total=5.0, items=[item])
        assert sale.items == (item,)

    def test_line_totals_are_not_checked_against_total(self) -> None:
        item = SaleItem(product_id="p1", product_name="Tea", quantity=1, price=5.0, total=5.0)
        sale = Sale(id="s1", timestamp=datetime(2025, 1, 6), total=999.0, items=(item,))
        assert sale.total == 999.0


class TestFilterOptions:
    def test_defaults(self) -> None:
        filters = FilterOptions()
        assert (filters.time_range, filters.category, filters.status, filters.customer_type) == (
            "30d",
            "all",
            "all",
            "all",
        )

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"time_range": "2w"},
            {"status": "partial"},
            {"customer_type": "vip"},
            {"category": ""},
        ],
    )
    def test_invalid_values(self, kwargs) -> None:
        with pytest.raises(ConfigError):
            FilterOptions(**kwargs)

    def test_config_error_is_an_analytics_error(self) -> None:
        with pytest.raises(AnalyticsError):
            FilterOptions(time_range="forever")

    def test_from_dict_accepts_camel_case(self) -> None:
        filters = FilterOptions.from_dict(
            {"timeRange": "7d", "category": "Tea", "status": "completed", "customerType": "new"}
        )
        assert filters == FilterOptions("7d", "Tea", "completed", "new")

    def test_from_dict_snake_case_and_defaults(self) -> None:
        filters = FilterOptions.from_dict({"time_range": "1y"})
        assert filters == FilterOptions(time_range="1y")
