"""Tests for weekly, hourly and day x hour pattern aggregators."""

from datetime import datetime

import pytest

from pos_analytics.patterns import (
    get_day_hour_heat_map,
    get_day_performance_insights,
    get_hourly_sales_pattern,
    get_weekly_sales_pattern,
)
from pos_analytics.types import WeeklySalesData


@pytest.fixture
def monday_tuesday_sales(make_sale):
    """Three Monday sales totaling 300 and one Tuesday sale of 100."""
    return [
        make_sale(datetime(2025, 1, 6, 9, 15), 100.0),
        make_sale(datetime(2025, 1, 6, 10, 0), 120.0),
        make_sale(datetime(2025, 1, 6, 10, 45), 80.0),
        make_sale(datetime(2025, 1, 7, 15, 30), 100.0),
    ]


class TestWeeklyPattern:
    def test_monday_tuesday_scenario(self, monday_tuesday_sales) -> None:
        weekly = get_weekly_sales_pattern(monday_tuesday_sales)

        assert [w.day for w in weekly] == [
            "Sunday",
            "Monday",
            "Tuesday",
            "Wednesday",
            "Thursday",
            "Friday",
            "Saturday",
        ]
        assert weekly[1] == WeeklySalesData(
            day="Monday", sales=300.0, orders=3, avg_order_value=100.0
        )
        assert weekly[2] == WeeklySalesData(
            day="Tuesday", sales=100.0, orders=1, avg_order_value=100.0
        )
        for other in [weekly[0], *weekly[3:]]:
            assert (other.sales, other.orders, other.avg_order_value) == (0.0, 0, 0.0)

    def test_empty_sales_give_seven_zero_days(self) -> None:
        weekly = get_weekly_sales_pattern([])
        assert len(weekly) == 7
        assert all(w.orders == 0 and w.avg_order_value == 0.0 for w in weekly)

    def test_bounds_are_inclusive(self, monday_tuesday_sales) -> None:
        weekly = get_weekly_sales_pattern(
            monday_tuesday_sales,
            start_date=datetime(2025, 1, 6, 10, 0),
            end_date=datetime(2025, 1, 7, 15, 30),
        )
        assert weekly[1].orders == 2
        assert weekly[1].sales == 200.0
        assert weekly[2].orders == 1

    def test_only_start_bound(self, monday_tuesday_sales) -> None:
        weekly = get_weekly_sales_pattern(monday_tuesday_sales, start_date=datetime(2025, 1, 7))
        assert weekly[1].orders == 0
        assert weekly[2].orders == 1


class TestHourlyPattern:
    def test_twenty_four_hours_with_labels(self) -> None:
        hourly = get_hourly_sales_pattern([])

        assert len(hourly) == 24
        assert [h.hour for h in hourly[:3]] == ["00", "01", "02"]
        assert hourly[0].time_label == "12 AM"
        assert hourly[1].time_label == "1 AM"
        assert hourly[11].time_label == "11 AM"
        assert hourly[12].time_label == "12 PM"
        assert hourly[13].time_label == "1 PM"
        assert hourly[23].time_label == "11 PM"

    def test_sales_land_in_their_hour(self, monday_tuesday_sales) -> None:
        hourly = get_hourly_sales_pattern(monday_tuesday_sales)

        assert hourly[9].sales == 100.0
        assert hourly[10].sales == 200.0
        assert hourly[10].orders == 2
        assert hourly[10].avg_order_value == 100.0
        assert hourly[15].orders == 1
        assert hourly[3].avg_order_value == 0.0

    def test_end_bound_excludes_later_sales(self, monday_tuesday_sales) -> None:
        hourly = get_hourly_sales_pattern(
            monday_tuesday_sales, end_date=datetime(2025, 1, 6, 23, 59)
        )
        assert hourly[15].orders == 0
        assert sum(h.orders for h in hourly) == 3


class TestDayHourHeatMap:
    def test_grid_shape_and_order(self, monday_tuesday_sales) -> None:
        cells = get_day_hour_heat_map(monday_tuesday_sales)

        assert len(cells) == 168
        assert (cells[0].day, cells[0].hour) == ("Sunday", 0)
        assert (cells[23].day, cells[23].hour) == ("Sunday", 23)
        assert (cells[24].day, cells[24].hour) == ("Monday", 0)
        assert (cells[-1].day, cells[-1].hour) == ("Saturday", 23)

    def test_intensity_is_normalized_over_whole_grid(self, monday_tuesday_sales) -> None:
        cells = get_day_hour_heat_map(monday_tuesday_sales)
        by_key = {(c.day, c.hour): c for c in cells}

        assert by_key[("Monday", 10)].sales == 200.0
        assert by_key[("Monday", 10)].orders == 2
        assert by_key[("Monday", 10)].intensity == 1.0
        assert by_key[("Monday", 9)].intensity == pytest.approx(0.5)
        assert by_key[("Tuesday", 15)].intensity == pytest.approx(0.5)
        assert all(0.0 <= c.intensity <= 1.0 for c in cells)
        assert max(c.intensity for c in cells) == 1.0

    def test_empty_grid_has_zero_intensity(self) -> None:
        cells = get_day_hour_heat_map([])
        assert len(cells) == 168
        assert all(c.intensity == 0.0 and c.sales == 0.0 for c in cells)

    def test_zero_total_sales_have_zero_intensity(self, make_sale) -> None:
        cells = get_day_hour_heat_map([make_sale(datetime(2025, 1, 6, 10, 0), 0.0)])
        assert all(c.intensity == 0.0 for c in cells)
        assert sum(c.orders for c in cells) == 1

    def test_heat_map_agrees_with_weekly_totals(self, monday_tuesday_sales) -> None:
        cells = get_day_hour_heat_map(monday_tuesday_sales)
        weekly = get_weekly_sales_pattern(monday_tuesday_sales)
        for day in weekly:
            assert sum(c.sales for c in cells if c.day == day.day) == day.sales


class TestDayPerformanceInsights:
    def test_best_worst_and_weekend_split(self, make_sale) -> None:
        sales = [
            make_sale(datetime(2025, 1, 5, 12, 0), 50.0),  # Sunday
            make_sale(datetime(2025, 1, 11, 12, 0), 70.0),  # Saturday
            make_sale(datetime(2025, 1, 8, 12, 0), 300.0),  # Wednesday
        ]
        insights = get_day_performance_insights(get_weekly_sales_pattern(sales))

        assert insights.best_day.day == "Wednesday"
        # Monday is the first day with zero sales
        assert insights.worst_day.day == "Monday"
        assert insights.weekend_sales == 120.0
        assert insights.weekday_sales == 300.0

    def test_empty_weekly_data(self) -> None:
        with pytest.raises(ValueError):
            get_day_performance_insights([])


def test_aggregators_are_idempotent(monday_tuesday_sales) -> None:
    first = get_day_hour_heat_map(monday_tuesday_sales)
    assert first == get_day_hour_heat_map(monday_tuesday_sales)
    assert get_hourly_sales_pattern(monday_tuesday_sales) == get_hourly_sales_pattern(
        monday_tuesday_sales
    )
