"""Public API for weekly, hourly and day x hour sales patterns.

All three aggregators share frames.bucket_sales() and differ only in the key
extractor and the set of buckets. Optional start/end bounds are inclusive;
a sale outside them is excluded entirely.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Sequence

import numpy as np
import pandas as pd

from pos_analytics.config import DAY_NAMES, WEEKEND_DAYS
from pos_analytics.date_formatters import format_hour_key, format_hour_label
from pos_analytics.frames import (
    bucket_sales,
    hour_of_day,
    sales_to_frame,
    sunday_first_weekday,
    within_bounds,
)
from pos_analytics.models import Sale
from pos_analytics.types import (
    DayHourSalesData,
    DayPerformanceInsights,
    HourlySalesData,
    WeeklySalesData,
)

logger = logging.getLogger(__name__)

WEEKDAY_BUCKETS = pd.Index(range(7), name="weekday")
HOUR_BUCKETS = pd.Index(range(24), name="hour")
DAY_HOUR_BUCKETS = pd.MultiIndex.from_product([range(7), range(24)], names=["weekday", "hour"])


def _bounded_frame(
    sales: Sequence[Sale],
    start_date: datetime | None,
    end_date: datetime | None,
) -> pd.DataFrame:
    df = within_bounds(sales_to_frame(sales), start_date, end_date)
    logger.debug("%d of %d sales inside bounds %s - %s", len(df), len(sales), start_date, end_date)
    return df


def get_weekly_sales_pattern(
    sales: Sequence[Sale],
    start_date: datetime | None = None,
    end_date: datetime | None = None,
) -> List[WeeklySalesData]:
    """Bucket sales by day of week.

    Args:
        sales: Sale records.
        start_date: Optional inclusive lower bound.
        end_date: Optional inclusive upper bound.

    Returns:
        Seven records, Sunday first. Days without sales have zero sales,
        orders and avg_order_value.

    """
    df = _bounded_frame(sales, start_date, end_date)
    buckets = bucket_sales(
        df, lambda frame: sunday_first_weekday(frame["timestamp"]), WEEKDAY_BUCKETS
    )

    return [
        WeeklySalesData(
            day=DAY_NAMES[weekday],
            sales=float(row["sales"]),
            orders=int(row["orders"]),
            avg_order_value=float(row["avg_order_value"]),
        )
        for weekday, row in buckets.iterrows()
    ]


def get_hourly_sales_pattern(
    sales: Sequence[Sale],
    start_date: datetime | None = None,
    end_date: datetime | None = None,
) -> List[HourlySalesData]:
    """Bucket sales by hour of day.

    Returns:
        24 records for hours 0-23, each with a zero-padded hour key ("07")
        and a 12-hour time_label ("7 AM").

    """
    df = _bounded_frame(sales, start_date, end_date)
    buckets = bucket_sales(df, lambda frame: hour_of_day(frame["timestamp"]), HOUR_BUCKETS)

    return [
        HourlySalesData(
            hour=format_hour_key(hour),
            sales=float(row["sales"]),
            orders=int(row["orders"]),
            avg_order_value=float(row["avg_order_value"]),
            time_label=format_hour_label(hour),
        )
        for hour, row in buckets.iterrows()
    ]


def get_day_hour_heat_map(
    sales: Sequence[Sale],
    start_date: datetime | None = None,
    end_date: datetime | None = None,
) -> List[DayHourSalesData]:
    """Cross-tabulate day of week x hour of day into a 7x24 grid.

    intensity is each cell's sales divided by the largest cell's sales over
    the whole grid, so it is comparable across rows and columns. When every
    cell is empty all intensities are 0.

    Returns:
        168 records ordered Sunday first, then hour ascending.

    """
    df = _bounded_frame(sales, start_date, end_date)
    cells = bucket_sales(
        df,
        lambda frame: [sunday_first_weekday(frame["timestamp"]), hour_of_day(frame["timestamp"])],
        DAY_HOUR_BUCKETS,
    )

    grid = cells["sales"].to_numpy(dtype=float).reshape(len(DAY_NAMES), 24)
    max_sales = grid.max()
    intensity = grid / max_sales if max_sales > 0 else np.zeros_like(grid)

    records = []
    for (weekday, hour), row in cells.iterrows():
        records.append(
            DayHourSalesData(
                day=DAY_NAMES[weekday],
                hour=int(hour),
                sales=float(row["sales"]),
                orders=int(row["orders"]),
                intensity=float(intensity[weekday, hour]),
            )
        )
    return records


def get_day_performance_insights(weekly_data: Sequence[WeeklySalesData]) -> DayPerformanceInsights:
    """Best and worst day plus weekend vs weekday revenue.

    Ties resolve to the first day in weekly_data order.

    Raises:
        ValueError: If weekly_data is empty.

    """
    if not weekly_data:
        raise ValueError("weekly_data must contain at least one day")

    best_day = max(weekly_data, key=lambda day: day.sales)
    worst_day = min(weekly_data, key=lambda day: day.sales)
    weekend_sales = sum(day.sales for day in weekly_data if day.day in WEEKEND_DAYS)
    weekday_sales = sum(day.sales for day in weekly_data if day.day not in WEEKEND_DAYS)

    return DayPerformanceInsights(
        best_day=best_day,
        worst_day=worst_day,
        weekend_sales=float(weekend_sales),
        weekday_sales=float(weekday_sales),
    )
