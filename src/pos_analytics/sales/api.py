"""Public API for the filtered sales series and its summary stats.

This module:
- does NOT read or write any files,
- does NOT read the clock unless ``now`` is omitted (then once per call),
- MAY log progress via the logging module.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import List, Sequence

import pandas as pd

from pos_analytics.config import RELATIVE_RANGE_DAYS, FilterOptions
from pos_analytics.date_formatters import format_date_short
from pos_analytics.frames import sales_to_frame
from pos_analytics.models import Product, Sale
from pos_analytics.sales.filters import attribute_mask, combined_mask
from pos_analytics.types import FilteredStats, SalesDataPoint

logger = logging.getLogger(__name__)


def _daily_series(df: pd.DataFrame) -> List[SalesDataPoint]:
    """Bucket sales by calendar day, ascending by the underlying date."""
    if df.empty:
        return []

    days = df["timestamp"].dt.normalize().rename("day")
    daily = df.groupby(days)["total"].agg(amount="sum", orders="count").sort_index()

    return [
        SalesDataPoint(
            date=format_date_short(day.date()),
            amount=float(row["amount"]),
            orders=int(row["orders"]),
            day=day.date(),
        )
        for day, row in daily.iterrows()
    ]


def filter_sales(
    sales: Sequence[Sale],
    products: Sequence[Product],
    filters: FilterOptions,
    now: datetime | None = None,
) -> List[Sale]:
    """Return the sales that pass every filter stage, in input order.

    Args:
        sales: Sale records.
        products: Product catalog, used by the category stage.
        filters: Dashboard filter selection.
        now: Reference instant for the time stage. Defaults to datetime.now().

    Returns:
        Surviving Sale records.

    """
    if now is None:
        now = datetime.now()
    df = sales_to_frame(sales)
    mask = combined_mask(sales, df, products, filters, now)
    return [sales[pos] for pos in df.index[mask.to_numpy()]]


def filter_sales_data(
    sales: Sequence[Sale],
    products: Sequence[Product],
    filters: FilterOptions,
    now: datetime | None = None,
) -> List[SalesDataPoint]:
    """Filter sales and bucket the survivors into a daily series.

    Stages, in order: time range, status, category (any line item matches),
    customer type (new vs returning, judged against the full collection).

    Args:
        sales: Sale records.
        products: Product catalog, used by the category stage.
        filters: Dashboard filter selection.
        now: Reference instant for the time stage. Defaults to datetime.now().

    Returns:
        One SalesDataPoint per day with at least one surviving sale, ascending.

    Examples:
        >>> points = filter_sales_data(sales, products, FilterOptions(time_range="7d"), now=now)
        >>> [(p.date, p.amount, p.orders) for p in points]
        [('Jan 13', 250.0, 2), ('Jan 14', 80.0, 1)]

    """
    if now is None:
        now = datetime.now()
    df = sales_to_frame(sales)
    mask = combined_mask(sales, df, products, filters, now)
    return _daily_series(df[mask])


def get_filtered_stats(
    sales: Sequence[Sale],
    products: Sequence[Product],
    filters: FilterOptions,
    now: datetime | None = None,
) -> FilteredStats:
    """Summarize the filtered series and compare it with the preceding window.

    The preceding window has the same length as the current one and ends where
    it begins: ``[now - 2N days, now - N days)``. Status, category and customer
    type filters still apply to it. For time_range "all" there is no preceding
    window and growth is 0; the legacy dashboard instead compared "all" against
    a 30-day window (``[now - 60 days, now - 30 days)``), which is not done here.

    Args:
        sales: Sale records.
        products: Product catalog.
        filters: Dashboard filter selection.
        now: Reference instant. Defaults to datetime.now(), read once.

    Returns:
        FilteredStats with totals, average order value, growth rate, the daily
        series and the previous-window total.

    """
    if now is None:
        now = datetime.now()

    df = sales_to_frame(sales)
    base = attribute_mask(sales, df, products, filters)
    current = combined_mask(sales, df, products, filters, now)
    filtered = _daily_series(df[current])

    total_sales = sum(point.amount for point in filtered)
    total_orders = sum(point.orders for point in filtered)
    average_order_value = total_sales / total_orders if total_orders > 0 else 0.0

    previous_total = 0.0
    if filters.time_range in RELATIVE_RANGE_DAYS:
        window = timedelta(days=RELATIVE_RANGE_DAYS[filters.time_range])
        previous_start = now - 2 * window
        previous_end = now - window
        in_previous = (df["timestamp"] >= previous_start) & (df["timestamp"] < previous_end)
        previous_total = float(df.loc[base & in_previous, "total"].sum())

    growth_rate = (
        (total_sales - previous_total) / previous_total * 100 if previous_total > 0 else 0.0
    )

    logger.info(
        "Filtered stats: %d orders, total %.2f, previous %.2f, growth %.2f%%",
        total_orders,
        total_sales,
        previous_total,
        growth_rate,
    )

    return FilteredStats(
        total_sales=float(total_sales),
        total_orders=int(total_orders),
        average_order_value=float(average_order_value),
        growth_rate=float(growth_rate),
        filtered_sales=filtered,
        previous_sales=previous_total,
    )
