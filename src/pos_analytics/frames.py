"""Shared frame building and bucketing for the aggregators.

Sales are converted to a pandas DataFrame once per call. Row positions match
the input sequence, so masks computed on the frame map straight back to the
Sale records.

All time-bucketed aggregators (weekly, hourly, day x hour) go through
bucket_sales(), which groups by an arbitrary key extractor and reindexes onto
the full set of bucket keys so empty buckets come back as zeros.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Sequence, TypeVar, Union

import pandas as pd

from pos_analytics.models import Sale

logger = logging.getLogger(__name__)

T = TypeVar("T")

SALE_COLUMNS = ["sale_id", "timestamp", "total", "status", "payment_method", "customer_id"]

BUCKET_COLUMNS = ["sales", "orders", "avg_order_value"]

KeyExtractor = Callable[[pd.DataFrame], Union[pd.Series, List[pd.Series]]]


def index_by_id(records: Iterable[T]) -> Dict[str, T]:
    """Build an id -> record mapping. Later duplicates win."""
    return {record.id: record for record in records}


def sales_to_frame(sales: Sequence[Sale]) -> pd.DataFrame:
    """Convert sales into a DataFrame with one row per sale.

    Columns: sale_id, timestamp, total, status, payment_method, customer_id.
    The index is the position of each sale in the input sequence.
    """
    rows = [
        {
            "sale_id": sale.id,
            "timestamp": sale.timestamp,
            "total": sale.total,
            "status": sale.status,
            "payment_method": sale.payment_method,
            "customer_id": sale.customer_id,
        }
        for sale in sales
    ]
    df = pd.DataFrame(rows, columns=SALE_COLUMNS)
    df["timestamp"] = pd.to_datetime(df["timestamp"])
    df["total"] = df["total"].astype(float)
    return df


def within_bounds(
    df: pd.DataFrame,
    start_date: datetime | None = None,
    end_date: datetime | None = None,
) -> pd.DataFrame:
    """Keep rows whose timestamp lies in [start_date, end_date].

    Either bound may be None, meaning unbounded on that side.
    """
    mask = pd.Series(True, index=df.index)
    if start_date is not None:
        mask &= df["timestamp"] >= start_date
    if end_date is not None:
        mask &= df["timestamp"] <= end_date
    return df[mask]


def sunday_first_weekday(timestamps: pd.Series) -> pd.Series:
    """Day of week with Sunday=0 ... Saturday=6."""
    return ((timestamps.dt.dayofweek + 1) % 7).astype("int64").rename("weekday")


def hour_of_day(timestamps: pd.Series) -> pd.Series:
    return timestamps.dt.hour.astype("int64").rename("hour")


def bucket_sales(
    df: pd.DataFrame,
    key: KeyExtractor,
    buckets: pd.Index,
) -> pd.DataFrame:
    """Group sales by key and return totals for every bucket.

    Args:
        df: Sales frame from sales_to_frame().
        key: Function returning the bucket key Series (or a list of Series
            for a multi-level key) for the frame.
        buckets: Every bucket key, in output order. Buckets with no sales
            come back with zeros.

    Returns:
        DataFrame indexed by buckets with columns sales, orders and
        avg_order_value (0 where orders is 0).

    """
    if df.empty:
        result = pd.DataFrame(
            {"sales": 0.0, "orders": 0, "avg_order_value": 0.0},
            index=buckets,
        )
        return result[BUCKET_COLUMNS]

    grouped = df.groupby(key(df))["total"].agg(sales="sum", orders="count")
    result = grouped.reindex(buckets, fill_value=0)
    result["sales"] = result["sales"].astype(float)
    result["orders"] = result["orders"].astype("int64")
    result["avg_order_value"] = (result["sales"] / result["orders"]).where(
        result["orders"] > 0, 0.0
    )
    return result[BUCKET_COLUMNS]
