"""Predicate masks for the sales filter pipeline.

Each stage returns a boolean Series aligned with the sales frame. Stages are
independent, so combining them with ``&`` gives the same result in any order.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Sequence

import pandas as pd

from pos_analytics.config import FilterOptions
from pos_analytics.frames import index_by_id
from pos_analytics.models import Product, Sale
from pos_analytics.time_ranges import relative_cutoff

logger = logging.getLogger(__name__)


def time_mask(df: pd.DataFrame, time_range: str, now: datetime) -> pd.Series:
    """Keep sales at or after ``now - N days``. "all" keeps every sale."""
    cutoff = relative_cutoff(time_range, now)
    if cutoff is None:
        return pd.Series(True, index=df.index)
    return df["timestamp"] >= cutoff


def status_mask(df: pd.DataFrame, status: str) -> pd.Series:
    if status == "all":
        return pd.Series(True, index=df.index)
    return df["status"] == status


def category_mask(
    sales: Sequence[Sale],
    df: pd.DataFrame,
    products: Sequence[Product],
    category: str,
) -> pd.Series:
    """Keep a sale if ANY of its line items belongs to the category.

    Line items are joined to the catalog by product id. Items referencing
    unknown products never match.
    """
    if category == "all":
        return pd.Series(True, index=df.index)

    product_map = index_by_id(products)
    category_ids = {pid for pid, product in product_map.items() if product.category == category}
    matches = [any(item.product_id in category_ids for item in sale.items) for sale in sales]
    return pd.Series(matches, index=df.index, dtype=bool)


def returning_customer_flags(df: pd.DataFrame) -> pd.Series:
    """Flag sales made by a customer who already bought earlier.

    A sale is "returning" when another sale by the same customer has a
    strictly earlier timestamp. Sales without a customer are never returning.
    The flags are computed over the whole frame passed in, so callers must pass
    the unfiltered collection.
    """
    flags = pd.Series(False, index=df.index)
    known = df[df["customer_id"].notna()]
    if known.empty:
        return flags

    first_purchase = known.groupby("customer_id")["timestamp"].transform("min")
    flags.loc[known.index] = (known["timestamp"] > first_purchase).to_numpy()
    return flags


def customer_type_mask(df: pd.DataFrame, customer_type: str) -> pd.Series:
    if customer_type == "all":
        return pd.Series(True, index=df.index)
    returning = returning_customer_flags(df)
    if customer_type == "returning":
        return returning
    return ~returning


def attribute_mask(
    sales: Sequence[Sale],
    df: pd.DataFrame,
    products: Sequence[Product],
    filters: FilterOptions,
) -> pd.Series:
    """Combine the status, category and customer-type stages."""
    mask = status_mask(df, filters.status)
    mask &= category_mask(sales, df, products, filters.category)
    mask &= customer_type_mask(df, filters.customer_type)
    return mask


def combined_mask(
    sales: Sequence[Sale],
    df: pd.DataFrame,
    products: Sequence[Product],
    filters: FilterOptions,
    now: datetime,
) -> pd.Series:
    """All four stages: time, status, category, customer type."""
    mask = time_mask(df, filters.time_range, now)
    mask &= attribute_mask(sales, df, products, filters)
    logger.debug("%d of %d sales pass filters %s", int(mask.sum()), len(df), filters)
    return mask
