"""Headline dashboard metrics: totals, payment mix and low-stock alerts."""

from __future__ import annotations

import logging
from typing import List, Sequence

from pos_analytics.config import DEFAULT_MIN_STOCK
from pos_analytics.frames import sales_to_frame
from pos_analytics.models import Customer, Product, Sale
from pos_analytics.types import DashboardMetrics

logger = logging.getLogger(__name__)


def low_stock_products(products: Sequence[Product]) -> List[Product]:
    """Products whose stock is below min_stock (DEFAULT_MIN_STOCK when unset)."""
    flagged = []
    for product in products:
        threshold = product.min_stock if product.min_stock is not None else DEFAULT_MIN_STOCK
        if product.stock < threshold:
            flagged.append(product)
    return flagged


def get_dashboard_metrics(
    sales: Sequence[Sale],
    products: Sequence[Product],
    customers: Sequence[Customer],
) -> DashboardMetrics:
    """Compute the dashboard's headline cards.

    Args:
        sales: All sale records.
        products: Product catalog.
        customers: Customer records.

    Returns:
        DashboardMetrics with totals, sales per payment method (first-seen
        order) and low-stock products.

    """
    df = sales_to_frame(sales)
    method_counts = df.groupby("payment_method", sort=False).size()

    metrics = DashboardMetrics(
        total_sales=float(df["total"].sum()),
        total_orders=len(df),
        total_customers=len(customers),
        payment_method_counts={str(method): int(count) for method, count in method_counts.items()},
        low_stock_products=low_stock_products(products),
    )
    logger.info(
        "Dashboard metrics: %d orders, %d low-stock products",
        metrics.total_orders,
        len(metrics.low_stock_products),
    )
    return metrics
