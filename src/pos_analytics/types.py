"""Result records returned by the analytics engine.

Every record is frozen and rebuilt from scratch on each call. Chart
components treat them as opaque plotting data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, List


@dataclass(frozen=True)
class DateRange:
    """Concrete [start_date, end_date] pair, both ends inclusive."""

    start_date: datetime
    end_date: datetime


@dataclass(frozen=True)
class SalesDataPoint:
    """One calendar day of the filtered sales series.

    Attributes:
        date: Short display label, e.g. "Jan 5".
        amount: Sum of sale totals for the day.
        orders: Number of sales on the day.
        day: Underlying calendar date, used for ordering.
    """

    date: str
    amount: float
    orders: int
    day: date


@dataclass(frozen=True)
class FilteredStats:
    """Summary of the filtered series plus period-over-period growth.

    Attributes:
        total_sales: Sum of amounts in filtered_sales.
        total_orders: Sum of orders in filtered_sales.
        average_order_value: total_sales / total_orders, 0 when there are no orders.
        growth_rate: Percent change against the preceding window, 0 when that
            window has no sales.
        filtered_sales: Daily series from the filter pipeline.
        previous_sales: Total of the preceding window (0 when it is empty).
    """

    total_sales: float
    total_orders: int
    average_order_value: float
    growth_rate: float
    filtered_sales: List[SalesDataPoint] = field(default_factory=list)
    previous_sales: float = 0.0


@dataclass(frozen=True)
class WeeklySalesData:
    day: str
    sales: float
    orders: int
    avg_order_value: float


@dataclass(frozen=True)
class HourlySalesData:
    hour: str
    sales: float
    orders: int
    avg_order_value: float
    time_label: str


@dataclass(frozen=True)
class DayHourSalesData:
    """One heat-map cell. intensity is sales / max cell sales over the full grid."""

    day: str
    hour: int
    sales: float
    orders: int
    intensity: float


@dataclass(frozen=True)
class AgeGroupData:
    """Demographic bucket.

    customers counts distinct customers, not sales. visit_frequency is
    orders per distinct customer.
    """

    age_group: str
    customers: int
    sales: float
    avg_order_value: float
    visit_frequency: float


@dataclass(frozen=True)
class CustomerInsights:
    total_customers: int
    dominant_age_group: str
    most_active_age_group: str
    least_active_age_group: str
    peak_day: str
    low_day: str
    peak_hour: str
    low_hour: str


@dataclass(frozen=True)
class DayPerformanceInsights:
    best_day: WeeklySalesData
    worst_day: WeeklySalesData
    weekend_sales: float
    weekday_sales: float


@dataclass(frozen=True)
class DashboardMetrics:
    """Headline numbers for the dashboard cards.

    Attributes:
        total_sales: Sum of all sale totals.
        total_orders: Number of sales.
        total_customers: Number of customer records.
        payment_method_counts: Sales per payment method, in first-seen order.
        low_stock_products: Products below their minimum stock.
    """

    total_sales: float
    total_orders: int
    total_customers: int
    payment_method_counts: Dict[str, int] = field(default_factory=dict)
    low_stock_products: list = field(default_factory=list)
