"""Sales pattern aggregators.

- **get_weekly_sales_pattern**: 7 buckets, Sunday first.
- **get_hourly_sales_pattern**: 24 buckets with 12-hour labels.
- **get_day_hour_heat_map**: 168 cells with globally normalized intensity.
- **get_day_performance_insights**: best/worst day, weekend vs weekday.

Example:
    >>> from pos_analytics.patterns import get_weekly_sales_pattern
    >>> weekly = get_weekly_sales_pattern(sales)
    >>> weekly[1]
    WeeklySalesData(day='Monday', sales=300.0, orders=3, avg_order_value=100.0)
"""

from pos_analytics.patterns.api import (
    get_day_hour_heat_map,
    get_day_performance_insights,
    get_hourly_sales_pattern,
    get_weekly_sales_pattern,
)

__all__ = [
    "get_day_hour_heat_map",
    "get_day_performance_insights",
    "get_hourly_sales_pattern",
    "get_weekly_sales_pattern",
]
