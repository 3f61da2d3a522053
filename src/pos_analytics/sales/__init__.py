"""Sales filter pipeline.

This module turns raw sales into the filtered daily series shown on the
dashboard's main chart, plus the headline stats above it:

- **filter_sales_data**: time range, status, category and customer-type
  filters, then one point per calendar day.
- **get_filtered_stats**: totals, average order value and growth against the
  preceding window of the same length.
- **filter_sales**: the surviving Sale records themselves.

Example:
    >>> from datetime import datetime
    >>> from pos_analytics.config import FilterOptions
    >>> from pos_analytics.sales import get_filtered_stats
    >>>
    >>> stats = get_filtered_stats(
    ...     sales, products, FilterOptions(time_range="30d"), now=datetime(2025, 1, 15)
    ... )
    >>> stats.growth_rate
    25.0
"""

from pos_analytics.sales.api import filter_sales, filter_sales_data, get_filtered_stats

__all__ = ["filter_sales", "filter_sales_data", "get_filtered_stats"]
