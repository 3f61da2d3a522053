"""POS Analytics Core - sales aggregation engine for the POS dashboard.

This package turns raw sale transactions plus product and customer reference
data into the series, pattern grids and summary statistics the dashboard
charts render. It is a pure, in-memory function library: no files, no
network, and "now" is always injectable.

Module Structure:
    pos_analytics.sales: Filter pipeline, daily series and growth stats
    pos_analytics.patterns: Weekly, hourly and day x hour aggregators
    pos_analytics.customers: Age-group demographics and customer insights
    pos_analytics.summary: Headline dashboard metrics
    pos_analytics.time_ranges: Calendar and relative time-range resolution
    pos_analytics.loaders: Model records from JSON-like dicts

Quick Start:
    >>> from datetime import datetime
    >>> from pos_analytics import FilterOptions
    >>> from pos_analytics.sales import get_filtered_stats
    >>> from pos_analytics.patterns import get_day_hour_heat_map
    >>>
    >>> now = datetime(2025, 1, 15, 12, 0)
    >>> stats = get_filtered_stats(sales, products, FilterOptions(time_range="7d"), now=now)
    >>> heat_map = get_day_hour_heat_map(sales)
"""

__version__ = "0.1.0"

from pos_analytics.config import FilterOptions
from pos_analytics.exceptions import (
    AnalyticsError,
    ConfigError,
    DataQualityError,
    InvalidRangeError,
)
from pos_analytics.models import Customer, Product, Sale, SaleItem
from pos_analytics.time_ranges import resolve_date_range

__all__ = [
    "AnalyticsError",
    "ConfigError",
    "Customer",
    "DataQualityError",
    "FilterOptions",
    "InvalidRangeError",
    "Product",
    "Sale",
    "SaleItem",
    "__version__",
    "resolve_date_range",
]
