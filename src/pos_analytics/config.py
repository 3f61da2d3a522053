"""Configuration constants and filter options for the analytics engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from pos_analytics.exceptions import ConfigError

# Day names, Sunday first (matches the dashboard's week)
DAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]

WEEKEND_DAYS = {"Saturday", "Sunday"}

# Fixed demographic buckets, in display order
AGE_GROUPS = ["0-12", "13-17", "18-25", "26-35", "36-45", "46-55", "56-65", "65+"]

# Relative time ranges: token -> days back from "now"
RELATIVE_RANGE_DAYS = {
    "7d": 7,
    "30d": 30,
    "3m": 90,
    "6m": 180,
    "1y": 365,
}

TIME_RANGES = [*RELATIVE_RANGE_DAYS, "all"]

SALE_STATUSES = ["completed", "pending", "partial", "cancelled"]

FILTER_STATUSES = ["all", "completed", "pending", "cancelled"]

CUSTOMER_TYPES = ["all", "new", "returning"]

# Calendar-aligned range tokens understood by the time-range resolver
CALENDAR_RANGES = [
    "current_week",
    "current_month",
    "current_year",
    "last_week",
    "last_month",
    "last_year",
    "custom",
]

# Products below this stock level are flagged when they carry no min_stock
DEFAULT_MIN_STOCK = 10

# Returned when no customer carries a recognized age group
UNKNOWN_AGE_GROUP = "N/A"


@dataclass(frozen=True)
class FilterOptions:
    """Dashboard filter selection.

    Attributes:
        time_range: Relative window ("7d", "30d", "3m", "6m", "1y") or "all".
        category: Product category name, or "all" to skip the category filter.
        status: Sale status to keep ("completed", "pending", "cancelled") or "all".
        customer_type: "new", "returning" or "all".

    Raises:
        ConfigError: If a field holds a value outside its allowed set.
    """

    time_range: str = "30d"
    category: str = "all"
    status: str = "all"
    customer_type: str = "all"

    def __post_init__(self) -> None:
        if self.time_range not in TIME_RANGES:
            raise ConfigError(
                f"Invalid time_range '{self.time_range}'. Must be one of {TIME_RANGES}."
            )
        if self.status not in FILTER_STATUSES:
            raise ConfigError(f"Invalid status '{self.status}'. Must be one of {FILTER_STATUSES}.")
        if self.customer_type not in CUSTOMER_TYPES:
            raise ConfigError(
                f"Invalid customer_type '{self.customer_type}'. Must be one of {CUSTOMER_TYPES}."
            )
        if not self.category:
            raise ConfigError("category must be 'all' or a category name")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FilterOptions:
        """Create FilterOptions from a filter-control payload.

        Accepts both the UI's camelCase keys (timeRange, customerType) and
        snake_case keys. Missing keys fall back to the defaults.

        Examples:
            >>> FilterOptions.from_dict({"timeRange": "7d", "customerType": "new"})
            FilterOptions(time_range='7d', category='all', status='all', customer_type='new')
        """
        defaults = cls()
        return cls(
            time_range=data.get("timeRange", data.get("time_range", defaults.time_range)),
            category=data.get("category", defaults.category),
            status=data.get("status", defaults.status),
            customer_type=data.get(
                "customerType", data.get("customer_type", defaults.customer_type)
            ),
        )
