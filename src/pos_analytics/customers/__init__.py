"""Customer demographics module.

- **get_age_group_analysis**: eight fixed age-group buckets with distinct
  customers, revenue, average order value and visit frequency.
- **get_customer_insights**: peak/low day and hour, dominant and most/least
  active age groups over the full data set.
"""

from pos_analytics.customers.api import get_age_group_analysis, get_customer_insights

__all__ = ["get_age_group_analysis", "get_customer_insights"]
