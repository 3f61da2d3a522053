"""Public API for customer demographics and insights.

Both operations work on the full, unfiltered sale and customer collections.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import List, Sequence

import pandas as pd

from pos_analytics.config import AGE_GROUPS, UNKNOWN_AGE_GROUP
from pos_analytics.frames import index_by_id, sales_to_frame
from pos_analytics.models import Customer, Sale
from pos_analytics.patterns.api import get_hourly_sales_pattern, get_weekly_sales_pattern
from pos_analytics.types import AgeGroupData, CustomerInsights

logger = logging.getLogger(__name__)


def get_age_group_analysis(
    sales: Sequence[Sale],
    customers: Sequence[Customer],
) -> List[AgeGroupData]:
    """Aggregate sales per customer age group.

    A sale contributes only when its customer_id resolves to a known customer
    with a recognized age group. Unmatched sales are left out here (they still
    count in the other aggregators).

    Args:
        sales: Sale records.
        customers: Customer records.

    Returns:
        Exactly eight AgeGroupData records, in config.AGE_GROUPS order.
        customers is the number of distinct customers, visit_frequency is
        orders per distinct customer (0 when there are none).

    """
    customer_map = index_by_id(customers)
    df = sales_to_frame(sales)
    df["age_group"] = df["customer_id"].map(
        lambda cid: customer_map[cid].age_group if cid in customer_map else None
    )
    matched = df[df["age_group"].isin(AGE_GROUPS)]
    logger.debug("%d of %d sales matched a customer age group", len(matched), len(df))

    if matched.empty:
        grouped = pd.DataFrame(
            {"customers": 0, "sales": 0.0, "orders": 0},
            index=pd.Index(AGE_GROUPS, name="age_group"),
        )
    else:
        grouped = (
            matched.groupby("age_group")
            .agg(
                customers=("customer_id", "nunique"),
                sales=("total", "sum"),
                orders=("total", "count"),
            )
            .reindex(AGE_GROUPS, fill_value=0)
        )

    results = []
    for age_group, row in grouped.iterrows():
        unique_customers = int(row["customers"])
        orders = int(row["orders"])
        sales_total = float(row["sales"])
        results.append(
            AgeGroupData(
                age_group=age_group,
                customers=unique_customers,
                sales=sales_total,
                avg_order_value=sales_total / orders if orders > 0 else 0.0,
                visit_frequency=orders / unique_customers if unique_customers > 0 else 0.0,
            )
        )
    return results


def dominant_age_group(customers: Sequence[Customer]) -> str:
    """Most common recognized age group across all customer records.

    Only groups in AGE_GROUPS are counted; free-form values such as "teen"
    are ignored, unlike the legacy dashboard which counted any non-empty
    label. Ties go to the group encountered first. Returns "N/A" when no
    customer has a recognized age group.
    """
    counts = Counter(c.age_group for c in customers if c.age_group in AGE_GROUPS)
    if not counts:
        return UNKNOWN_AGE_GROUP
    # most_common keeps insertion order among equal counts
    return counts.most_common(1)[0][0]


def get_customer_insights(
    sales: Sequence[Sale],
    customers: Sequence[Customer],
) -> CustomerInsights:
    """Summarize peak/low trading times and the customer mix.

    Peak and low day/hour are the argmax/argmin of sales in the weekly and
    hourly patterns; ties resolve to the first bucket (Sunday first, then
    hour ascending). Hours are reported by their 12-hour label. Most and least
    active age groups compare distinct transacting customers.

    Args:
        sales: All sale records (unfiltered).
        customers: All customer records.

    Returns:
        CustomerInsights summary record.

    """
    weekly = get_weekly_sales_pattern(sales)
    hourly = get_hourly_sales_pattern(sales)
    age_groups = get_age_group_analysis(sales, customers)

    peak_day = max(weekly, key=lambda day: day.sales)
    low_day = min(weekly, key=lambda day: day.sales)
    peak_hour = max(hourly, key=lambda hour: hour.sales)
    low_hour = min(hourly, key=lambda hour: hour.sales)
    most_active = max(age_groups, key=lambda group: group.customers)
    least_active = min(age_groups, key=lambda group: group.customers)

    insights = CustomerInsights(
        total_customers=len(customers),
        dominant_age_group=dominant_age_group(customers),
        most_active_age_group=most_active.age_group,
        least_active_age_group=least_active.age_group,
        peak_day=peak_day.day,
        low_day=low_day.day,
        peak_hour=peak_hour.time_label,
        low_hour=low_hour.time_label,
    )
    logger.info("Customer insights: peak %s at %s", insights.peak_day, insights.peak_hour)
    return insights
