"""Example: Dashboard snapshot from a JSON export

This example loads sales, products and customers from a JSON export of the
dashboard state and prints the numbers behind each dashboard card.

The JSON file is expected to look like:
    {
      "sales": [{"id": "...", "date": "2025-01-06T10:30:00", "total": 120, ...}],
      "products": [{"id": "...", "name": "...", "category": "Tea", ...}],
      "customers": [{"id": "...", "firstName": "...", "ageGroup": "26-35", ...}]
    }

Usage:
    python examples/dashboard_snapshot.py export.json --time-range 30d --category Tea
    python examples/dashboard_snapshot.py export.json --now 2025-01-15T12:00:00
"""

import argparse
import json
import logging
from pathlib import Path

from pos_analytics import FilterOptions, resolve_date_range
from pos_analytics.customers import get_age_group_analysis, get_customer_insights
from pos_analytics.loaders import (
    customers_from_records,
    parse_timestamp,
    products_from_records,
    sales_from_records,
)
from pos_analytics.patterns import get_day_hour_heat_map, get_weekly_sales_pattern
from pos_analytics.sales import get_filtered_stats
from pos_analytics.summary import get_dashboard_metrics

parser = argparse.ArgumentParser(description="Print a POS dashboard snapshot")
parser.add_argument("export", type=Path, help="JSON export with sales, products and customers")
parser.add_argument("--time-range", default="30d", help="7d, 30d, 3m, 6m, 1y or all")
parser.add_argument("--category", default="all")
parser.add_argument("--status", default="all")
parser.add_argument("--customer-type", default="all")
parser.add_argument("--now", default=None, help="Reference instant (ISO); defaults to now")
parser.add_argument("--verbose", action="store_true")
args = parser.parse_args()

logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

data = json.loads(args.export.read_text(encoding="utf-8"))
sales = sales_from_records(data.get("sales", []))
products = products_from_records(data.get("products", []))
customers = customers_from_records(data.get("customers", []))

filters = FilterOptions(
    time_range=args.time_range,
    category=args.category,
    status=args.status,
    customer_type=args.customer_type,
)
now = parse_timestamp(args.now) if args.now else None

# Headline cards
metrics = get_dashboard_metrics(sales, products, customers)
print(f"Total sales: {metrics.total_sales:,.2f} across {metrics.total_orders} orders")
print(f"Customers: {metrics.total_customers}")
print(f"Payment methods: {metrics.payment_method_counts}")
print(f"Low stock: {[p.name for p in metrics.low_stock_products]}")

# Filtered series + growth
stats = get_filtered_stats(sales, products, filters, now=now)
print(f"\nFiltered ({filters.time_range}): {stats.total_sales:,.2f}, {stats.total_orders} orders")
print(f"Average order value: {stats.average_order_value:,.2f}")
print(f"Growth vs previous period: {stats.growth_rate:+.1f}%")
for point in stats.filtered_sales:
    print(f"  {point.date:>7}  {point.amount:>10,.2f}  {point.orders:>4}")

# Weekly pattern for the current month
month = resolve_date_range("current_month", now=now)
print(f"\nWeekly pattern {month.start_date:%Y-%m-%d} to {month.end_date:%Y-%m-%d}:")
for day in get_weekly_sales_pattern(sales, month.start_date, month.end_date):
    print(f"  {day.day:<10} {day.sales:>10,.2f}  {day.orders:>4}")

# Busiest heat-map cells
hottest = sorted(get_day_hour_heat_map(sales), key=lambda cell: cell.intensity, reverse=True)[:5]
print("\nBusiest slots:")
for cell in hottest:
    print(f"  {cell.day:<10} {cell.hour:02d}:00  intensity {cell.intensity:.2f}")

# Demographics
print("\nAge groups:")
for group in get_age_group_analysis(sales, customers):
    print(f"  {group.age_group:<6} customers={group.customers:<4} sales={group.sales:,.2f}")

insights = get_customer_insights(sales, customers)
print(f"\nPeak day: {insights.peak_day}, low day: {insights.low_day}")
print(f"Peak hour: {insights.peak_hour}, low hour: {insights.low_hour}")
print(f"Dominant age group: {insights.dominant_age_group}")
