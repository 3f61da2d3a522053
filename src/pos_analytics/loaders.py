"""Build model records from JSON-like dicts.

The dashboard's state layer stores records with camelCase keys (``date``,
``paymentMethod``, ``productId``, ``ageGroup``...). These helpers convert such
dicts into the frozen models the aggregators consume. They do not touch the
filesystem; callers load the JSON themselves.

Examples:
    >>> sales = sales_from_records([
    ...     {"id": "s1", "date": "2025-01-06T10:30:00", "total": 120.0,
    ...      "status": "completed", "paymentMethod": "card",
    ...      "customer": {"id": "c1"},
    ...      "items": [{"productId": "p1", "productName": "Tea", "price": 60.0,
    ...                 "quantity": 2, "total": 120.0}]},
    ... ])
    >>> sales[0].customer_id
    'c1'
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Iterable, List, Mapping

import pandas as pd

from pos_analytics.exceptions import DataQualityError
from pos_analytics.models import Customer, Product, Sale, SaleItem

logger = logging.getLogger(__name__)


def _require(record: Mapping[str, Any], key: str, kind: str) -> Any:
    if key not in record or record[key] is None:
        raise DataQualityError(f"{kind} record is missing required key '{key}': {dict(record)}")
    return record[key]


def _to_local_naive(moment: datetime) -> datetime:
    # Aware values ("...Z", "+05:30") become wall-clock time in the runtime's zone
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO string, datetime or pandas Timestamp into a naive local datetime.

    Timezone-aware inputs (for example a JS ``Date`` serialized as
    ``"2025-01-14T10:00:00.000Z"``) are converted to the runtime's local time
    and stripped of their tzinfo, so sales with different offsets compare and
    bucket on the same clock as ``datetime.now()``. Naive inputs are kept as is.

    Raises:
        DataQualityError: If the value cannot be parsed.

    """
    if isinstance(value, datetime) and not isinstance(value, pd.Timestamp):
        return _to_local_naive(value)
    try:
        parsed = pd.Timestamp(value)
    except (TypeError, ValueError) as e:
        raise DataQualityError(f"Invalid timestamp {value!r}: {e}") from e
    if pd.isna(parsed):
        raise DataQualityError(f"Invalid timestamp {value!r}")
    return _to_local_naive(parsed.to_pydatetime())


def _customer_reference(record: Mapping[str, Any]) -> str | None:
    # Sales embed either the customer object or just its id
    customer = record.get("customer", record.get("customerId"))
    if customer is None:
        return None
    if isinstance(customer, Mapping):
        return customer.get("id")
    return str(customer)


def sale_item_from_record(record: Mapping[str, Any]) -> SaleItem:
    quantity = float(record.get("quantity", 1))
    price = float(record.get("price", 0.0))
    return SaleItem(
        product_id=str(_require(record, "productId", "SaleItem")),
        product_name=record.get("productName", ""),
        quantity=quantity,
        price=price,
        total=float(record.get("total", quantity * price)),
    )


def sales_from_records(records: Iterable[Mapping[str, Any]]) -> List[Sale]:
    """Convert sale dicts into Sale records.

    Raises:
        DataQualityError: On missing id/date/total or invalid values.

    """
    sales = []
    for record in records:
        sales.append(
            Sale(
                id=str(_require(record, "id", "Sale")),
                timestamp=parse_timestamp(_require(record, "date", "Sale")),
                total=float(_require(record, "total", "Sale")),
                status=record.get("status", "completed"),
                payment_method=record.get("paymentMethod", "cash"),
                customer_id=_customer_reference(record),
                items=tuple(sale_item_from_record(item) for item in record.get("items", [])),
            )
        )
    logger.debug("Loaded %d sales", len(sales))
    return sales


def products_from_records(records: Iterable[Mapping[str, Any]]) -> List[Product]:
    products = []
    for record in records:
        min_stock = record.get("minStock")
        products.append(
            Product(
                id=str(_require(record, "id", "Product")),
                name=record.get("name", ""),
                category=_require(record, "category", "Product"),
                price=float(record.get("price", 0.0)),
                stock=float(record.get("stock", 0.0)),
                min_stock=float(min_stock) if min_stock is not None else None,
            )
        )
    logger.debug("Loaded %d products", len(products))
    return products


def customers_from_records(records: Iterable[Mapping[str, Any]]) -> List[Customer]:
    """Convert customer dicts into Customer records.

    The display name is ``name`` when present, otherwise firstName + lastName.
    """
    customers = []
    for record in records:
        name = record.get("name") or " ".join(
            part for part in (record.get("firstName"), record.get("lastName")) if part
        )
        customers.append(
            Customer(
                id=str(_require(record, "id", "Customer")),
                name=name,
                age_group=record.get("ageGroup"),
                phone=record.get("phone"),
                email=record.get("email"),
            )
        )
    logger.debug("Loaded %d customers", len(customers))
    return customers
