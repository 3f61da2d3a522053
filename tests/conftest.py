"""Shared fixtures for the analytics tests.

The reference instant is Wednesday 2025-01-15 12:00 (naive local time).
2025-01-05 is a Sunday and 2025-01-06 a Monday.
"""

from datetime import datetime
from typing import Callable

import pytest

from pos_analytics.models import Customer, Product, Sale, SaleItem

NOW = datetime(2025, 1, 15, 12, 0)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def make_sale() -> Callable[..., Sale]:
    """Factory for sales with sensible defaults.

    product_ids creates one line item per id, splitting the total evenly.
    """
    counter = {"n": 0}

    def _make(
        timestamp: datetime,
        total: float = 100.0,
        status: str = "completed",
        customer_id: str | None = None,
        product_ids: tuple[str, ...] = (),
        payment_method: str = "cash",
    ) -> Sale:
        counter["n"] += 1
        share = total / len(product_ids) if product_ids else 0.0
        items = tuple(
            SaleItem(product_id=pid, product_name=pid, quantity=1, price=share, total=share)
            for pid in product_ids
        )
        return Sale(
            id=f"s{counter['n']}",
            timestamp=timestamp,
            total=total,
            status=status,
            payment_method=payment_method,
            customer_id=customer_id,
            items=items,
        )

    return _make


@pytest.fixture
def products() -> list[Product]:
    return [
        Product(id="p-tea", name="Green Tea", category="Tea", price=50.0, stock=40),
        Product(id="p-spice", name="Cumin", category="Spices", price=30.0, stock=5),
        Product(id="p-rice", name="Basmati", category="Grains", price=90.0, stock=12, min_stock=15),
    ]


@pytest.fixture
def customers() -> list[Customer]:
    return [
        Customer(id="c1", name="Asha Rao", age_group="26-35"),
        Customer(id="c2", name="Vikram Shah", age_group="36-45"),
        Customer(id="c3", name="Lena Ortiz", age_group="26-35"),
        Customer(id="c4", name="Sam Lee"),
        Customer(id="c5", name="Ola Ade", age_group="teen"),
    ]
