"""Input records consumed by the analytics engine.

These are read-only snapshots supplied by the state-management layer. The
engine never mutates them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple

from pos_analytics.config import SALE_STATUSES
from pos_analytics.exceptions import DataQualityError


@dataclass(frozen=True)
class SaleItem:
    """One line of a sale."""

    product_id: str
    product_name: str
    quantity: float
    price: float
    total: float


@dataclass(frozen=True)
class Sale:
    """A sale transaction.

    Attributes:
        id: Sale identifier.
        timestamp: When the sale happened.
        total: Monetary total (non-negative). Not re-validated against line totals.
        status: One of "completed", "pending", "partial", "cancelled".
        payment_method: e.g. "cash", "card", "upi".
        customer_id: Optional reference to a Customer.
        items: Ordered line items.

    Raises:
        DataQualityError: On a negative total, unknown status or non-datetime timestamp.
    """

    id: str
    timestamp: datetime
    total: float
    status: str = "completed"
    payment_method: str = "cash"
    customer_id: Optional[str] = None
    items: Tuple[SaleItem, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.timestamp, datetime):
            raise DataQualityError(f"Sale {self.id}: timestamp must be a datetime")
        if not math.isfinite(self.total):
            raise DataQualityError(
                f"Sale {self.id}: total must be a finite number, got {self.total}"
            )
        if self.total < 0:
            raise DataQualityError(f"Sale {self.id}: total must be >= 0, got {self.total}")
        if self.status not in SALE_STATUSES:
            raise DataQualityError(
                f"Sale {self.id}: unknown status '{self.status}'. Must be one of {SALE_STATUSES}."
            )
        # Accept lists from callers but store an immutable tuple
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True)
class Product:
    """A catalog product."""

    id: str
    name: str
    category: str
    price: float = 0.0
    stock: float = 0.0
    min_stock: Optional[float] = None


@dataclass(frozen=True)
class Customer:
    """A customer record.

    age_group is expected to be one of config.AGE_GROUPS; other values are kept
    as-is but ignored by the demographic aggregators.
    """

    id: str
    name: str
    age_group: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
