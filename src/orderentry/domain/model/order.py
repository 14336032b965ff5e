"""Order: the line items a caller submits for placement.

The Order is built fully by the caller before submission and is read-only
from the service's point of view.  It knows how to check its own product
uniqueness and how to price itself before tax.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from orderentry.domain.model.product import Product
from orderentry.domain.model.value_objects import Quantity


@dataclass(frozen=True)
class OrderItem:
    """One (product, quantity) pairing.  The product is shared, not owned."""

    product: Product
    quantity: Quantity

    @property
    def line_total(self) -> float:
        return float(self.quantity) * float(self.product.price)


@dataclass
class Order:
    items: list[OrderItem] = field(default_factory=list)
    customer_id: int | None = None

    def has_all_unique_products(self) -> bool:
        """True if no two line items reference the same SKU."""
        seen: set[str] = set()
        for item in self.items:
            if item.product.sku in seen:
                return False
            seen.add(item.product.sku)
        return True

    def calculate_expected_net_total(self) -> float:
        """Pre-tax total: sum of quantity x unit price over all line items."""
        return sum((item.line_total for item in self.items), 0.0)
