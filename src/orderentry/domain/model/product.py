"""Product: owned by the external catalog, referenced by order items.

Identity is the SKU: two Product instances with the same SKU are the same
product, whatever their price.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from orderentry.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    sku: str
    price: Money = field(compare=False)
