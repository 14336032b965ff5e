"""Application service: Build Order use case.

Resolves the SKUs a caller asked for against the catalog and assembles
an Order ready for placement.  Duplicated SKUs are kept as separate line
items; rejecting them is the placement workflow's job.
"""

from __future__ import annotations

from orderentry.application.dto import OrderItemSpec
from orderentry.domain.exceptions import EntityNotFoundError
from orderentry.domain.model.order import Order, OrderItem
from orderentry.domain.model.value_objects import Quantity
from orderentry.domain.repository.product_repository import ProductRepository


class BuildOrderHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        customer_id: int | None,
        item_specs: list[OrderItemSpec],
    ) -> Order:
        items: list[OrderItem] = []

        for spec in item_specs:
            product = self._product_repo.get_by_sku(spec.sku)
            if product is None:
                raise EntityNotFoundError(f"Product not found: '{spec.sku}'")
            items.append(OrderItem(product=product, quantity=Quantity(spec.quantity)))

        return Order(items=items, customer_id=customer_id)
