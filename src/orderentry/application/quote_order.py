"""Application service: Quote Order use case (query)."""

from __future__ import annotations

from orderentry.application.build_order import BuildOrderHandler
from orderentry.application.dto import OrderItemSpec, QuoteDTO
from orderentry.domain.repository.product_repository import ProductRepository


class QuoteOrderHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, item_specs: list[OrderItemSpec]) -> QuoteDTO:
        order = BuildOrderHandler(self._product_repo).handle(None, item_specs)
        return QuoteDTO(
            line_count=len(order.items),
            net_total=order.calculate_expected_net_total(),
            has_unique_products=order.has_all_unique_products(),
        )
