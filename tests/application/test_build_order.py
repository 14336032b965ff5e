"""Integration tests for the BuildOrder and QuoteOrder use cases."""

import pytest

from orderentry.application.build_order import BuildOrderHandler
from orderentry.application.dto import OrderItemSpec
from orderentry.application.quote_order import QuoteOrderHandler
from orderentry.domain.exceptions import EntityNotFoundError, ValidationError
from orderentry.domain.model.product import Product
from orderentry.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository


def _product_repo() -> FakeProductRepository:
    return FakeProductRepository([
        Product("Item1", Money.of("1.11")),
        Product("Item2", Money.of("2.22")),
        Product("Item3", Money.of("3.33")),
    ])


class TestBuildOrder:

    def test_resolves_products_in_request_order(self):
        handler = BuildOrderHandler(_product_repo())
        order = handler.handle(8888, [OrderItemSpec("Item3", 3), OrderItemSpec("Item1", 1)])
        assert [item.product.sku for item in order.items] == ["Item3", "Item1"]
        assert order.items[0].quantity.value == 3
        assert order.customer_id == 8888

    def test_uses_catalog_price(self):
        handler = BuildOrderHandler(_product_repo())
        order = handler.handle(8888, [OrderItemSpec("Item2", 1)])
        assert order.items[0].product.price == Money.of("2.22")

    def test_keeps_duplicate_skus(self):
        handler = BuildOrderHandler(_product_repo())
        order = handler.handle(8888, [OrderItemSpec("Item1", 1), OrderItemSpec("Item1", 2)])
        assert len(order.items) == 2
        assert not order.has_all_unique_products()

    def test_customer_may_be_absent(self):
        order = BuildOrderHandler(_product_repo()).handle(None, [OrderItemSpec("Item1", 1)])
        assert order.customer_id is None

    def test_unknown_sku_rejected(self):
        handler = BuildOrderHandler(_product_repo())
        with pytest.raises(EntityNotFoundError, match="Product not found: 'Nope'"):
            handler.handle(8888, [OrderItemSpec("Nope", 1)])

    def test_negative_quantity_rejected(self):
        handler = BuildOrderHandler(_product_repo())
        with pytest.raises(ValidationError, match="cannot be negative"):
            handler.handle(8888, [OrderItemSpec("Item1", -1)])


class TestQuoteOrder:

    def test_quote_prices_order(self):
        dto = QuoteOrderHandler(_product_repo()).handle([
            OrderItemSpec("Item1", 1),
            OrderItemSpec("Item2", 2),
            OrderItemSpec("Item3", 3),
        ])
        assert dto.line_count == 3
        assert dto.net_total == pytest.approx(15.54)
        assert dto.has_unique_products

    def test_quote_flags_duplicates(self):
        dto = QuoteOrderHandler(_product_repo()).handle([
            OrderItemSpec("Item1", 1),
            OrderItemSpec("Item1", 1),
        ])
        assert not dto.has_unique_products
        assert dto.net_total == pytest.approx(2.22)

    def test_quote_does_not_check_stock(self):
        repo = _product_repo()
        QuoteOrderHandler(repo).handle([OrderItemSpec("Item1", 1)])
        assert repo.stock_checks == []
