"""Unit tests for the Order model: product uniqueness and net total."""

import pytest

from orderentry.domain.model.order import Order, OrderItem
from orderentry.domain.model.product import Product
from orderentry.domain.model.value_objects import Money, Quantity


def _item(sku: str, price: str, qty: float) -> OrderItem:
    return OrderItem(product=Product(sku, Money.of(price)), quantity=Quantity(qty))


def _standard_order() -> Order:
    return Order(
        items=[
            _item("Item1", "1.11", 1),
            _item("Item2", "2.22", 2),
            _item("Item3", "3.33", 3),
        ],
        customer_id=8888,
    )


class TestProductIdentity:

    def test_same_sku_different_instances_are_equal(self):
        assert Product("Item1", Money.of("1.11")) == Product("Item1", Money.of("1.11"))

    def test_equality_ignores_price(self):
        a = Product("Item1", Money.of("1.11"))
        b = Product("Item1", Money.of("9.99"))
        assert a == b
        assert hash(a) == hash(b)

    def test_different_sku_not_equal(self):
        assert Product("Item1", Money.of("1.11")) != Product("Item2", Money.of("1.11"))


class TestHasAllUniqueProducts:

    def test_distinct_skus_are_unique(self):
        assert _standard_order().has_all_unique_products()

    def test_empty_order_is_unique(self):
        assert Order().has_all_unique_products()

    def test_single_item_is_unique(self):
        assert Order(items=[_item("Item1", "1.11", 1)]).has_all_unique_products()

    def test_shared_product_instance_is_duplicate(self):
        product = Product("Item1", Money.of("1.11"))
        order = Order(items=[
            OrderItem(product, Quantity(1)),
            OrderItem(product, Quantity(2)),
        ])
        assert not order.has_all_unique_products()

    def test_separate_instances_with_same_sku_are_duplicate(self):
        order = Order(items=[
            _item("Item1", "1.11", 1),
            _item("Item2", "2.22", 1),
            _item("Item1", "5.00", 4),
        ])
        assert not order.has_all_unique_products()

    def test_every_item_same_product(self):
        order = Order(items=[_item("Item1", "1.11", q) for q in (1, 2, 3)])
        assert not order.has_all_unique_products()


class TestCalculateExpectedNetTotal:

    def test_sum_of_quantity_times_price(self):
        assert _standard_order().calculate_expected_net_total() == pytest.approx(
            15.54, abs=1e-9
        )

    def test_empty_order_is_zero(self):
        assert Order().calculate_expected_net_total() == 0

    def test_fractional_quantity(self):
        order = Order(items=[_item("Bulk", "2.00", 1.5)])
        assert order.calculate_expected_net_total() == pytest.approx(3.0)

    def test_zero_quantity_contributes_nothing(self):
        order = Order(items=[_item("Item1", "1.11", 0), _item("Item2", "2.22", 1)])
        assert order.calculate_expected_net_total() == pytest.approx(2.22)

    def test_insertion_order_does_not_matter(self):
        forward = _standard_order()
        backward = Order(items=list(reversed(forward.items)))
        assert backward.calculate_expected_net_total() == pytest.approx(
            forward.calculate_expected_net_total(), abs=1e-9
        )

    def test_line_total(self):
        assert _item("Item3", "3.33", 3).line_total == pytest.approx(9.99)
