"""Application service: Place Order use case.

Sequences the whole placement workflow:

  1. every line item must be in stock
  2. every line item must reference a distinct product
  3. the order must name a customer
  4. fulfillment is delegated to the external service
  5. customer and tax entries are looked up
  6. net total, tax and grand total are computed
  7. the customer is notified

Validation failures (1-3) are returned as ``Err`` before any side effect.
Errors raised by collaborators are not caught here; they reach the caller
unchanged.
"""

from __future__ import annotations

import logging

from orderentry.domain.exceptions import ValidationError, ValidationErrorKind
from orderentry.domain.model.order import Order
from orderentry.domain.model.result import Err, Ok, PlaceOrderResult
from orderentry.domain.model.summary import OrderSummary, TaxEntry
from orderentry.domain.repository.customer_repository import CustomerRepository
from orderentry.domain.repository.product_repository import ProductRepository
from orderentry.domain.service.email_service import EmailService
from orderentry.domain.service.fulfillment_service import OrderFulfillmentService
from orderentry.domain.service.tax_rate_service import TaxRateService

logger = logging.getLogger(__name__)


class OrderService:

    def __init__(
        self,
        product_repo: ProductRepository,
        fulfillment_service: OrderFulfillmentService,
        tax_rate_service: TaxRateService,
        customer_repo: CustomerRepository,
        email_service: EmailService,
    ) -> None:
        self._product_repo = product_repo
        self._fulfillment_service = fulfillment_service
        self._tax_rate_service = tax_rate_service
        self._customer_repo = customer_repo
        self._email_service = email_service

    def place_order(self, order: Order) -> PlaceOrderResult:
        logger.info(
            "Placing order for customer %s (%d line items)",
            order.customer_id,
            len(order.items),
        )

        error = self._validate(order)
        if error is not None:
            return self._reject(error)

        customer_id = order.customer_id
        if customer_id is None:
            return self._reject(
                ValidationError(
                    "Order has no customer",
                    kind=ValidationErrorKind.MISSING_CUSTOMER,
                )
            )

        confirmation = self._fulfillment_service.fulfill(order)

        customer = self._customer_repo.get(customer_id)
        taxes = self._tax_rate_service.get_tax_entries(
            customer.postal_code, customer.country
        )

        net_total = order.calculate_expected_net_total()
        total_tax = self._sum_taxes(taxes, net_total)
        logger.debug(
            "Order %s: net=%s tax=%s (%d tax entries)",
            confirmation.order_id,
            net_total,
            total_tax,
            len(taxes),
        )

        summary = OrderSummary(
            order_id=confirmation.order_id,
            order_number=confirmation.order_number,
            net_total=net_total,
            total=net_total - total_tax,
            taxes=tuple(taxes),
            customer_id=customer_id,
        )

        self._email_service.send_order_confirmation_email(
            summary.customer_id, summary.order_id
        )

        logger.info(
            "Order %s placed (number=%s, total=%s)",
            summary.order_id,
            summary.order_number,
            summary.total,
        )
        return Ok(summary)

    # --- Validation -----------------------------------------------------------

    def _validate(self, order: Order) -> ValidationError | None:
        """Return the first failed stock or uniqueness check, or None."""
        out_of_stock = self._first_out_of_stock(order)
        if out_of_stock is not None:
            return ValidationError(
                f"Product '{out_of_stock}' is not in stock",
                kind=ValidationErrorKind.NOT_IN_STOCK,
            )

        if not order.has_all_unique_products():
            return ValidationError(
                "Order contains the same product more than once",
                kind=ValidationErrorKind.DUPLICATE_PRODUCT,
            )

        return None

    @staticmethod
    def _reject(error: ValidationError) -> Err:
        kind = error.kind.value if error.kind is not None else "UNKNOWN"
        logger.warning("Order rejected (%s): %s", kind, error)
        return Err(error)

    def _first_out_of_stock(self, order: Order) -> str | None:
        for item in order.items:
            if not self._product_repo.is_in_stock(item.product.sku):
                return item.product.sku
        return None

    # --- Pricing --------------------------------------------------------------

    @staticmethod
    def _sum_taxes(taxes: list[TaxEntry], net_total: float) -> float:
        # Every rate applies to the same net base; rates are not compounded.
        return sum((entry.rate * net_total for entry in taxes), 0.0)
