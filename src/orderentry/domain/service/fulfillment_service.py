"""Contract for the external order fulfillment service."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderentry.domain.model.order import Order
from orderentry.domain.model.summary import OrderConfirmation


class OrderFulfillmentService(ABC):

    @abstractmethod
    def fulfill(self, order: Order) -> OrderConfirmation:
        """Commit the order for shipment and return its confirmation."""
