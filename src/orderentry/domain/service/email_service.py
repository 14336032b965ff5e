"""Contract for the confirmation notification."""

from __future__ import annotations

from abc import ABC, abstractmethod


class EmailService(ABC):

    @abstractmethod
    def send_order_confirmation_email(self, customer_id: int, order_id: int) -> None:
        """Notify the customer that the order was placed."""
