"""Abstract repository for Customer records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderentry.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def get(self, customer_id: int) -> Customer:
        """Return the customer with this id.

        Implementations decide how a missing customer is reported; the
        order service lets any such error propagate.
        """
