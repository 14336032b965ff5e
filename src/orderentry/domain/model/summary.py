"""Fulfillment confirmation and the summary returned by order placement."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TaxEntry:
    """One jurisdictional tax rate, e.g. ``rate=0.1`` for 10%."""

    description: str
    rate: float


@dataclass(frozen=True)
class OrderConfirmation:
    """Proof of fulfillment.  Only the fulfillment collaborator creates these."""

    order_id: int
    order_number: str


@dataclass(frozen=True)
class OrderSummary:
    order_id: int
    order_number: str
    net_total: float
    total: float
    taxes: tuple[TaxEntry, ...]
    customer_id: int

    @property
    def total_tax(self) -> float:
        return self.net_total - self.total
