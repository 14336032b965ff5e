"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (SKU + quantity)."""

    sku: str
    quantity: float


@dataclass(frozen=True)
class QuoteDTO:
    """Output: pre-tax pricing of an order that has not been placed."""

    line_count: int
    net_total: float
    has_unique_products: bool
