"""Customer record as returned by the customer collaborator.

Only ``postal_code`` and ``country`` matter to order placement (they key
the tax lookup); the rest is carried along for the collaborators.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:
    customer_id: int
    postal_code: str
    country: str
    customer_name: str = ""
    email_address: str = ""
    address_line1: str = ""
    address_line2: str = ""
    city: str = ""
    state_or_province: str = ""
