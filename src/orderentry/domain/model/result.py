"""Outcome of an order placement: ``Ok(summary)`` or ``Err(error)``.

Validation failures are returned rather than raised so the caller can
branch on them.  Collaborator failures are never wrapped here; they
propagate as exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from orderentry.domain.exceptions import ValidationError, ValidationErrorKind
from orderentry.domain.model.summary import OrderSummary


@dataclass(frozen=True)
class Ok:
    value: OrderSummary

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> OrderSummary:
        return self.value


@dataclass(frozen=True)
class Err:
    error: ValidationError

    @property
    def kind(self) -> ValidationErrorKind | None:
        return self.error.kind

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> OrderSummary:
        """Raise the carried ValidationError."""
        raise self.error


PlaceOrderResult = Union[Ok, Err]
