"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations

from enum import Enum


class ValidationErrorKind(Enum):
    NOT_IN_STOCK = "NOT_IN_STOCK"
    DUPLICATE_PRODUCT = "DUPLICATE_PRODUCT"
    MISSING_CUSTOMER = "MISSING_CUSTOMER"


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated.

    Order placement failures carry a ``kind`` so callers can branch on it;
    value-object violations leave it as None.
    """

    def __init__(self, message: str, kind: ValidationErrorKind | None = None) -> None:
        super().__init__(message)
        self.kind = kind


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
