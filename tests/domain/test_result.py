"""Unit tests for the Ok/Err placement result."""

import pytest

from orderentry.domain.exceptions import ValidationError, ValidationErrorKind
from orderentry.domain.model.result import Err, Ok
from orderentry.domain.model.summary import OrderSummary, TaxEntry


def _summary() -> OrderSummary:
    return OrderSummary(
        order_id=206,
        order_number="18008008553",
        net_total=15.54,
        total=10.878,
        taxes=(TaxEntry("tax1", 0.1), TaxEntry("tax2", 0.2)),
        customer_id=8888,
    )


class TestOk:

    def test_unwrap_returns_summary(self):
        summary = _summary()
        assert Ok(summary).unwrap() is summary

    def test_is_ok(self):
        assert Ok(_summary()).is_ok()


class TestErr:

    def test_exposes_kind(self):
        err = Err(ValidationError("dup", kind=ValidationErrorKind.DUPLICATE_PRODUCT))
        assert err.kind == ValidationErrorKind.DUPLICATE_PRODUCT
        assert not err.is_ok()

    def test_unwrap_raises_carried_error(self):
        error = ValidationError("gone", kind=ValidationErrorKind.NOT_IN_STOCK)
        with pytest.raises(ValidationError) as exc_info:
            Err(error).unwrap()
        assert exc_info.value is error


class TestOrderSummary:

    def test_total_tax(self):
        assert _summary().total_tax == pytest.approx(4.662)

    def test_immutable(self):
        with pytest.raises(AttributeError):
            _summary().total = 0.0
