"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Configuration comes from the environment:

  ORDERENTRY_DATA_DIR   directory holding the JSON files (default: <repo>/data)
  ORDERENTRY_LOG_LEVEL  logging level name (default: INFO)
  ORDERENTRY_LOG_FILE   optional path of a rotating log file
"""

from __future__ import annotations

import os
from pathlib import Path

from orderentry.application.order_service import OrderService
from orderentry.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from orderentry.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from orderentry.infrastructure.services.json_fulfillment_service import (
    JsonOrderFulfillmentService,
)
from orderentry.infrastructure.services.json_tax_rate_service import (
    JsonTaxRateService,
)
from orderentry.infrastructure.services.logging_email_service import (
    LoggingEmailService,
)

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    configured = os.environ.get("ORDERENTRY_DATA_DIR")
    return Path(configured) if configured else _DEFAULT_DATA_DIR


def log_level() -> str:
    return os.environ.get("ORDERENTRY_LOG_LEVEL", "INFO")


def log_file() -> Path | None:
    configured = os.environ.get("ORDERENTRY_LOG_FILE")
    return Path(configured) if configured else None


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(data_dir() / "products.json")


def customer_repository() -> JsonCustomerRepository:
    return JsonCustomerRepository(data_dir() / "customers.json")


def tax_rate_service() -> JsonTaxRateService:
    return JsonTaxRateService(data_dir() / "tax_rates.json")


def fulfillment_service() -> JsonOrderFulfillmentService:
    return JsonOrderFulfillmentService(data_dir() / "orders.json")


def email_service() -> LoggingEmailService:
    return LoggingEmailService()


def order_service() -> OrderService:
    return OrderService(
        product_repo=product_repository(),
        fulfillment_service=fulfillment_service(),
        tax_rate_service=tax_rate_service(),
        customer_repo=customer_repository(),
        email_service=email_service(),
    )
