"""JSON-file-backed implementation of CustomerRepository."""

from __future__ import annotations

import json
from pathlib import Path

from orderentry.domain.exceptions import EntityNotFoundError
from orderentry.domain.model.customer import Customer
from orderentry.domain.repository.customer_repository import CustomerRepository


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def get(self, customer_id: int) -> Customer:
        for raw in self._load_raw():
            if raw["customer_id"] == customer_id:
                return self._to_domain(raw)
        raise EntityNotFoundError(f"Customer #{customer_id} not found")

    @staticmethod
    def _to_domain(raw: dict) -> Customer:
        return Customer(
            customer_id=raw["customer_id"],
            postal_code=raw["postal_code"],
            country=raw["country"],
            customer_name=raw.get("customer_name", ""),
            email_address=raw.get("email_address", ""),
            address_line1=raw.get("address_line1", ""),
            address_line2=raw.get("address_line2", ""),
            city=raw.get("city", ""),
            state_or_province=raw.get("state_or_province", ""),
        )

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
