"""JSON-file-backed implementation of ProductRepository.

Each record is ``{"sku": ..., "price": "1.11", "stock": 10}``.
"""

from __future__ import annotations

import json
from pathlib import Path

from orderentry.domain.model.product import Product
from orderentry.domain.model.value_objects import Money
from orderentry.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def is_in_stock(self, sku: str) -> bool:
        raw = self._load_raw().get(sku)
        if raw is None:
            return False
        return raw.get("stock", 0) > 0

    def get_by_sku(self, sku: str) -> Product | None:
        raw = self._load_raw().get(sku)
        if raw is None:
            return None
        return self._to_domain(raw)

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._load_raw().values()]

    def stock_of(self, sku: str) -> int:
        raw = self._load_raw().get(sku)
        return 0 if raw is None else raw.get("stock", 0)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(sku=raw["sku"], price=Money.of(raw["price"]))

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict[str, dict]:
        records = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {raw["sku"]: raw for raw in records}

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
