"""JSON-file-backed stand-in for the fulfillment service.

Every fulfilled order is appended to a journal file and receives the next
sequential id; the order number is derived from it.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from orderentry.domain.model.order import Order
from orderentry.domain.model.summary import OrderConfirmation
from orderentry.domain.service.fulfillment_service import OrderFulfillmentService


class JsonOrderFulfillmentService(OrderFulfillmentService):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def fulfill(self, order: Order) -> OrderConfirmation:
        records = self._load_raw()
        order_id = self._next_id(records)
        confirmation = OrderConfirmation(
            order_id=order_id,
            order_number=f"ORD-{order_id:06d}",
        )
        records.append(self._to_raw(order, confirmation))
        self._persist_raw(records)
        return confirmation

    @staticmethod
    def _next_id(records: list[dict]) -> int:
        if not records:
            return 1
        return max(r["order_id"] for r in records) + 1

    @staticmethod
    def _to_raw(order: Order, confirmation: OrderConfirmation) -> dict:
        return {
            "order_id": confirmation.order_id,
            "order_number": confirmation.order_number,
            "customer_id": order.customer_id,
            "fulfilled_at": datetime.now(timezone.utc).isoformat(),
            "items": [
                {
                    "sku": item.product.sku,
                    "quantity": float(item.quantity),
                    "unit_price": str(item.product.price.amount),
                }
                for item in order.items
            ],
        }

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
