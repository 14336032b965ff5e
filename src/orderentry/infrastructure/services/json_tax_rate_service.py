"""JSON-file-backed implementation of TaxRateService.

Jurisdictions are matched on exact postal code and case-insensitive
country; an unknown jurisdiction has no tax entries.
"""

from __future__ import annotations

import json
from pathlib import Path

from orderentry.domain.model.summary import TaxEntry
from orderentry.domain.service.tax_rate_service import TaxRateService


class JsonTaxRateService(TaxRateService):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def get_tax_entries(self, postal_code: str, country: str) -> list[TaxEntry]:
        for raw in self._load_raw():
            if (
                raw["postal_code"] == postal_code
                and raw["country"].lower() == country.lower()
            ):
                return [
                    TaxEntry(description=e["description"], rate=float(e["rate"]))
                    for e in raw.get("entries", [])
                ]
        return []

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
