"""Contract for the external tax-rate lookup."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderentry.domain.model.summary import TaxEntry


class TaxRateService(ABC):

    @abstractmethod
    def get_tax_entries(self, postal_code: str, country: str) -> list[TaxEntry]:
        """Return the tax entries that apply in this jurisdiction (maybe none)."""
