"""Abstract façade for the pricing service."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class PriceRecord:
    """Current selling price of a SKU, amounts in minor currency unit."""

    sku: int
    net_price: int
    gross_price: int
    vat_rate: str


class PricingService(ABC):

    @abstractmethod
    def get_bulk(self, skus: list[int]) -> list[PriceRecord]:
        """Return current prices for the priced SKUs among *skus*."""
