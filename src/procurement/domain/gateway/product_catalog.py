"""Abstract façade for the product catalog service."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ProductRecord:
    sku: int
    product_id: int
    unit: str
    divisible: bool
    divisible_amount: int
    perishable: bool
    display_name: str


class ProductCatalog(ABC):

    @abstractmethod
    def get_bulk(self, skus: list[int]) -> list[ProductRecord]:
        """Return product metadata for the known SKUs among *skus*."""
