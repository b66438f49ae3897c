"""Abstract façade for the unit-load (UPL) registry service."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UnitLoadRecord:
    """A unit-load already present in the registry."""

    upl_id: str
    sku: int


@dataclass(frozen=True)
class UnitLoadCreationRequest:
    """Everything the registry needs to create one unit-load without lookups."""

    upl_id: str
    procurement_id: int
    sku: int
    product_id: int
    upl_piece: int
    opened_sku: bool
    best_before: datetime | None
    unit: str
    divisible: bool
    divisible_amount: int
    net_price: int
    gross_price: int
    vat_rate: str
    procurement_net_price: int
    created_by: int


class UnitLoadRegistry(ABC):

    @abstractmethod
    def exists_bulk(self, upl_ids: list[str]) -> list[UnitLoadRecord]:
        """Return the registry records matching any of *upl_ids*."""

    @abstractmethod
    def create_bulk(self, requests: list[UnitLoadCreationRequest]) -> list[str]:
        """Create unit-loads and return the ids actually created.

        Partial success is possible: fewer ids than requests may come back.
        """
