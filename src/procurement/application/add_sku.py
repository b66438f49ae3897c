"""Application service: Add SKU use case."""

from __future__ import annotations

from procurement.application.dto import ProcurementDTO, to_dto
from procurement.domain.repository.procurement_repository import (
    ProcurementRepository,
)


class AddSkuHandler:

    def __init__(self, procurement_repo: ProcurementRepository) -> None:
        self._procurement_repo = procurement_repo

    def handle(
        self, procurement_id: int, sku: int, amount: int, price: int
    ) -> ProcurementDTO:
        """Add an ordered SKU line (price in minor currency unit)."""
        with self._procurement_repo.find_by_id_mut(procurement_id) as procurement:
            procurement.add_item(sku, amount, price)
        return to_dto(procurement)
