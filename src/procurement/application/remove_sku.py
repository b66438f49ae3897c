"""Application service: Remove SKU use case."""

from __future__ import annotations

from procurement.application.dto import ProcurementDTO, to_dto
from procurement.domain.repository.procurement_repository import (
    ProcurementRepository,
)


class RemoveSkuHandler:

    def __init__(self, procurement_repo: ProcurementRepository) -> None:
        self._procurement_repo = procurement_repo

    def handle(self, procurement_id: int, sku: int) -> ProcurementDTO:
        with self._procurement_repo.find_by_id_mut(procurement_id) as procurement:
            procurement.remove_item(sku)
        return to_dto(procurement)
