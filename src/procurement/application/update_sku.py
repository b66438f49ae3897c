"""Application services: change the ordered amount or price of a SKU line."""

from __future__ import annotations

from procurement.application.dto import ProcurementDTO, to_dto
from procurement.domain.repository.procurement_repository import (
    ProcurementRepository,
)


class UpdateSkuAmountHandler:

    def __init__(self, procurement_repo: ProcurementRepository) -> None:
        self._procurement_repo = procurement_repo

    def handle(self, procurement_id: int, sku: int, amount: int) -> ProcurementDTO:
        with self._procurement_repo.find_by_id_mut(procurement_id) as procurement:
            procurement.update_item_amount(sku, amount)
        return to_dto(procurement)


class UpdateSkuPriceHandler:

    def __init__(self, procurement_repo: ProcurementRepository) -> None:
        self._procurement_repo = procurement_repo

    def handle(self, procurement_id: int, sku: int, price: int) -> ProcurementDTO:
        with self._procurement_repo.find_by_id_mut(procurement_id) as procurement:
            procurement.update_item_price(sku, price)
        return to_dto(procurement)
