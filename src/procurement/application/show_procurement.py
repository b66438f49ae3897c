"""Application service: Show Procurement use case (query)."""

from __future__ import annotations

from procurement.application.dto import ProcurementDTO, to_dto
from procurement.domain.repository.procurement_repository import (
    ProcurementRepository,
)


class ShowProcurementHandler:

    def __init__(self, procurement_repo: ProcurementRepository) -> None:
        self._procurement_repo = procurement_repo

    def handle(self, procurement_id: int) -> ProcurementDTO:
        return to_dto(self._procurement_repo.find_by_id(procurement_id))
