"""Application service: Remove UPL candidate use case."""

from __future__ import annotations

from procurement.application.dto import ProcurementDTO, to_dto
from procurement.domain.repository.procurement_repository import (
    ProcurementRepository,
)


class RemoveUplHandler:

    def __init__(self, procurement_repo: ProcurementRepository) -> None:
        self._procurement_repo = procurement_repo

    def handle(self, procurement_id: int, upl_id: str) -> ProcurementDTO:
        with self._procurement_repo.find_by_id_mut(procurement_id) as procurement:
            procurement.remove_upl_candidate(upl_id)
        return to_dto(procurement)
