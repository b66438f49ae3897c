"""Application service: Update UPL candidate use case."""

from __future__ import annotations

from datetime import datetime

from procurement.application.dto import ProcurementDTO, parse_timestamp, to_dto
from procurement.domain.repository.procurement_repository import (
    ProcurementRepository,
)


class UpdateUplHandler:

    def __init__(self, procurement_repo: ProcurementRepository) -> None:
        self._procurement_repo = procurement_repo

    def handle(
        self,
        procurement_id: int,
        upl_id: str,
        sku: int,
        piece: int,
        best_before: str | datetime | None = None,
    ) -> ProcurementDTO:
        parsed = parse_timestamp(best_before)
        with self._procurement_repo.find_by_id_mut(procurement_id) as procurement:
            procurement.update_upl_candidate(upl_id, sku, piece, parsed)
        return to_dto(procurement)
