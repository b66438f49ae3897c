"""Application service: Add UPL candidate use case."""

from __future__ import annotations

from datetime import datetime

from procurement.application.dto import ProcurementDTO, parse_timestamp, to_dto
from procurement.domain.repository.procurement_repository import (
    ProcurementRepository,
)


class AddUplHandler:

    def __init__(self, procurement_repo: ProcurementRepository) -> None:
        self._procurement_repo = procurement_repo

    def handle(
        self,
        procurement_id: int,
        upl_id: str,
        sku: int,
        piece: int,
        opened_sku: bool = False,
        best_before: str | datetime | None = None,
    ) -> ProcurementDTO:
        """Propose a unit-load for the procurement.

        The SKU is not checked against the item lines here; that happens
        when the procurement is closed.
        """
        parsed = parse_timestamp(best_before)
        with self._procurement_repo.find_by_id_mut(procurement_id) as procurement:
            procurement.add_upl_candidate(upl_id, sku, piece, opened_sku, parsed)
        return to_dto(procurement)
