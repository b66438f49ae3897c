"""Application service: Set Reference use case."""

from __future__ import annotations

from procurement.application.dto import ProcurementDTO, to_dto
from procurement.domain.repository.procurement_repository import (
    ProcurementRepository,
)


class SetReferenceHandler:

    def __init__(self, procurement_repo: ProcurementRepository) -> None:
        self._procurement_repo = procurement_repo

    def handle(self, procurement_id: int, reference: str) -> ProcurementDTO:
        with self._procurement_repo.find_by_id_mut(procurement_id) as procurement:
            procurement.set_reference(reference)
        return to_dto(procurement)
