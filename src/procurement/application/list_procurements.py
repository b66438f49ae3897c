"""Application service: List Procurements use case (query)."""

from __future__ import annotations

from procurement.application.dto import ProcurementInfoDTO, to_info_dto
from procurement.domain.repository.procurement_repository import (
    ProcurementRepository,
)


class ListProcurementsHandler:

    def __init__(self, procurement_repo: ProcurementRepository) -> None:
        self._procurement_repo = procurement_repo

    def handle(self) -> list[ProcurementInfoDTO]:
        return [to_info_dto(p) for p in self._procurement_repo.all()]
