"""Application service: Create Procurement use case."""

from __future__ import annotations

import logging

from procurement.application.dto import ProcurementDTO, to_dto
from procurement.domain.model.procurement import Procurement
from procurement.domain.repository.procurement_repository import (
    ProcurementRepository,
)

logger = logging.getLogger(__name__)


class CreateProcurementHandler:

    def __init__(self, procurement_repo: ProcurementRepository) -> None:
        self._procurement_repo = procurement_repo

    def handle(self, source_id: int, created_by: int) -> ProcurementDTO:
        """Create an empty NEW procurement for *source_id*."""
        # Id allocation and insert must not interleave with another create
        with self._procurement_repo.exclusive():
            procurement = Procurement.create(
                id=self._procurement_repo.next_id(),
                source_id=source_id,
                created_by=created_by,
            )
            stored = self._procurement_repo.insert(procurement)

        logger.info(
            "Procurement #%s created for source %s by %s",
            stored.id, source_id, created_by,
        )
        return to_dto(stored)
