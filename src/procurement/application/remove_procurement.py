"""Application service: Remove Procurement use case.

Only NEW procurements can be removed; once ordered they are kept forever.
"""

from __future__ import annotations

import logging

from procurement.domain.repository.procurement_repository import (
    ProcurementRepository,
)

logger = logging.getLogger(__name__)


class RemoveProcurementHandler:

    def __init__(self, procurement_repo: ProcurementRepository) -> None:
        self._procurement_repo = procurement_repo

    def handle(self, procurement_id: int) -> None:
        with self._procurement_repo.exclusive():
            procurement = self._procurement_repo.find_by_id(procurement_id)
            procurement.ensure_removable()
            self._procurement_repo.remove(procurement_id)
        logger.info("Procurement #%s removed", procurement_id)
