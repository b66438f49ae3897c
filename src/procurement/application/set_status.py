"""Application service: Set Status use case.

Every transition except CLOSED is a plain aggregate state change.  CLOSED
goes through the close workflow, so the cross-service checks and the
unit-load creation can never be skipped.
"""

from __future__ import annotations

import logging

from procurement.application.close_procurement import CloseProcurementHandler
from procurement.application.dto import ProcurementDTO, to_dto
from procurement.domain.exceptions import InvalidTransitionError, ValidationError
from procurement.domain.model.procurement import TRANSITIONS, ProcurementStatus
from procurement.domain.repository.procurement_repository import (
    ProcurementRepository,
)

logger = logging.getLogger(__name__)


def parse_status(raw: str | ProcurementStatus) -> ProcurementStatus:
    if isinstance(raw, ProcurementStatus):
        return raw
    try:
        return ProcurementStatus(raw.strip().upper())
    except ValueError as exc:
        raise ValidationError(f"Unknown procurement status: {raw!r}") from exc


class SetStatusHandler:

    def __init__(
        self,
        procurement_repo: ProcurementRepository,
        close_handler: CloseProcurementHandler,
    ) -> None:
        self._procurement_repo = procurement_repo
        self._close_handler = close_handler

    def handle(
        self,
        procurement_id: int,
        status: str | ProcurementStatus,
        actor: int,
    ) -> ProcurementDTO:
        target = parse_status(status)
        if target == ProcurementStatus.CLOSED:
            return self._close(procurement_id, actor)

        with self._procurement_repo.find_by_id_mut(procurement_id) as procurement:
            procurement.set_status(target, actor)

        logger.info(
            "Procurement #%s set to %s by %s", procurement_id, target.value, actor
        )
        return to_dto(procurement)

    def _close(self, procurement_id: int, actor: int) -> ProcurementDTO:
        with self._procurement_repo.exclusive():
            current = self._procurement_repo.find_by_id(procurement_id).status
            if (current, ProcurementStatus.CLOSED) not in TRANSITIONS:
                raise InvalidTransitionError(
                    f"Cannot change procurement #{procurement_id} status "
                    f"from {current.value} to {ProcurementStatus.CLOSED.value}"
                )
            return self._close_handler.handle(procurement_id, actor)
