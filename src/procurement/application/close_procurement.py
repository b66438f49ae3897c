"""Application service: Close Procurement use case.

Orchestrates the unit-load planning service (cross-service validation),
the unit-load registry (bulk creation) and the Procurement aggregate
(PROCESSING -> CLOSED).

Consistency policy: validation is side-effect free and runs to completion
before the single mutating remote call.  The ids are checked for prior
existence but not reserved, and a partially successful bulk creation is
not rolled back: the registry is authoritative, the shortfall is reported
to the alert channel and the procurement is closed anyway.  Closing again
after a partial creation would fail with IdConflictError.

The repository lock is held for the whole workflow, remote calls included.
"""

from __future__ import annotations

import logging

from procurement.application.dto import ProcurementDTO, to_dto
from procurement.domain.exceptions import DomainException
from procurement.domain.gateway.notification import Notifier
from procurement.domain.gateway.unit_load_registry import UnitLoadRegistry
from procurement.domain.model.procurement import ProcurementStatus
from procurement.domain.repository.procurement_repository import (
    ProcurementRepository,
)
from procurement.domain.service.unit_load_planning_service import (
    UnitLoadPlanningService,
)

logger = logging.getLogger(__name__)

DEFAULT_ALERT_RECIPIENT = "procurement-alerts@localhost"


class CloseProcurementHandler:

    def __init__(
        self,
        procurement_repo: ProcurementRepository,
        planning_service: UnitLoadPlanningService,
        registry: UnitLoadRegistry,
        notifier: Notifier,
        alert_recipient: str = DEFAULT_ALERT_RECIPIENT,
    ) -> None:
        self._procurement_repo = procurement_repo
        self._planning_service = planning_service
        self._registry = registry
        self._notifier = notifier
        self._alert_recipient = alert_recipient

    def handle(self, procurement_id: int, actor: int) -> ProcurementDTO:
        with self._procurement_repo.exclusive():
            with self._procurement_repo.find_by_id_mut(procurement_id) as procurement:
                try:
                    requests = self._planning_service.plan(procurement, actor)
                except DomainException as exc:
                    logger.info("Procurement #%s cannot be closed: %s", procurement_id, exc)
                    raise

                created_ids = self._registry.create_bulk(requests)

                # Same counting rule as the planning step, so this holds
                procurement.set_status(ProcurementStatus.CLOSED, actor)

            logger.info(
                "Procurement #%s closed by %s, %d/%d UPL(s) created",
                procurement_id, actor, len(created_ids), len(requests),
            )

            if len(created_ids) < len(procurement.upl_candidates):
                self._report_shortfall(procurement_id, requests, created_ids)

        return to_dto(procurement)

    def _report_shortfall(self, procurement_id, requests, created_ids) -> None:
        created = set(created_ids)
        missing = [r.upl_id for r in requests if r.upl_id not in created]
        logger.warning(
            "Procurement #%s: registry created %d of %d UPL(s), missing %s",
            procurement_id, len(created_ids), len(requests), missing,
        )
        self._notifier.send(
            to=self._alert_recipient,
            subject=f"Procurement #{procurement_id}: UPL creation incomplete",
            body=(
                f"While closing procurement #{procurement_id} the unit-load "
                f"registry created {len(created_ids)} of {len(requests)} "
                f"requested UPL(s).\n"
                f"Not created: {', '.join(missing)}\n"
                f"The procurement has been closed; the missing UPLs must be "
                f"created manually."
            ),
        )
