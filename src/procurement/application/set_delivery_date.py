"""Application service: Set Delivery Date use case."""

from __future__ import annotations

from datetime import datetime

from procurement.application.dto import ProcurementDTO, parse_timestamp, to_dto
from procurement.domain.repository.procurement_repository import (
    ProcurementRepository,
)


class SetDeliveryDateHandler:

    def __init__(self, procurement_repo: ProcurementRepository) -> None:
        self._procurement_repo = procurement_repo

    def handle(
        self,
        procurement_id: int,
        delivery_date: str | datetime | None,
    ) -> ProcurementDTO:
        """Set or clear the estimated delivery date.

        Args:
            procurement_id: The procurement to update.
            delivery_date: RFC 3339 string or datetime; ``""`` or None
                clears the date.
        """
        parsed = parse_timestamp(delivery_date)
        with self._procurement_repo.find_by_id_mut(procurement_id) as procurement:
            procurement.set_delivery_date(parsed)
        return to_dto(procurement)
