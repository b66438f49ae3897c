"""JSON-file-backed implementation of ProcurementStore."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

from procurement.domain.exceptions import InternalError
from procurement.domain.model.procurement import (
    Procurement,
    ProcurementItem,
    ProcurementStatus,
    UplCandidate,
)
from procurement.domain.repository.procurement_store import ProcurementStore

logger = logging.getLogger(__name__)


class JsonProcurementStore(ProcurementStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProcurementStore interface -------------------------------------------

    def load_all(self) -> list[Procurement]:
        try:
            return [self._to_domain(raw) for raw in self._load_raw()]
        except (KeyError, TypeError, ValueError) as exc:
            logger.error("Corrupt procurement store %s: %s", self._file_path, exc)
            raise InternalError(f"Corrupt procurement store: {exc}") from exc

    def persist(self, procurement: Procurement) -> None:
        records = self._load_raw()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(records):
            if raw["id"] == procurement.id:
                records[i] = self._to_raw(procurement)
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(procurement))

        self._persist_raw(records)

    def delete(self, procurement_id: int) -> None:
        records = [raw for raw in self._load_raw() if raw["id"] != procurement_id]
        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(procurement: Procurement) -> dict:
        return {
            "id": procurement.id,
            "source_id": procurement.source_id,
            "reference": procurement.reference,
            "estimated_delivery_date": _dump_ts(procurement.estimated_delivery_date),
            "items": [
                {
                    "sku": item.sku,
                    "ordered_amount": item.ordered_amount,
                    "expected_net_price": item.expected_net_price,
                }
                for item in procurement.items
            ],
            "upl_candidates": [
                {
                    "upl_id": c.upl_id,
                    "sku": c.sku,
                    "upl_piece": c.upl_piece,
                    "opened_sku": c.opened_sku,
                    "best_before": _dump_ts(c.best_before),
                }
                for c in procurement.upl_candidates
            ],
            "status": procurement.status.value,
            "created_at": procurement.created_at.isoformat(),
            "created_by": procurement.created_by,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Procurement:
        return Procurement(
            id=raw["id"],
            source_id=raw["source_id"],
            created_by=raw["created_by"],
            reference=raw.get("reference", ""),
            estimated_delivery_date=_load_ts(raw.get("estimated_delivery_date")),
            items=[
                ProcurementItem(
                    sku=i["sku"],
                    ordered_amount=i["ordered_amount"],
                    expected_net_price=i["expected_net_price"],
                )
                for i in raw.get("items", [])
            ],
            upl_candidates=[
                UplCandidate(
                    upl_id=c["upl_id"],
                    sku=c["sku"],
                    upl_piece=c["upl_piece"],
                    opened_sku=c.get("opened_sku", False),
                    best_before=_load_ts(c.get("best_before")),
                )
                for c in raw.get("upl_candidates", [])
            ],
            status=ProcurementStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.error("Cannot read procurement store %s: %s", self._file_path, exc)
            raise InternalError(f"Cannot read procurement store: {exc}") from exc

    def _persist_raw(self, records: list[dict]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(records, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            logger.error("Cannot write procurement store %s: %s", self._file_path, exc)
            raise InternalError(f"Cannot write procurement store: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")


def _dump_ts(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _load_ts(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None
