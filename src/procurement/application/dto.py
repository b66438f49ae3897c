"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Timestamps travel as
RFC 3339 strings; an empty string means "not set".
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from procurement.domain.exceptions import ValidationError
from procurement.domain.model.procurement import Procurement


@dataclass(frozen=True)
class ProcurementItemDTO:
    sku: int
    ordered_amount: int
    expected_net_price: int


@dataclass(frozen=True)
class UplCandidateDTO:
    upl_id: str
    sku: int
    upl_piece: int
    opened_sku: bool
    best_before: str


@dataclass(frozen=True)
class ProcurementDTO:
    """Output: a complete procurement as displayed to the user."""

    id: int
    source_id: int
    reference: str
    estimated_delivery_date: str
    items: list[ProcurementItemDTO]
    upls: list[UplCandidateDTO]
    status: str
    created_at: str
    created_by: int


@dataclass(frozen=True)
class ProcurementInfoDTO:
    """Output: one row of the procurement list."""

    id: int
    source_id: int
    sku_count: int
    sku_piece_count: int
    upl_count: int
    estimated_delivery_date: str
    status: str
    created_at: str
    created_by: int


# --- Timestamps ---------------------------------------------------------------


def format_timestamp(value: datetime | None) -> str:
    return value.isoformat() if value is not None else ""


def parse_timestamp(raw: str | datetime | None) -> datetime | None:
    """Parse an RFC 3339 timestamp; empty string or None means unset.

    Naive values are taken as UTC, aware values are converted to UTC.
    """
    if raw is None or raw == "":
        return None
    if isinstance(raw, datetime):
        value = raw
    else:
        text = raw.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            value = datetime.fromisoformat(text)
        except ValueError as exc:
            raise ValidationError(f"Invalid date: {raw!r}") from exc
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# --- Mapping ------------------------------------------------------------------


def to_dto(procurement: Procurement) -> ProcurementDTO:
    return ProcurementDTO(
        id=procurement.id,
        source_id=procurement.source_id,
        reference=procurement.reference,
        estimated_delivery_date=format_timestamp(procurement.estimated_delivery_date),
        items=[
            ProcurementItemDTO(
                sku=item.sku,
                ordered_amount=item.ordered_amount,
                expected_net_price=item.expected_net_price,
            )
            for item in procurement.items
        ],
        upls=[
            UplCandidateDTO(
                upl_id=c.upl_id,
                sku=c.sku,
                upl_piece=c.upl_piece,
                opened_sku=c.opened_sku,
                best_before=format_timestamp(c.best_before),
            )
            for c in procurement.upl_candidates
        ],
        status=procurement.status.value,
        created_at=format_timestamp(procurement.created_at),
        created_by=procurement.created_by,
    )


def to_info_dto(procurement: Procurement) -> ProcurementInfoDTO:
    return ProcurementInfoDTO(
        id=procurement.id,
        source_id=procurement.source_id,
        sku_count=len(procurement.items),
        sku_piece_count=procurement.sku_piece_count,
        upl_count=procurement.upl_count,
        estimated_delivery_date=format_timestamp(procurement.estimated_delivery_date),
        status=procurement.status.value,
        created_at=format_timestamp(procurement.created_at),
        created_by=procurement.created_by,
    )
