"""Procurement aggregate, the core of the domain.

The Procurement is an aggregate root that owns its SKU lines and its UPL
candidates.  All business invariants are enforced here:

- ``items`` are unique by ``sku`` and ``upl_candidates`` by ``upl_id``
- the status only moves forward along the edges of ``TRANSITIONS``
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from procurement.domain.exceptions import (
    DuplicateKeyError,
    EntityNotFoundError,
    IncompleteUplsError,
    InvalidStateError,
    InvalidTransitionError,
)
from procurement.domain.model.value_objects import UplId, unsigned


class ProcurementStatus(Enum):
    NEW = "NEW"
    ORDERED = "ORDERED"
    ARRIVED = "ARRIVED"
    PROCESSING = "PROCESSING"
    CLOSED = "CLOSED"


@dataclass
class ProcurementItem:
    """An ordered SKU line.  ``sku`` is the key and never changes."""

    sku: int
    ordered_amount: int
    expected_net_price: int  # minor currency unit

    def update_ordered_amount(self, amount: int) -> None:
        self.ordered_amount = unsigned(amount, "Ordered amount")

    def update_price(self, price: int) -> None:
        self.expected_net_price = unsigned(price, "Expected net price")


@dataclass
class UplCandidate:
    """A unit-load proposed by the procurement, not yet created in the registry.

    ``opened_sku`` marks an already opened (divisible) unit.  Such a
    candidate stands for a single ordered piece; a sealed candidate stands
    for ``upl_piece`` ordered pieces.
    """

    upl_id: str
    sku: int
    upl_piece: int
    opened_sku: bool = False
    best_before: datetime | None = None

    @staticmethod
    def create(
        upl_id: str,
        sku: int,
        upl_piece: int,
        opened_sku: bool = False,
        best_before: datetime | None = None,
    ) -> UplCandidate:
        """Create a candidate, rejecting ids that fail the check-digit test."""
        return UplCandidate(
            upl_id=UplId(upl_id).value,
            sku=sku,
            upl_piece=unsigned(upl_piece, "UPL piece"),
            opened_sku=opened_sku,
            best_before=best_before,
        )

    @property
    def covered_amount(self) -> int:
        return 1 if self.opened_sku else self.upl_piece


@dataclass
class Procurement:
    """Aggregate root for procurement orders.

    Use the ``Procurement.create()`` factory for new procurements.  The
    ``__init__`` is intentionally simple so the store can reconstitute
    persisted procurements without re-validating.

    Every mutating method returns ``self`` so calls can be chained.
    """

    id: int
    source_id: int
    created_by: int
    reference: str = ""
    estimated_delivery_date: datetime | None = None
    items: list[ProcurementItem] = field(default_factory=list)
    upl_candidates: list[UplCandidate] = field(default_factory=list)
    status: ProcurementStatus = ProcurementStatus.NEW
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(id: int, source_id: int, created_by: int) -> Procurement:
        return Procurement(id=id, source_id=source_id, created_by=created_by)

    # --- Header ---------------------------------------------------------------

    def set_reference(self, reference: str) -> Procurement:
        self.reference = reference
        return self

    def set_delivery_date(self, delivery_date: datetime | None) -> Procurement:
        self.estimated_delivery_date = delivery_date
        return self

    # --- SKU lines ------------------------------------------------------------

    def add_item(self, sku: int, amount: int, price: int) -> Procurement:
        if self._find_item(sku) is not None:
            raise DuplicateKeyError(f"SKU {sku} is already in procurement #{self.id}")
        self.items.append(
            ProcurementItem(
                sku=sku,
                ordered_amount=unsigned(amount, "Ordered amount"),
                expected_net_price=unsigned(price, "Expected net price"),
            )
        )
        return self

    def update_item_amount(self, sku: int, amount: int) -> Procurement:
        self._get_item(sku).update_ordered_amount(amount)
        return self

    def update_item_price(self, sku: int, price: int) -> Procurement:
        self._get_item(sku).update_price(price)
        return self

    def remove_item(self, sku: int) -> Procurement:
        self.items.remove(self._get_item(sku))
        return self

    # --- UPL candidates -------------------------------------------------------

    def add_upl_candidate(
        self,
        upl_id: str,
        sku: int,
        piece: int,
        opened: bool = False,
        best_before: datetime | None = None,
    ) -> Procurement:
        if self._find_candidate(upl_id) is not None:
            raise DuplicateKeyError(
                f"UPL {upl_id} is already in procurement #{self.id}"
            )
        self.upl_candidates.append(
            UplCandidate.create(upl_id, sku, piece, opened, best_before)
        )
        return self

    def update_upl_candidate(
        self,
        upl_id: str,
        sku: int,
        piece: int,
        best_before: datetime | None,
    ) -> Procurement:
        """Replace sku, piece and best before of a candidate in one step.

        Everything is validated before the candidate is touched, so a
        failure leaves it exactly as it was.
        """
        candidate = self._get_candidate(upl_id)
        piece = unsigned(piece, "UPL piece")
        candidate.sku = sku
        candidate.upl_piece = piece
        candidate.best_before = best_before
        return self

    def remove_upl_candidate(self, upl_id: str) -> Procurement:
        self.upl_candidates.remove(self._get_candidate(upl_id))
        return self

    # --- State transitions ----------------------------------------------------

    def set_status(self, target: ProcurementStatus, actor: int) -> Procurement:
        """Move to *target* along an edge of ``TRANSITIONS``.

        ``actor`` identifies who requested the change; the aggregate does
        not record it, the application layer logs it.
        """
        guard = TRANSITIONS.get((self.status, target))
        if guard is None:
            raise InvalidTransitionError(
                f"Cannot change procurement #{self.id} status "
                f"from {self.status.value} to {target.value}"
            )
        guard(self)
        self.status = target
        return self

    def ensure_removable(self) -> None:
        if self.status != ProcurementStatus.NEW:
            raise InvalidStateError(
                f"Only NEW procurements can be removed, "
                f"#{self.id} is {self.status.value}"
            )

    # --- Computed properties --------------------------------------------------

    def candidates_for(self, sku: int) -> list[UplCandidate]:
        return [c for c in self.upl_candidates if c.sku == sku]

    def covered_amount(self, sku: int) -> int:
        """Ordered pieces covered by the candidates of *sku*."""
        return sum(c.covered_amount for c in self.candidates_for(sku))

    def orphan_skus(self) -> list[int]:
        """SKUs referenced by candidates but missing from the item lines."""
        item_skus = {item.sku for item in self.items}
        result: list[int] = []
        for candidate in self.upl_candidates:
            if candidate.sku not in item_skus and candidate.sku not in result:
                result.append(candidate.sku)
        return result

    @property
    def sku_piece_count(self) -> int:
        return sum(item.ordered_amount for item in self.items)

    @property
    def upl_count(self) -> int:
        return sum(c.covered_amount for c in self.upl_candidates)

    # --- Internal helpers -----------------------------------------------------

    def _find_item(self, sku: int) -> ProcurementItem | None:
        for item in self.items:
            if item.sku == sku:
                return item
        return None

    def _get_item(self, sku: int) -> ProcurementItem:
        item = self._find_item(sku)
        if item is None:
            raise EntityNotFoundError(f"SKU {sku} is not in procurement #{self.id}")
        return item

    def _find_candidate(self, upl_id: str) -> UplCandidate | None:
        for candidate in self.upl_candidates:
            if candidate.upl_id == upl_id:
                return candidate
        return None

    def _get_candidate(self, upl_id: str) -> UplCandidate:
        candidate = self._find_candidate(upl_id)
        if candidate is None:
            raise EntityNotFoundError(
                f"UPL {upl_id} is not in procurement #{self.id}"
            )
        return candidate


# ---------------------------------------------------------------------------
# State machine
# ---------------------------------------------------------------------------


def _require_order_details(procurement: Procurement) -> None:
    if procurement.estimated_delivery_date is None:
        raise InvalidTransitionError(
            f"Procurement #{procurement.id} has no estimated delivery date"
        )
    if not procurement.items:
        raise InvalidTransitionError(f"Procurement #{procurement.id} is empty")


def _require_complete_upls(procurement: Procurement) -> None:
    for item in procurement.items:
        covered = procurement.covered_amount(item.sku)
        if covered != item.ordered_amount:
            raise IncompleteUplsError(item.sku, item.ordered_amount - covered)
    # UPLs for SKUs that are not ordered would never be created; they block too
    for sku in procurement.orphan_skus():
        raise IncompleteUplsError(sku, -procurement.covered_amount(sku))


def _no_precondition(procurement: Procurement) -> None:
    pass


_S = ProcurementStatus

# (from, to) -> guard raising when the precondition does not hold.
# Any pair missing from this table is an invalid transition.
TRANSITIONS: dict[tuple[ProcurementStatus, ProcurementStatus], Callable[[Procurement], None]] = {
    (_S.NEW, _S.ORDERED): _require_order_details,
    (_S.ORDERED, _S.ARRIVED): _no_precondition,
    (_S.ORDERED, _S.PROCESSING): _no_precondition,
    (_S.ARRIVED, _S.PROCESSING): _no_precondition,
    (_S.PROCESSING, _S.CLOSED): _require_complete_upls,
}
