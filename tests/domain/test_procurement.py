"""Unit tests for the Procurement aggregate: header, SKU lines and UPL candidates."""

import random
from datetime import datetime, timezone

import pytest

from procurement.domain.exceptions import (
    DuplicateKeyError,
    EntityNotFoundError,
    InvalidChecksumError,
    InvalidStateError,
    ValidationError,
)
from procurement.domain.model.procurement import Procurement, ProcurementStatus
from tests.ids import BAD_UPL, UPL_A, UPL_B, UPL_C

BEST_BEFORE = datetime(2027, 3, 1, tzinfo=timezone.utc)


def _make_procurement() -> Procurement:
    return Procurement.create(id=1, source_id=10, created_by=1)


class TestProcurementCreation:

    def test_new_procurement_is_empty(self):
        p = _make_procurement()
        assert p.id == 1
        assert p.source_id == 10
        assert p.created_by == 1
        assert p.status == ProcurementStatus.NEW
        assert p.reference == ""
        assert p.estimated_delivery_date is None
        assert p.items == []
        assert p.upl_candidates == []

    def test_created_at_is_set(self):
        before = datetime.now(timezone.utc)
        p = _make_procurement()
        assert before <= p.created_at <= datetime.now(timezone.utc)


class TestHeader:

    def test_set_reference(self):
        p = _make_procurement()
        assert p.set_reference("INV-2026/10") is p
        assert p.reference == "INV-2026/10"

    def test_set_and_clear_delivery_date(self):
        p = _make_procurement()
        p.set_delivery_date(BEST_BEFORE)
        assert p.estimated_delivery_date == BEST_BEFORE
        p.set_delivery_date(None)
        assert p.estimated_delivery_date is None

    def test_header_can_change_in_any_status(self):
        p = _make_procurement()
        p.status = ProcurementStatus.CLOSED
        p.set_reference("late note")
        assert p.reference == "late note"


class TestSkuLines:

    def test_add_item(self):
        p = _make_procurement().add_item(sku=5, amount=2, price=100)
        assert len(p.items) == 1
        assert p.items[0].sku == 5
        assert p.items[0].ordered_amount == 2
        assert p.items[0].expected_net_price == 100

    def test_duplicate_sku_rejected(self):
        p = _make_procurement().add_item(5, 2, 100)
        with pytest.raises(DuplicateKeyError, match="SKU 5"):
            p.add_item(5, 3, 200)
        assert len(p.items) == 1
        assert p.items[0].ordered_amount == 2

    def test_negative_amount_rejected(self):
        p = _make_procurement()
        with pytest.raises(ValidationError, match="cannot be negative"):
            p.add_item(5, -1, 100)
        assert p.items == []

    def test_update_amount_and_price(self):
        p = _make_procurement().add_item(5, 2, 100)
        p.update_item_amount(5, 7).update_item_price(5, 250)
        assert p.items[0].ordered_amount == 7
        assert p.items[0].expected_net_price == 250

    def test_update_missing_sku_rejected(self):
        p = _make_procurement()
        with pytest.raises(EntityNotFoundError, match="SKU 9"):
            p.update_item_amount(9, 1)
        with pytest.raises(EntityNotFoundError, match="SKU 9"):
            p.update_item_price(9, 1)

    def test_remove_item(self):
        p = _make_procurement().add_item(5, 2, 100).add_item(6, 1, 50)
        p.remove_item(5)
        assert [i.sku for i in p.items] == [6]

    def test_remove_missing_sku_rejected(self):
        with pytest.raises(EntityNotFoundError):
            _make_procurement().remove_item(5)

    def test_sku_stays_unique_under_random_add_remove(self):
        rng = random.Random(2026)
        p = _make_procurement()
        for _ in range(500):
            sku = rng.randint(1, 8)
            try:
                if rng.random() < 0.6:
                    p.add_item(sku, rng.randint(0, 5), 100)
                else:
                    p.remove_item(sku)
            except (DuplicateKeyError, EntityNotFoundError):
                pass
            skus = [item.sku for item in p.items]
            assert len(skus) == len(set(skus))


class TestUplCandidates:

    def test_add_candidate(self):
        p = _make_procurement().add_upl_candidate(UPL_A, 5, 1, False, BEST_BEFORE)
        c = p.upl_candidates[0]
        assert c.upl_id == UPL_A
        assert c.sku == 5
        assert c.upl_piece == 1
        assert c.opened_sku is False
        assert c.best_before == BEST_BEFORE

    def test_bad_checksum_never_admitted(self):
        p = _make_procurement()
        with pytest.raises(InvalidChecksumError):
            p.add_upl_candidate(BAD_UPL, 5, 1)
        assert p.upl_candidates == []

    def test_duplicate_upl_rejected(self):
        p = _make_procurement().add_upl_candidate(UPL_A, 5, 1)
        with pytest.raises(DuplicateKeyError, match=UPL_A):
            p.add_upl_candidate(UPL_A, 6, 2)
        assert len(p.upl_candidates) == 1

    def test_sku_not_checked_on_add(self):
        p = _make_procurement().add_upl_candidate(UPL_A, 999, 1)
        assert p.upl_candidates[0].sku == 999

    def test_update_candidate_replaces_all_fields(self):
        p = _make_procurement().add_upl_candidate(UPL_A, 5, 1, True, None)
        p.update_upl_candidate(UPL_A, 6, 3, BEST_BEFORE)
        c = p.upl_candidates[0]
        assert (c.sku, c.upl_piece, c.best_before) == (6, 3, BEST_BEFORE)
        assert c.opened_sku is True

    def test_failed_update_changes_nothing(self):
        p = _make_procurement().add_upl_candidate(UPL_A, 5, 1, False, None)
        with pytest.raises(ValidationError):
            p.update_upl_candidate(UPL_A, 6, -3, BEST_BEFORE)
        c = p.upl_candidates[0]
        assert (c.sku, c.upl_piece, c.best_before) == (5, 1, None)

    def test_update_missing_candidate_rejected(self):
        with pytest.raises(EntityNotFoundError, match=UPL_B):
            _make_procurement().update_upl_candidate(UPL_B, 5, 1, None)

    def test_remove_candidate(self):
        p = (
            _make_procurement()
            .add_upl_candidate(UPL_A, 5, 1)
            .add_upl_candidate(UPL_B, 5, 1)
        )
        p.remove_upl_candidate(UPL_A)
        assert [c.upl_id for c in p.upl_candidates] == [UPL_B]

    def test_remove_missing_candidate_rejected(self):
        with pytest.raises(EntityNotFoundError):
            _make_procurement().remove_upl_candidate(UPL_C)


class TestCoverage:

    def test_sealed_counts_piece_opened_counts_one(self):
        p = (
            _make_procurement()
            .add_upl_candidate(UPL_A, 5, 4, opened=False)
            .add_upl_candidate(UPL_B, 5, 250, opened=True)
            .add_upl_candidate(UPL_C, 6, 2)
        )
        assert p.covered_amount(5) == 5
        assert p.covered_amount(6) == 2
        assert p.upl_count == 7

    def test_orphan_skus(self):
        p = (
            _make_procurement()
            .add_item(5, 1, 100)
            .add_upl_candidate(UPL_A, 5, 1)
            .add_upl_candidate(UPL_B, 8, 1)
            .add_upl_candidate(UPL_C, 8, 1)
        )
        assert p.orphan_skus() == [8]

    def test_sku_piece_count(self):
        p = _make_procurement().add_item(5, 2, 100).add_item(6, 3, 100)
        assert p.sku_piece_count == 5


class TestRemoval:

    def test_new_procurement_is_removable(self):
        _make_procurement().ensure_removable()

    @pytest.mark.parametrize(
        "status",
        [s for s in ProcurementStatus if s != ProcurementStatus.NEW],
    )
    def test_other_statuses_are_not(self, status):
        p = _make_procurement()
        p.status = status
        with pytest.raises(InvalidStateError, match="Only NEW"):
            p.ensure_removable()
