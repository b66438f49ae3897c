"""Tests for the JSON-file-backed ProcurementStore."""

import json
from datetime import datetime, timezone

import pytest

from procurement.domain.exceptions import InternalError
from procurement.domain.model.procurement import Procurement, ProcurementStatus
from procurement.domain.repository.procurement_repository import (
    ProcurementRepository,
)
from procurement.infrastructure.persistence.json_procurement_store import (
    JsonProcurementStore,
)
from tests.ids import UPL_A, UPL_B

BEST_BEFORE = datetime(2027, 1, 31, tzinfo=timezone.utc)


def _full_procurement() -> Procurement:
    p = Procurement.create(id=3, source_id=10, created_by=1)
    p.set_reference("PO-778")
    p.set_delivery_date(datetime(2026, 11, 2, 8, 0, tzinfo=timezone.utc))
    p.add_item(5, 2, 100)
    p.add_upl_candidate(UPL_A, 5, 1, False, BEST_BEFORE)
    p.add_upl_candidate(UPL_B, 5, 1, True, None)
    p.status = ProcurementStatus.ORDERED
    return p


class TestJsonProcurementStore:

    def test_missing_file_created_empty(self, tmp_path):
        path = tmp_path / "data" / "procurements.json"
        store = JsonProcurementStore(path)
        assert path.read_text(encoding="utf-8") == "[]"
        assert store.load_all() == []

    def test_persist_and_reload(self, tmp_path):
        path = tmp_path / "procurements.json"
        original = _full_procurement()
        JsonProcurementStore(path).persist(original)

        [loaded] = JsonProcurementStore(path).load_all()
        assert loaded == original

    def test_persist_upserts_by_id(self, tmp_path):
        path = tmp_path / "procurements.json"
        store = JsonProcurementStore(path)
        p = _full_procurement()
        store.persist(p)
        p.set_reference("changed")
        store.persist(p)

        raw = json.loads(path.read_text(encoding="utf-8"))
        assert len(raw) == 1
        assert raw[0]["reference"] == "changed"
        assert raw[0]["status"] == "ORDERED"
        assert raw[0]["upl_candidates"][1]["best_before"] is None

    def test_delete(self, tmp_path):
        store = JsonProcurementStore(tmp_path / "procurements.json")
        store.persist(Procurement.create(1, 10, 1))
        store.persist(Procurement.create(2, 10, 1))
        store.delete(1)
        assert [p.id for p in store.load_all()] == [2]

    def test_corrupt_file_is_internal_error(self, tmp_path):
        path = tmp_path / "procurements.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(InternalError, match="Cannot read"):
            JsonProcurementStore(path).load_all()

    def test_repository_loads_at_startup(self, tmp_path):
        path = tmp_path / "procurements.json"
        JsonProcurementStore(path).persist(_full_procurement())

        repo = ProcurementRepository(JsonProcurementStore(path))
        assert repo.find_by_id(3).reference == "PO-778"
        assert repo.next_id() == 4
