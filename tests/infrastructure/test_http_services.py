"""Tests for the HTTP service façades (transport replaced by a recorder)."""

import pytest

from procurement.domain.exceptions import InternalError
from procurement.domain.gateway.unit_load_registry import UnitLoadCreationRequest
from procurement.infrastructure.gateways import http_services
from procurement.infrastructure.gateways.http_services import (
    HttpNotifier,
    HttpPricingService,
    HttpProductCatalog,
    HttpUnitLoadRegistry,
)
from tests.ids import UPL_A, UPL_B


class RecordingTransport:

    def __init__(self, response: dict) -> None:
        self.response = response
        self.calls: list[tuple[str, dict, int]] = []

    def __call__(self, url: str, payload: dict, timeout: int = 20) -> dict:
        self.calls.append((url, payload, timeout))
        return self.response


@pytest.fixture
def transport(monkeypatch):
    def install(response: dict) -> RecordingTransport:
        recorder = RecordingTransport(response)
        monkeypatch.setattr(http_services, "post_json", recorder)
        return recorder

    return install


def _request(upl_id: str) -> UnitLoadCreationRequest:
    return UnitLoadCreationRequest(
        upl_id=upl_id, procurement_id=1, sku=5, product_id=500, upl_piece=1,
        opened_sku=False, best_before=None, unit="piece", divisible=False,
        divisible_amount=0, net_price=1000, gross_price=1270, vat_rate="27",
        procurement_net_price=800, created_by=3,
    )


class TestUnitLoadRegistry:

    def test_exists_bulk(self, transport):
        recorder = transport({"upls": [{"upl_id": UPL_A, "sku": 5}]})
        registry = HttpUnitLoadRegistry("SERVICE_ADDR_UPL", "upl:50070", timeout=5)

        records = registry.exists_bulk([UPL_A, UPL_B])

        assert [r.upl_id for r in records] == [UPL_A]
        assert recorder.calls == [
            ("http://upl:50070/upls/exists_bulk", {"upl_ids": [UPL_A, UPL_B]}, 5)
        ]

    def test_create_bulk_returns_created_ids(self, transport):
        recorder = transport({"created_ids": [UPL_A]})
        registry = HttpUnitLoadRegistry("SERVICE_ADDR_UPL", "upl:50070")

        created = registry.create_bulk([_request(UPL_A), _request(UPL_B)])

        assert created == [UPL_A]
        payload = recorder.calls[0][1]
        assert [u["upl_id"] for u in payload["upls"]] == [UPL_A, UPL_B]
        assert payload["upls"][0]["procurement_net_price"] == 800

    def test_create_nothing_skips_the_call(self, transport):
        recorder = transport({})
        assert HttpUnitLoadRegistry("SERVICE_ADDR_UPL", "upl:1").create_bulk([]) == []
        assert recorder.calls == []

    def test_malformed_record(self, transport):
        transport({"upls": [{"sku": 5}]})
        with pytest.raises(InternalError, match="Malformed"):
            HttpUnitLoadRegistry("SERVICE_ADDR_UPL", "upl:1").exists_bulk([UPL_A])


class TestCatalogAndPricing:

    def test_products(self, transport):
        transport({"products": [{"sku": 5, "product_id": 500, "unit": "kg", "perishable": True}]})
        [record] = HttpProductCatalog("SERVICE_ADDR_PRODUCT", "product:1").get_bulk([5])
        assert record.product_id == 500
        assert record.perishable is True
        assert record.divisible is False

    def test_prices(self, transport):
        transport({"prices": [{"sku": 5, "net_price": 1000, "gross_price": 1270, "vat_rate": 27}]})
        [record] = HttpPricingService("SERVICE_ADDR_PRICING", "pricing:1").get_bulk([5])
        assert record.vat_rate == "27"


class TestNotifierAndAddresses:

    def test_send(self, transport):
        recorder = transport({})
        HttpNotifier("SERVICE_ADDR_EMAIL", "http://mail:25/").send("a@b", "s", "b")
        assert recorder.calls[0][0] == "http://mail:25/email/send"
        assert recorder.calls[0][1] == {"to": "a@b", "subject": "s", "body": "b"}

    def test_missing_address_is_internal_error(self, transport):
        recorder = transport({})
        with pytest.raises(InternalError, match="SERVICE_ADDR_EMAIL"):
            HttpNotifier("SERVICE_ADDR_EMAIL", None).send("a@b", "s", "b")
        assert recorder.calls == []
