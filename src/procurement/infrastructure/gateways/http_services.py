"""HTTP implementations of the remote service façades.

Every call is one POST of a bulk request; there are no retries.
"""

from __future__ import annotations

from procurement.domain.exceptions import InternalError
from procurement.domain.gateway.notification import Notifier
from procurement.domain.gateway.pricing import PriceRecord, PricingService
from procurement.domain.gateway.product_catalog import ProductCatalog, ProductRecord
from procurement.domain.gateway.unit_load_registry import (
    UnitLoadCreationRequest,
    UnitLoadRecord,
    UnitLoadRegistry,
)
from procurement.infrastructure.gateways.http_json import post_json


class _HttpService:
    """Base for the façades.

    The address is checked when the first call is made, so a missing
    address only breaks the operations that need that service.
    """

    def __init__(self, service_name: str, address: str | None, timeout: int = 20) -> None:
        self._service_name = service_name
        self._address = address
        self._timeout = timeout

    def _post(self, path: str, payload: dict) -> dict:
        if not self._address:
            raise InternalError(
                f"Could not get service address for {self._service_name}"
            )
        base_url = self._address.rstrip("/")
        if "://" not in base_url:
            base_url = f"http://{base_url}"
        return post_json(f"{base_url}/{path}", payload, timeout=self._timeout)


class HttpUnitLoadRegistry(_HttpService, UnitLoadRegistry):

    def exists_bulk(self, upl_ids: list[str]) -> list[UnitLoadRecord]:
        response = self._post("upls/exists_bulk", {"upl_ids": list(upl_ids)})
        try:
            return [
                UnitLoadRecord(upl_id=raw["upl_id"], sku=raw["sku"])
                for raw in response.get("upls", [])
            ]
        except (KeyError, TypeError) as exc:
            raise InternalError(f"Malformed UPL record: {exc}") from exc

    def create_bulk(self, requests: list[UnitLoadCreationRequest]) -> list[str]:
        if not requests:
            return []
        response = self._post(
            "upls/create_bulk",
            {"upls": [_creation_payload(r) for r in requests]},
        )
        return [str(upl_id) for upl_id in response.get("created_ids", [])]


class HttpProductCatalog(_HttpService, ProductCatalog):

    def get_bulk(self, skus: list[int]) -> list[ProductRecord]:
        response = self._post("products/get_bulk", {"skus": list(skus)})
        try:
            return [
                ProductRecord(
                    sku=raw["sku"],
                    product_id=raw["product_id"],
                    unit=raw["unit"],
                    divisible=raw.get("divisible", False),
                    divisible_amount=raw.get("divisible_amount", 0),
                    perishable=raw.get("perishable", False),
                    display_name=raw.get("display_name", ""),
                )
                for raw in response.get("products", [])
            ]
        except (KeyError, TypeError) as exc:
            raise InternalError(f"Malformed product record: {exc}") from exc


class HttpPricingService(_HttpService, PricingService):

    def get_bulk(self, skus: list[int]) -> list[PriceRecord]:
        response = self._post("prices/get_bulk", {"skus": list(skus)})
        try:
            return [
                PriceRecord(
                    sku=raw["sku"],
                    net_price=raw["net_price"],
                    gross_price=raw["gross_price"],
                    vat_rate=str(raw["vat_rate"]),
                )
                for raw in response.get("prices", [])
            ]
        except (KeyError, TypeError) as exc:
            raise InternalError(f"Malformed price record: {exc}") from exc


class HttpNotifier(_HttpService, Notifier):

    def send(self, to: str, subject: str, body: str) -> None:
        self._post("email/send", {"to": to, "subject": subject, "body": body})


def _creation_payload(request: UnitLoadCreationRequest) -> dict:
    return {
        "upl_id": request.upl_id,
        "procurement_id": request.procurement_id,
        "sku": request.sku,
        "product_id": request.product_id,
        "upl_piece": request.upl_piece,
        "opened_sku": request.opened_sku,
        "best_before": (
            request.best_before.isoformat() if request.best_before else None
        ),
        "unit": request.unit,
        "divisible": request.divisible,
        "divisible_amount": request.divisible_amount,
        "net_price": request.net_price,
        "gross_price": request.gross_price,
        "vat_rate": request.vat_rate,
        "procurement_net_price": request.procurement_net_price,
        "created_by": request.created_by,
    }
