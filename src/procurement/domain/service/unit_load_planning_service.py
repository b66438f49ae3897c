"""Domain service: Unit-load planning.

Reconciles a PROCESSING procurement against the unit-load registry, the
product catalog and the pricing service, and turns every UPL candidate into
a fully denormalised UnitLoadCreationRequest.

Planning only reads from the remote services.  It either fails with a
DomainException before anything was created, or returns the complete list
of requests; the caller issues the one mutating call afterwards.
"""

from __future__ import annotations

from procurement.domain.exceptions import (
    IdConflictError,
    InvalidStateError,
    MissingExpiryError,
    MissingPriceError,
    QuantityMismatchError,
    UnknownSkuError,
)
from procurement.domain.gateway.pricing import PricingService
from procurement.domain.gateway.product_catalog import ProductCatalog
from procurement.domain.gateway.unit_load_registry import (
    UnitLoadCreationRequest,
    UnitLoadRegistry,
)
from procurement.domain.model.procurement import Procurement, ProcurementStatus


class UnitLoadPlanningService:

    def __init__(
        self,
        registry: UnitLoadRegistry,
        catalog: ProductCatalog,
        pricing: PricingService,
    ) -> None:
        self._registry = registry
        self._catalog = catalog
        self._pricing = pricing

    def plan(self, procurement: Procurement, actor: int) -> list[UnitLoadCreationRequest]:
        """Validate *procurement* and build one creation request per candidate.

        Steps:
        1. The procurement must be PROCESSING.
        2. None of the candidate ids may exist in the registry yet.
        3. Fetch product metadata and prices for every ordered SKU.
        4. Per item: product and price must exist, perishable products need
           a best before date on every candidate, and the candidate
           coverage must equal the ordered amount.
        """
        if procurement.status != ProcurementStatus.PROCESSING:
            raise InvalidStateError(
                f"Only PROCESSING procurements can be closed, "
                f"#{procurement.id} is {procurement.status.value}"
            )

        upl_ids = [c.upl_id for c in procurement.upl_candidates]
        if upl_ids:
            existing = self._registry.exists_bulk(upl_ids)
            if existing:
                raise IdConflictError([record.upl_id for record in existing])

        skus = [item.sku for item in procurement.items]
        products = {p.sku: p for p in self._catalog.get_bulk(skus)} if skus else {}
        prices = {p.sku: p for p in self._pricing.get_bulk(skus)} if skus else {}

        requests: list[UnitLoadCreationRequest] = []
        for item in procurement.items:
            product = products.get(item.sku)
            if product is None:
                raise UnknownSkuError(item.sku)
            price = prices.get(item.sku)
            if price is None:
                raise MissingPriceError(item.sku)

            candidates = procurement.candidates_for(item.sku)

            if product.perishable and any(c.best_before is None for c in candidates):
                raise MissingExpiryError(item.sku)

            covered = sum(c.covered_amount for c in candidates)
            if covered != item.ordered_amount:
                raise QuantityMismatchError(item.sku, item.ordered_amount, covered)

            for candidate in candidates:
                requests.append(
                    UnitLoadCreationRequest(
                        upl_id=candidate.upl_id,
                        procurement_id=procurement.id,
                        sku=item.sku,
                        product_id=product.product_id,
                        upl_piece=candidate.upl_piece,
                        opened_sku=candidate.opened_sku,
                        best_before=candidate.best_before,
                        unit=product.unit,
                        divisible=product.divisible,
                        divisible_amount=product.divisible_amount,
                        net_price=price.net_price,
                        gross_price=price.gross_price,
                        vat_rate=price.vat_rate,
                        procurement_net_price=item.expected_net_price,
                        created_by=actor,
                    )
                )

        # Candidates pointing at a SKU nobody ordered
        for sku in procurement.orphan_skus():
            raise QuantityMismatchError(sku, 0, procurement.covered_amount(sku))

        return requests
