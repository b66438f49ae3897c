"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from procurement.application.close_procurement import CloseProcurementHandler
from procurement.application.set_status import SetStatusHandler
from procurement.domain.repository.procurement_repository import (
    ProcurementRepository,
)
from procurement.domain.service.unit_load_planning_service import (
    UnitLoadPlanningService,
)
from procurement.infrastructure.config import (
    EMAIL_SERVICE,
    PRICING_SERVICE,
    PRODUCT_SERVICE,
    UPL_SERVICE,
    Settings,
)
from procurement.infrastructure.gateways.http_services import (
    HttpNotifier,
    HttpPricingService,
    HttpProductCatalog,
    HttpUnitLoadRegistry,
)
from procurement.infrastructure.persistence.json_procurement_store import (
    JsonProcurementStore,
)


def settings() -> Settings:
    return Settings.from_env()


def procurement_repository(config: Settings) -> ProcurementRepository:
    return ProcurementRepository(
        JsonProcurementStore(config.data_dir / "procurements.json")
    )


def close_procurement_handler(
    repo: ProcurementRepository, config: Settings
) -> CloseProcurementHandler:
    def address(name: str) -> str | None:
        return config.service_addresses.get(name)

    timeout = config.timeout_seconds
    registry = HttpUnitLoadRegistry(UPL_SERVICE, address(UPL_SERVICE), timeout)
    planning = UnitLoadPlanningService(
        registry=registry,
        catalog=HttpProductCatalog(PRODUCT_SERVICE, address(PRODUCT_SERVICE), timeout),
        pricing=HttpPricingService(PRICING_SERVICE, address(PRICING_SERVICE), timeout),
    )
    return CloseProcurementHandler(
        procurement_repo=repo,
        planning_service=planning,
        registry=registry,
        notifier=HttpNotifier(EMAIL_SERVICE, address(EMAIL_SERVICE), timeout),
        alert_recipient=config.alert_recipient,
    )


def set_status_handler(
    repo: ProcurementRepository, config: Settings
) -> SetStatusHandler:
    return SetStatusHandler(repo, close_procurement_handler(repo, config))
