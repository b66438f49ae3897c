"""Environment configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from procurement.application.close_procurement import DEFAULT_ALERT_RECIPIENT

logger = logging.getLogger(__name__)

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

UPL_SERVICE = "SERVICE_ADDR_UPL"
PRODUCT_SERVICE = "SERVICE_ADDR_PRODUCT"
PRICING_SERVICE = "SERVICE_ADDR_PRICING"
EMAIL_SERVICE = "SERVICE_ADDR_EMAIL"


def _int_env(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring %s=%r, not an integer; using %s", name, value, default)
        return default


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    service_addresses: dict[str, str]
    timeout_seconds: int = 20
    alert_recipient: str = DEFAULT_ALERT_RECIPIENT
    log_level: str = "WARNING"

    @staticmethod
    def from_env() -> Settings:
        data_dir = os.environ.get("PROCUREMENT_DATA_DIR")
        return Settings(
            data_dir=Path(data_dir) if data_dir else _DEFAULT_DATA_DIR,
            service_addresses={
                name: os.environ[name]
                for name in (UPL_SERVICE, PRODUCT_SERVICE, PRICING_SERVICE, EMAIL_SERVICE)
                if os.environ.get(name)
            },
            timeout_seconds=_int_env("SERVICE_TIMEOUT_SECONDS", 20),
            alert_recipient=os.environ.get(
                "PROCUREMENT_ALERT_EMAIL", DEFAULT_ALERT_RECIPIENT
            ),
            log_level=os.environ.get("PROCUREMENT_LOG_LEVEL", "WARNING").upper(),
        )
