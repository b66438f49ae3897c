"""CLI commands for the SKU lines of a procurement."""

from __future__ import annotations

import click

from procurement.application.add_sku import AddSkuHandler
from procurement.application.remove_sku import RemoveSkuHandler
from procurement.application.update_sku import (
    UpdateSkuAmountHandler,
    UpdateSkuPriceHandler,
)
from procurement.infrastructure.cli.common import (
    display_procurement,
    reported_errors,
    repository,
)


@click.command("add")
@click.option("--id", "procurement_id", required=True, type=int, help="Procurement ID.")
@click.option("--sku", required=True, type=int, help="SKU.")
@click.option("--amount", required=True, type=click.IntRange(min=0), help="Ordered amount.")
@click.option("--price", required=True, type=click.IntRange(min=0), help="Expected net price (minor unit).")
def sku_add(procurement_id: int, sku: int, amount: int, price: int) -> None:
    """Add a SKU line."""
    with reported_errors():
        dto = AddSkuHandler(repository()).handle(procurement_id, sku, amount, price)

    display_procurement(dto)


@click.command("set-amount")
@click.option("--id", "procurement_id", required=True, type=int, help="Procurement ID.")
@click.option("--sku", required=True, type=int, help="SKU.")
@click.option("--amount", required=True, type=click.IntRange(min=0), help="Ordered amount.")
def sku_set_amount(procurement_id: int, sku: int, amount: int) -> None:
    """Change the ordered amount of a SKU line."""
    with reported_errors():
        dto = UpdateSkuAmountHandler(repository()).handle(procurement_id, sku, amount)

    display_procurement(dto)


@click.command("set-price")
@click.option("--id", "procurement_id", required=True, type=int, help="Procurement ID.")
@click.option("--sku", required=True, type=int, help="SKU.")
@click.option("--price", required=True, type=click.IntRange(min=0), help="Expected net price (minor unit).")
def sku_set_price(procurement_id: int, sku: int, price: int) -> None:
    """Change the expected net price of a SKU line."""
    with reported_errors():
        dto = UpdateSkuPriceHandler(repository()).handle(procurement_id, sku, price)

    display_procurement(dto)


@click.command("remove")
@click.option("--id", "procurement_id", required=True, type=int, help="Procurement ID.")
@click.option("--sku", required=True, type=int, help="SKU.")
def sku_remove(procurement_id: int, sku: int) -> None:
    """Remove a SKU line."""
    with reported_errors():
        dto = RemoveSkuHandler(repository()).handle(procurement_id, sku)

    display_procurement(dto)
