"""CLI commands for the UPL candidates of a procurement."""

from __future__ import annotations

import click

from procurement.application.add_upl import AddUplHandler
from procurement.application.remove_upl import RemoveUplHandler
from procurement.application.update_upl import UpdateUplHandler
from procurement.infrastructure.cli.common import (
    display_procurement,
    reported_errors,
    repository,
)


@click.command("add")
@click.option("--id", "procurement_id", required=True, type=int, help="Procurement ID.")
@click.option("--upl", "upl_id", required=True, help="UPL ID (with check digit).")
@click.option("--sku", required=True, type=int, help="SKU the UPL holds.")
@click.option("--piece", required=True, type=click.IntRange(min=0), help="Pieces in the UPL.")
@click.option("--opened", is_flag=True, default=False, help="The UPL is an opened unit.")
@click.option("--best-before", default="", help="Best before date (RFC 3339).")
def upl_add(
    procurement_id: int,
    upl_id: str,
    sku: int,
    piece: int,
    opened: bool,
    best_before: str,
) -> None:
    """Add a UPL candidate."""
    with reported_errors():
        dto = AddUplHandler(repository()).handle(
            procurement_id, upl_id, sku, piece, opened, best_before
        )

    display_procurement(dto)


@click.command("update")
@click.option("--id", "procurement_id", required=True, type=int, help="Procurement ID.")
@click.option("--upl", "upl_id", required=True, help="UPL ID.")
@click.option("--sku", required=True, type=int, help="SKU the UPL holds.")
@click.option("--piece", required=True, type=click.IntRange(min=0), help="Pieces in the UPL.")
@click.option("--best-before", default="", help="Best before date (RFC 3339). Omit to clear.")
def upl_update(
    procurement_id: int, upl_id: str, sku: int, piece: int, best_before: str
) -> None:
    """Replace the SKU, piece and best before date of a UPL candidate."""
    with reported_errors():
        dto = UpdateUplHandler(repository()).handle(
            procurement_id, upl_id, sku, piece, best_before
        )

    display_procurement(dto)


@click.command("remove")
@click.option("--id", "procurement_id", required=True, type=int, help="Procurement ID.")
@click.option("--upl", "upl_id", required=True, help="UPL ID.")
def upl_remove(procurement_id: int, upl_id: str) -> None:
    """Remove a UPL candidate."""
    with reported_errors():
        dto = RemoveUplHandler(repository()).handle(procurement_id, upl_id)

    display_procurement(dto)
