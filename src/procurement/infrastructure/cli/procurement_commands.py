"""CLI commands for the Procurement aggregate."""

from __future__ import annotations

import click

from procurement.application.create_procurement import CreateProcurementHandler
from procurement.application.list_procurements import ListProcurementsHandler
from procurement.application.remove_procurement import RemoveProcurementHandler
from procurement.application.set_delivery_date import SetDeliveryDateHandler
from procurement.application.set_reference import SetReferenceHandler
from procurement.application.show_procurement import ShowProcurementHandler
from procurement.domain.model.procurement import ProcurementStatus
from procurement.infrastructure.bootstrap import (
    close_procurement_handler,
    procurement_repository,
    set_status_handler,
    settings,
)
from procurement.infrastructure.cli.common import (
    display_procurement,
    reported_errors,
    repository,
)

_STATUS_CHOICE = click.Choice(
    [s.value for s in ProcurementStatus], case_sensitive=False
)


@click.command("create")
@click.option("--source", "source_id", required=True, type=int, help="Source (supplier) ID.")
@click.option("--by", "created_by", required=True, type=int, help="Creating user ID.")
def procurement_create(source_id: int, created_by: int) -> None:
    """Create a new, empty procurement."""
    with reported_errors():
        dto = CreateProcurementHandler(repository()).handle(source_id, created_by)

    click.echo(f"Procurement #{dto.id} created  (status={dto.status})")


@click.command("show")
@click.option("--id", "procurement_id", required=True, type=int, help="Procurement ID.")
def procurement_show(procurement_id: int) -> None:
    """Show details of a procurement."""
    with reported_errors():
        dto = ShowProcurementHandler(repository()).handle(procurement_id)

    display_procurement(dto)


@click.command("list")
def procurement_list() -> None:
    """List all procurements."""
    with reported_errors():
        rows = ListProcurementsHandler(repository()).handle()

    if not rows:
        click.echo("No procurements found.")
        return

    click.echo(
        f"{'ID':<6} {'Source':<8} {'Status':<11} {'SKUs':>5} {'Pieces':>7} {'UPLs':>6}  Delivery"
    )
    click.echo("-" * 70)
    for row in rows:
        click.echo(
            f"{row.id:<6} {row.source_id:<8} {row.status:<11} {row.sku_count:>5} "
            f"{row.sku_piece_count:>7} {row.upl_count:>6}  {row.estimated_delivery_date or '-'}"
        )


@click.command("set-reference")
@click.option("--id", "procurement_id", required=True, type=int, help="Procurement ID.")
@click.option("--reference", required=True, help="Free text reference.")
def procurement_set_reference(procurement_id: int, reference: str) -> None:
    """Set the free text reference."""
    with reported_errors():
        SetReferenceHandler(repository()).handle(procurement_id, reference)

    click.echo(f"Procurement #{procurement_id} reference set.")


@click.command("set-delivery")
@click.option("--id", "procurement_id", required=True, type=int, help="Procurement ID.")
@click.option(
    "--date", "delivery_date", default="",
    help="Estimated delivery date (RFC 3339). Omit to clear.",
)
def procurement_set_delivery(procurement_id: int, delivery_date: str) -> None:
    """Set or clear the estimated delivery date."""
    with reported_errors():
        dto = SetDeliveryDateHandler(repository()).handle(procurement_id, delivery_date)

    click.echo(
        f"Procurement #{procurement_id} delivery date: "
        f"{dto.estimated_delivery_date or 'unknown'}"
    )


@click.command("set-status")
@click.option("--id", "procurement_id", required=True, type=int, help="Procurement ID.")
@click.option("--status", required=True, type=_STATUS_CHOICE, help="Target status.")
@click.option("--by", "actor", required=True, type=int, help="Acting user ID.")
def procurement_set_status(procurement_id: int, status: str, actor: int) -> None:
    """Move a procurement to the next status.

    CLOSED runs the close workflow (creates the UPLs in the registry).
    """
    config = settings()
    with reported_errors():
        repo = procurement_repository(config)
        dto = set_status_handler(repo, config).handle(procurement_id, status, actor)

    click.echo(f"Procurement #{procurement_id} is now {dto.status}.")


@click.command("close")
@click.option("--id", "procurement_id", required=True, type=int, help="Procurement ID.")
@click.option("--by", "actor", required=True, type=int, help="Acting user ID.")
def procurement_close(procurement_id: int, actor: int) -> None:
    """Close a PROCESSING procurement and create its UPLs."""
    config = settings()
    with reported_errors():
        repo = procurement_repository(config)
        close_procurement_handler(repo, config).handle(procurement_id, actor)

    click.echo(f"Procurement #{procurement_id} closed, UPLs created.")


@click.command("remove")
@click.option("--id", "procurement_id", required=True, type=int, help="Procurement ID.")
def procurement_remove(procurement_id: int) -> None:
    """Remove a NEW procurement."""
    with reported_errors():
        RemoveProcurementHandler(repository()).handle(procurement_id)

    click.echo(f"Procurement #{procurement_id} removed.")
