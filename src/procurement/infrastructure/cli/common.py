"""Helpers shared by the CLI command modules."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import click

from procurement.application.dto import ProcurementDTO
from procurement.domain.exceptions import DomainException, InternalError
from procurement.domain.repository.procurement_repository import (
    ProcurementRepository,
)
from procurement.infrastructure.bootstrap import procurement_repository, settings


def repository() -> ProcurementRepository:
    return procurement_repository(settings())


@contextmanager
def reported_errors() -> Iterator[None]:
    """Turn domain and internal errors into a clean CLI failure."""
    try:
        yield
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except InternalError as exc:
        raise click.ClickException(f"Internal error: {exc}")


def display_procurement(dto: ProcurementDTO) -> None:
    click.echo(f"Procurement #{dto.id}  (status={dto.status})")
    click.echo(f"Source:    {dto.source_id}")
    click.echo(f"Reference: {dto.reference or '-'}")
    click.echo(f"Delivery:  {dto.estimated_delivery_date or '-'}")
    click.echo(f"Created:   {dto.created_at} by {dto.created_by}")
    click.echo()

    click.echo(f"  {'SKU':<10} {'Ordered':>8} {'Net price':>10}")
    click.echo(f"  {'-'*30}")
    for item in dto.items:
        click.echo(
            f"  {item.sku:<10} {item.ordered_amount:>8} {item.expected_net_price:>10}"
        )

    if dto.upls:
        click.echo()
        click.echo(f"  {'UPL':<20} {'SKU':<10} {'Piece':>6} {'Opened':>7}  Best before")
        click.echo(f"  {'-'*60}")
        for upl in dto.upls:
            opened = "yes" if upl.opened_sku else "no"
            click.echo(
                f"  {upl.upl_id:<20} {upl.sku:<10} {upl.upl_piece:>6} "
                f"{opened:>7}  {upl.best_before or '-'}"
            )
