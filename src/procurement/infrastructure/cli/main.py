import click

from procurement.infrastructure.bootstrap import settings
from procurement.infrastructure.cli.procurement_commands import (
    procurement_close,
    procurement_create,
    procurement_list,
    procurement_remove,
    procurement_set_delivery,
    procurement_set_reference,
    procurement_set_status,
    procurement_show,
)
from procurement.infrastructure.cli.sku_commands import (
    sku_add,
    sku_remove,
    sku_set_amount,
    sku_set_price,
)
from procurement.infrastructure.cli.upl_commands import upl_add, upl_remove, upl_update
from procurement.infrastructure.logging_config import configure_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging.")
def cli(verbose: bool) -> None:
    """Procurement orders and their unit loads."""
    configure_logging("DEBUG" if verbose else settings().log_level)


@cli.group()
def procurement() -> None:
    """Manage procurements."""


@cli.group()
def sku() -> None:
    """Manage the SKU lines of a procurement."""


@cli.group()
def upl() -> None:
    """Manage the UPL candidates of a procurement."""


# Register subcommands
procurement.add_command(procurement_close)
procurement.add_command(procurement_create)
procurement.add_command(procurement_list)
procurement.add_command(procurement_remove)
procurement.add_command(procurement_set_delivery)
procurement.add_command(procurement_set_reference)
procurement.add_command(procurement_set_status)
procurement.add_command(procurement_show)
sku.add_command(sku_add)
sku.add_command(sku_remove)
sku.add_command(sku_set_amount)
sku.add_command(sku_set_price)
upl.add_command(upl_add)
upl.add_command(upl_remove)
upl.add_command(upl_update)
