from pathlib import Path

import click

from grocery.infrastructure.bootstrap import StoreSettings
from grocery.infrastructure.cli.checkout_commands import checkout_buy
from grocery.infrastructure.cli.member_commands import (
    member_add,
    member_list,
    member_remove,
    member_search,
    member_transactions,
)
from grocery.infrastructure.cli.order_commands import order_create, order_list, order_ship
from grocery.infrastructure.cli.product_commands import (
    product_add,
    product_info,
    product_list,
    product_price,
)
from grocery.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--data-file", type=click.Path(dir_okay=False, path_type=Path),
              default=None, help="Store snapshot file (env: GROCERY_DATA_FILE).")
@click.option("--allow-negative-stock/--no-allow-negative-stock", default=None,
              help="Let purchases take stock below zero (env: GROCERY_ALLOW_NEGATIVE_STOCK).")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def cli(ctx: click.Context, data_file, allow_negative_stock, verbose) -> None:
    """Grocery store management"""
    configure_logging(verbose)
    defaults = StoreSettings.from_env()
    ctx.obj = StoreSettings(
        data_file=data_file or defaults.data_file,
        allow_negative_stock=(
            defaults.allow_negative_stock if allow_negative_stock is None
            else allow_negative_stock
        ),
    )


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def member() -> None:
    """Manage members."""


@cli.group()
def order() -> None:
    """Manage outstanding orders."""


@cli.group()
def checkout() -> None:
    """Sell to members."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_info)
product.add_command(product_list)
product.add_command(product_price)
member.add_command(member_add)
member.add_command(member_list)
member.add_command(member_remove)
member.add_command(member_search)
member.add_command(member_transactions)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_ship)
checkout.add_command(checkout_buy)
