"""CLI command for a member's purchase."""

from __future__ import annotations

import click

from grocery.application.dto import ResultCode
from grocery.infrastructure.cli.session import check, load_store, save_store


def _parse_items(raw: str) -> list[tuple[str, int]]:
    """Parse 'P1:3,P2:5' into (product_id, quantity) pairs."""
    items: list[tuple[str, int]] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        items.append((product_id.strip(), qty))
    return items


@click.command("buy")
@click.option("--member", "member_id", required=True, help="Member ID.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.pass_context
def checkout_buy(ctx: click.Context, member_id: str, items: str) -> None:
    """Check out a cart for a member.

    Nothing is saved unless every item goes through.
    """
    specs = _parse_items(items)
    store = load_store(ctx)
    check(store.start_checkout(member_id), f"no member with id '{member_id}'")

    reordered: list[str] = []
    for product_id, qty in specs:
        result = check(
            store.add_line_item(product_id=product_id, quantity=qty),
            f"could not sell {qty} of '{product_id}'",
        )
        if result.code == ResultCode.ORDER_PLACED:
            reordered.append(result.product.name)

    receipt = check(store.complete_checkout(), "checkout could not be completed")
    save_store(ctx, store)

    click.echo(f"Checkout for member {receipt.member.id} ({receipt.member.name})")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in receipt.line_items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Total':<27} {receipt.total:>20}")
    for name in reordered:
        click.echo(f"Reorder placed for {name}")
