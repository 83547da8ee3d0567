"""CLI commands for outstanding reorders."""

from __future__ import annotations

import click

from grocery.infrastructure.cli.session import check, load_store, save_store


@click.command("create")
@click.option("--product-id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units to order.")
@click.option("--name", default="", help="Product name on the order (defaults to catalog name).")
@click.pass_context
def order_create(ctx: click.Context, product_id: str, quantity: int, name: str) -> None:
    """Place an order for a product by hand."""
    store = load_store(ctx)
    result = check(
        store.create_order(product_id=product_id, quantity=quantity, product_name=name),
        f"could not order '{product_id}'",
    )
    save_store(ctx, store)
    click.echo(f"Ordered {result.order.quantity} of {result.order.product_name}")


@click.command("list")
@click.pass_context
def order_list(ctx: click.Context) -> None:
    """List outstanding orders."""
    store = load_store(ctx)
    rows = [r.order for r in store.get_orders()]

    if not rows:
        click.echo("No outstanding orders.")
        return

    click.echo(f"{'Product':<8} {'Name':<20} {'Qty':>6}")
    click.echo("-" * 36)
    for o in rows:
        click.echo(f"{o.product_id:<8} {o.product_name:<20} {o.quantity:>6}")


@click.command("ship")
@click.option("--product-id", required=True, help="Product whose shipment arrived.")
@click.pass_context
def order_ship(ctx: click.Context, product_id: str) -> None:
    """Process the shipment for a product's outstanding order."""
    store = load_store(ctx)
    result = check(
        store.process_shipment(product_id),
        f"no outstanding order for '{product_id}'",
    )
    save_store(ctx, store)
    p = result.product
    click.echo(f"Shipment received for {p.id} '{p.name}' - stock now {p.stock}")
