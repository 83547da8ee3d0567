"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from grocery.infrastructure.cli.session import check, load_store, save_store


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Unit price (e.g. 2.50).")
@click.option("--reorder-level", required=True, type=int, help="Reorder threshold.")
@click.pass_context
def product_add(ctx: click.Context, name: str, price: str, reorder_level: int) -> None:
    """Add a new product to the catalog (with zero stock)."""
    store = load_store(ctx)
    result = check(
        store.add_product(name=name, price=price, reorder_level=reorder_level),
        f"could not add product '{name}'",
    )
    save_store(ctx, store)
    p = result.product
    click.echo(f"Product {p.id} '{p.name}' added at {p.price} (reorder level {p.reorder_level})")


@click.command("list")
@click.pass_context
def product_list(ctx: click.Context) -> None:
    """List all products in the catalog."""
    store = load_store(ctx)
    rows = [r.product for r in store.get_products()]

    if not rows:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>7} {'Reorder':>8}")
    click.echo("-" * 55)
    for p in rows:
        click.echo(f"{p.id:<6} {p.name:<20} {p.price:>10} {p.stock:>7} {p.reorder_level:>8}")


@click.command("price")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 2.99).")
@click.pass_context
def product_price(ctx: click.Context, product_id: str, price: str) -> None:
    """Change a product's price."""
    store = load_store(ctx)
    result = check(
        store.change_price(product_id=product_id, price=price),
        f"could not change price of '{product_id}'",
    )
    save_store(ctx, store)
    click.echo(f"Product {product_id} '{result.product.name}' now costs {result.product.price}")


@click.command("info")
@click.option("--name", default=None, help="Exact product name.")
@click.option("--id", "product_id", default=None, help="Product ID.")
@click.pass_context
def product_info(ctx: click.Context, name: str | None, product_id: str | None) -> None:
    """Show one product, looked up by name or by id."""
    if (name is None) == (product_id is None):
        raise click.UsageError("Give exactly one of --name or --id")
    store = load_store(ctx)
    if product_id is not None:
        result = check(store.retrieve_product_request(product_id), product_id)
    else:
        result = check(store.retrieve_product_info(name), name)
    p = result.product
    click.echo(f"{p.id}  {p.name}  {p.price}  stock={p.stock}  reorder level={p.reorder_level}")
