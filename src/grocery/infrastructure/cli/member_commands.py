"""CLI commands for the membership roster."""

from __future__ import annotations

import click

from grocery.infrastructure.cli.session import check, load_store, save_store


@click.command("add")
@click.option("--name", required=True, help="Member name.")
@click.option("--address", required=True, help="Postal address.")
@click.option("--phone", required=True, help="Phone number.")
@click.option("--fee", required=True, help="Membership fee (e.g. 25.00).")
@click.option("--joined", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
              help="Date joined (YYYY-MM-DD); defaults to today.")
@click.pass_context
def member_add(ctx, name, address, phone, fee, joined) -> None:
    """Enroll a new member."""
    store = load_store(ctx)
    result = check(
        store.add_member(
            name=name,
            address=address,
            phone=phone,
            fee=fee,
            date_joined=joined.date() if joined else None,
        ),
        f"could not enroll '{name}'",
    )
    save_store(ctx, store)
    click.echo(f"Member {result.member.id} '{result.member.name}' enrolled")


@click.command("remove")
@click.option("--id", "member_id", required=True, help="Member ID.")
@click.pass_context
def member_remove(ctx: click.Context, member_id: str) -> None:
    """Remove a member."""
    store = load_store(ctx)
    check(store.remove_member(member_id), f"no member with id '{member_id}'")
    save_store(ctx, store)
    click.echo(f"Member {member_id} removed")


@click.command("search")
@click.option("--name", required=True, help="Exact member name.")
@click.pass_context
def member_search(ctx: click.Context, name: str) -> None:
    """Find a member by name."""
    store = load_store(ctx)
    m = check(store.search_membership(name), name).member
    click.echo(f"{m.id}  {m.name}  {m.address}  {m.phone}  joined {m.date_joined}  fee {m.fee}")


@click.command("list")
@click.pass_context
def member_list(ctx: click.Context) -> None:
    """List all members."""
    store = load_store(ctx)
    rows = [r.member for r in store.get_members()]

    if not rows:
        click.echo("No members found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Phone':<15} {'Joined':<10}")
    click.echo("-" * 54)
    for m in rows:
        click.echo(f"{m.id:<6} {m.name:<20} {m.phone:<15} {m.date_joined.isoformat():<10}")


@click.command("transactions")
@click.option("--id", "member_id", required=True, help="Member ID.")
@click.option("--date", "on", required=True, type=click.DateTime(formats=["%Y-%m-%d"]),
              help="Day to report (YYYY-MM-DD).")
@click.pass_context
def member_transactions(ctx, member_id, on) -> None:
    """Show a member's purchases on one day."""
    store = load_store(ctx)
    rows = store.get_transactions_on_date(member_id, on.date())

    if not rows:
        click.echo("No transactions found.")
        return

    click.echo(f"{'Time':<6} {'Product':<20} {'Qty':>5} {'Price':>10}")
    click.echo("-" * 44)
    for t in rows:
        click.echo(f"{t.timestamp:%H:%M} {t.product_name:<20} {t.quantity:>5} {t.price:>10}")
