"""Shared plumbing for CLI commands: load the store, save it, report failures."""

from __future__ import annotations

import click

from grocery.application.dto import Result, ResultCode
from grocery.application.grocery_store import GroceryStore
from grocery.infrastructure.bootstrap import StoreSettings, close_store, open_store

_MESSAGES = {
    ResultCode.OPERATION_FAILED: "Operation failed",
    ResultCode.NO_SUCH_MEMBER: "No such member",
    ResultCode.PRODUCT_NOT_FOUND: "Product not found",
}


def load_store(ctx: click.Context) -> GroceryStore:
    settings: StoreSettings = ctx.obj
    store = open_store(settings)
    if store is None:
        raise click.ClickException(
            f"Could not read store data from {settings.data_file}"
        )
    return store


def save_store(ctx: click.Context, store: GroceryStore) -> None:
    settings: StoreSettings = ctx.obj
    if not close_store(store, settings):
        raise click.ClickException(
            f"Could not write store data to {settings.data_file}"
        )


def check(result: Result, detail: str) -> Result:
    """Turn a failing result into a ClickException; pass successes through."""
    if not result.succeeded:
        raise click.ClickException(f"{_MESSAGES[result.code]}: {detail}")
    return result
