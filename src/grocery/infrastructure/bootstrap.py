"""Composition root — settings and wiring for the store.

This is the only module that knows where the snapshot lives and how the
store is configured. The CLI asks it for a loaded store and hands the
store back to be saved.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from grocery.application.grocery_store import GroceryStore
from grocery.infrastructure.persistence.json_snapshot_repository import (
    JsonSnapshotRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DATA_FILE_ENV = "GROCERY_DATA_FILE"
ALLOW_NEGATIVE_STOCK_ENV = "GROCERY_ALLOW_NEGATIVE_STOCK"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class StoreSettings:
    data_file: Path = _DATA_DIR / "grocery_store.json"
    allow_negative_stock: bool = False

    @staticmethod
    def from_env(environ: dict[str, str] | None = None) -> StoreSettings:
        env = os.environ if environ is None else environ
        defaults = StoreSettings()
        data_file = env.get(DATA_FILE_ENV)
        allow = env.get(ALLOW_NEGATIVE_STOCK_ENV)
        return StoreSettings(
            data_file=Path(data_file) if data_file else defaults.data_file,
            allow_negative_stock=(
                allow.strip().lower() in _TRUTHY if allow is not None
                else defaults.allow_negative_stock
            ),
        )


def snapshot_repository(settings: StoreSettings) -> JsonSnapshotRepository:
    return JsonSnapshotRepository(settings.data_file)


def open_store(settings: StoreSettings) -> GroceryStore | None:
    """Load the store from its snapshot, or start empty if there is none yet.

    Returns None when a snapshot exists but cannot be read, so a damaged
    file is never silently replaced by an empty store.
    """
    repo = snapshot_repository(settings)
    if not repo.exists():
        return GroceryStore(allow_negative_stock=settings.allow_negative_stock)
    return repo.load(allow_negative_stock=settings.allow_negative_stock)


def close_store(store: GroceryStore, settings: StoreSettings) -> bool:
    return snapshot_repository(settings).save(store)
