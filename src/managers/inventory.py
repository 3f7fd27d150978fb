"""Inventory log manager.

This module wraps a single repository with the lenient update and delete
verbs: absent ids are reported through outcomes built from boolean results.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime

from core.errors import EntityNotFoundError, InvalidValueError, KeepstoreError
from core.logging_config import get_logger
from core.types import InventoryItem, OperationOutcome, SeedData
from managers.outcomes import failed, flush_snapshots, succeeded, with_flush_error
from managers.seed_data import default_seed_data
from store.record_payload import INVENTORY_ITEM_CODEC
from store.repository import Repository
from store.snapshot_io import JsonSnapshotFile, SnapshotTarget

_LOGGER = get_logger(__name__)


class InventoryManager:
    """Inventory manager persisting to one snapshot file."""

    def __init__(self, target: SnapshotTarget, autosave: bool = True) -> None:
        self._items: Repository[InventoryItem] = Repository("item")
        self._snapshot_file = JsonSnapshotFile(target, INVENTORY_ITEM_CODEC)
        self._autosave = autosave

    @property
    def items(self) -> Repository[InventoryItem]:
        return self._items

    def seed(
        self,
        seed_data: SeedData | None = None,
        now: datetime | None = None,
    ) -> OperationOutcome:
        """Add starter inventory items."""
        data = seed_data or default_seed_data(now)
        try:
            for item in data.inventory:
                self._items.add(item)
        except KeepstoreError as error:
            return failed("inventory_seed", error)
        return self._after_change(succeeded(f"Seeded {len(data.inventory)} inventory items."))

    def list_items(self) -> list[InventoryItem]:
        """Return every logged item ordered by id."""
        return sorted(self._items.get_all(), key=lambda item: item.id)

    def add_item(
        self,
        item_id: int,
        name: str,
        quantity: int,
        date_added: datetime | None = None,
    ) -> OperationOutcome:
        """Log a new inventory item stamped with ``date_added`` or now."""
        try:
            _validate_item_fields(name, quantity)
            item = InventoryItem(
                id=item_id,
                name=name.strip(),
                quantity=quantity,
                date_added=date_added or datetime.now(),
            )
            self._items.add(item)
        except KeepstoreError as error:
            return failed("add_item", error, item_id=item_id)
        _LOGGER.info("inventory_item_added", item_id=item_id)
        return self._after_change(succeeded("Item added successfully.", value=item))

    def update_item(self, item_id: int, new_name: str, new_quantity: int) -> OperationOutcome:
        """Replace the name and quantity of a logged item.

        Args:
            item_id: Item identifier.
            new_name: Replacement name.
            new_quantity: Replacement quantity; must be non-negative.

        Returns:
            Outcome carrying the replacement item, or a not-found failure.
        """
        try:
            _validate_item_fields(new_name, new_quantity)
            existing = self._items.find(item_id)
            updated = None
            if existing is not None:
                updated = replace(existing, name=new_name.strip(), quantity=new_quantity)
            if updated is None or not self._items.try_update(item_id, updated):
                raise EntityNotFoundError(f"Item with ID {item_id} not found.")
        except KeepstoreError as error:
            return failed("update_item", error, item_id=item_id)
        _LOGGER.info("inventory_item_updated", item_id=item_id)
        return self._after_change(succeeded("Item updated successfully.", value=updated))

    def delete_item(self, item_id: int) -> OperationOutcome:
        """Remove a logged item."""
        if not self._items.try_remove(item_id):
            return failed("delete_item", EntityNotFoundError(f"Item with ID {item_id} not found."))
        _LOGGER.info("inventory_item_deleted", item_id=item_id)
        return self._after_change(succeeded("Item deleted successfully."))

    def save(self) -> OperationOutcome:
        """Flush the inventory snapshot."""
        flush_error = flush_snapshots([(self._snapshot_file, self._items)])
        if flush_error is not None:
            return OperationOutcome(ok=False, message=str(flush_error), error=flush_error)
        return succeeded("Data saved successfully.")

    def load(self) -> OperationOutcome:
        """Replace the repository with the persisted snapshot."""
        try:
            records = self._snapshot_file.load()
            self._items.replace_all(records)
        except KeepstoreError as error:
            return failed("inventory_load", error)
        if not records:
            return succeeded("No inventory data to load.", value=0)
        return succeeded("Data loaded successfully.", value=len(records))

    def _after_change(self, outcome: OperationOutcome) -> OperationOutcome:
        if not self._autosave:
            return outcome
        return with_flush_error(outcome, flush_snapshots([(self._snapshot_file, self._items)]))


def _validate_item_fields(name: str, quantity: int) -> None:
    if not name.strip():
        raise InvalidValueError("Item name cannot be empty.")
    if quantity < 0:
        raise InvalidValueError(f"Quantity cannot be negative (got {quantity}).")
