"""Warehouse stock manager.

This module composes one repository per stock category and exposes the
stock verbs: seeding, increasing stock, setting quantities, removal.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from core.constants import WAREHOUSE_CATEGORIES
from core.errors import InvalidValueError, KeepstoreError
from core.logging_config import get_logger
from core.types import ElectronicItem, GroceryItem, OperationOutcome, SeedData, WarehouseCategory
from managers.outcomes import (
    SnapshotBinding,
    failed,
    flush_snapshots,
    succeeded,
    with_flush_error,
)
from managers.seed_data import default_seed_data
from store.record_payload import ELECTRONIC_ITEM_CODEC, GROCERY_ITEM_CODEC
from store.repository import Repository, replace_all_together
from store.snapshot_io import JsonSnapshotFile, SnapshotTarget
from store.stock import adjust_quantity, set_quantity

_LOGGER = get_logger(__name__)


class WarehouseManager:
    """Stock manager over electronics and groceries repositories."""

    def __init__(
        self,
        electronics_target: SnapshotTarget | None = None,
        groceries_target: SnapshotTarget | None = None,
        autosave: bool = False,
    ) -> None:
        """Create a manager with empty repositories.

        Args:
            electronics_target: Optional snapshot location for electronics.
            groceries_target: Optional snapshot location for groceries.
            autosave: Flush snapshots after each applied verb.
        """
        self._electronics: Repository[ElectronicItem] = Repository("electronic item")
        self._groceries: Repository[GroceryItem] = Repository("grocery item")
        self._autosave = autosave
        self._bindings: list[SnapshotBinding] = []
        if electronics_target is not None:
            electronics_file = JsonSnapshotFile(electronics_target, ELECTRONIC_ITEM_CODEC)
            self._bindings.append((electronics_file, self._electronics))
        if groceries_target is not None:
            groceries_file = JsonSnapshotFile(groceries_target, GROCERY_ITEM_CODEC)
            self._bindings.append((groceries_file, self._groceries))

    @property
    def electronics(self) -> Repository[ElectronicItem]:
        return self._electronics

    @property
    def groceries(self) -> Repository[GroceryItem]:
        return self._groceries

    def repository(self, category: WarehouseCategory) -> Repository[Any]:
        """Return the repository for a stock category.

        Raises:
            InvalidValueError: If the category is unknown.
        """
        if category == "electronics":
            return self._electronics
        if category == "groceries":
            return self._groceries
        raise InvalidValueError(
            f"Unknown warehouse category '{category}'. "
            f"Use one of: {', '.join(WAREHOUSE_CATEGORIES)}."
        )

    def seed(
        self,
        seed_data: SeedData | None = None,
        now: datetime | None = None,
    ) -> OperationOutcome:
        """Add starter electronics and groceries.

        Seeding twice reports a duplicate id; items added before the
        duplicate stay in place.
        """
        data = seed_data or default_seed_data(now)
        try:
            for electronic in data.electronics:
                self._electronics.add(electronic)
            for grocery in data.groceries:
                self._groceries.add(grocery)
        except KeepstoreError as error:
            return failed("warehouse_seed", error)
        count = len(data.electronics) + len(data.groceries)
        _LOGGER.info("warehouse_seeded", item_count=count)
        return self._after_change(succeeded(f"Seeded {count} warehouse items."))

    def list_items(self, category: WarehouseCategory) -> OperationOutcome:
        """Return every item of a category, ordered by id."""
        try:
            items = sorted(self.repository(category).get_all(), key=lambda item: item.id)
        except KeepstoreError as error:
            return failed("warehouse_list", error, category=category)
        return succeeded(f"{len(items)} {category} items.", value=items)

    def increase_stock(
        self,
        category: WarehouseCategory,
        item_id: int,
        amount: int,
    ) -> OperationOutcome:
        """Add ``amount`` units to an existing item.

        Args:
            category: Stock category holding the item.
            item_id: Item identifier.
            amount: Positive number of units to add.

        Returns:
            Outcome carrying the updated item on success.
        """
        try:
            if amount <= 0:
                raise InvalidValueError(
                    f"Stock increase must be positive (got {amount} for ID {item_id})."
                )
            updated = adjust_quantity(self.repository(category), item_id, amount)
        except KeepstoreError as error:
            return failed("increase_stock", error, category=category, item_id=item_id)
        _LOGGER.info(
            "stock_increased",
            category=category,
            item_id=item_id,
            quantity=updated.quantity,
        )
        outcome = succeeded(
            f"Stock increased for ID {item_id}. New quantity: {updated.quantity}",
            value=updated,
        )
        return self._after_change(outcome)

    def update_quantity(
        self,
        category: WarehouseCategory,
        item_id: int,
        new_quantity: int,
    ) -> OperationOutcome:
        """Set the stored quantity of an existing item."""
        try:
            updated = set_quantity(self.repository(category), item_id, new_quantity)
        except KeepstoreError as error:
            return failed("update_quantity", error, category=category, item_id=item_id)
        outcome = succeeded(
            f"Quantity for ID {item_id} set to {updated.quantity}.",
            value=updated,
        )
        return self._after_change(outcome)

    def remove_item(self, category: WarehouseCategory, item_id: int) -> OperationOutcome:
        """Remove an item from a category."""
        try:
            self.repository(category).remove(item_id)
        except KeepstoreError as error:
            return failed("remove_item", error, category=category, item_id=item_id)
        _LOGGER.info("stock_item_removed", category=category, item_id=item_id)
        return self._after_change(succeeded(f"Item with ID {item_id} removed."))

    def save(self) -> OperationOutcome:
        """Flush both category snapshots."""
        flush_error = flush_snapshots(self._bindings)
        if flush_error is not None:
            return OperationOutcome(ok=False, message=str(flush_error), error=flush_error)
        return succeeded("Warehouse data saved.")

    def load(self) -> OperationOutcome:
        """Replace both repositories with their persisted snapshots."""
        try:
            replace_all_together(
                [(repository, snapshot_file.load()) for snapshot_file, repository in self._bindings]
            )
        except KeepstoreError as error:
            return failed("warehouse_load", error)
        return succeeded("Warehouse data loaded.")

    def _after_change(self, outcome: OperationOutcome) -> OperationOutcome:
        if not self._autosave:
            return outcome
        return with_flush_error(outcome, flush_snapshots(self._bindings))
