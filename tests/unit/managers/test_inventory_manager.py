"""Unit tests for the inventory log manager."""

from __future__ import annotations

from datetime import datetime

from core.errors import (
    CorruptDataError,
    DuplicateKeyError,
    EntityNotFoundError,
    InvalidValueError,
    StorageIOError,
)
from managers.inventory import InventoryManager

_ADDED = datetime(2024, 2, 29, 16, 45, 12)


class _UnwritableTarget:
    """Snapshot target whose writes always fail."""

    def exists(self) -> bool:
        return False

    def read_text(self, encoding: str | None = None) -> str:
        return ""

    def write_text(self, data: str, encoding: str | None = None) -> int:
        raise PermissionError("read-only volume")


def test_add_and_update_item_replaces_name_and_quantity(tmp_path) -> None:
    """Updating should store a copy with the new name and quantity."""
    manager = InventoryManager(tmp_path / "inventory_data.json")
    manager.add_item(1, "Stapler", 5, date_added=_ADDED)

    outcome = manager.update_item(1, "Heavy Stapler", 7)

    stored = manager.items.get_by_id(1)
    assert outcome.ok and (stored.name, stored.quantity, stored.date_added) == (
        "Heavy Stapler",
        7,
        _ADDED,
    )


def test_update_missing_item_reports_not_found(tmp_path) -> None:
    """Updating an absent id should fail without creating an entry."""
    manager = InventoryManager(tmp_path / "inventory_data.json")

    outcome = manager.update_item(3, "Ghost", 1)

    assert isinstance(outcome.error, EntityNotFoundError) and len(manager.items) == 0


def test_update_with_negative_quantity_is_rejected(tmp_path) -> None:
    """Negative quantities should fail before the stored item changes."""
    manager = InventoryManager(tmp_path / "inventory_data.json")
    manager.add_item(1, "Stapler", 5, date_added=_ADDED)

    outcome = manager.update_item(1, "Stapler", -5)

    assert isinstance(outcome.error, InvalidValueError)
    assert manager.items.get_by_id(1).quantity == 5


def test_add_duplicate_item_is_reported(tmp_path) -> None:
    """Adding an existing id should report a duplicate."""
    manager = InventoryManager(tmp_path / "inventory_data.json")
    manager.add_item(1, "Stapler", 5)

    outcome = manager.add_item(1, "Pens", 2)

    assert isinstance(outcome.error, DuplicateKeyError)


def test_delete_item_reports_missing_id(tmp_path) -> None:
    """Deleting twice should succeed once then report not-found."""
    manager = InventoryManager(tmp_path / "inventory_data.json")
    manager.add_item(1, "Stapler", 5)

    outcomes = (manager.delete_item(1), manager.delete_item(1))

    assert [outcome.ok for outcome in outcomes] == [True, False]


def test_save_and_load_round_trip(tmp_path) -> None:
    """Saved items should reload with identical fields."""
    target = tmp_path / "inventory_data.json"
    manager = InventoryManager(target, autosave=False)
    manager.add_item(1, "Stapler", 5, date_added=_ADDED)
    manager.add_item(2, "Printer Paper", 40, date_added=_ADDED)
    manager.save()
    reloaded = InventoryManager(target)

    outcome = reloaded.load()

    assert outcome.value == 2 and reloaded.list_items() == manager.list_items()


def test_load_missing_file_is_not_an_error(tmp_path) -> None:
    """A first run without a data file should load as empty."""
    manager = InventoryManager(tmp_path / "inventory_data.json")

    outcome = manager.load()

    assert outcome.ok and manager.list_items() == []


def test_failed_flush_keeps_applied_change() -> None:
    """A write fault is reported but the in-memory add is not rolled back."""
    manager = InventoryManager(_UnwritableTarget(), autosave=True)

    outcome = manager.add_item(1, "Stapler", 5)

    assert outcome.ok and isinstance(outcome.flush_error, StorageIOError)
    assert 1 in manager.items


def test_load_non_utf8_file_reports_corrupt_data(tmp_path) -> None:
    """Undecodable snapshot bytes should yield a failed outcome."""
    target = tmp_path / "inventory_data.json"
    target.write_bytes(b'{"records": ["\xff\xfe"]}')

    outcome = InventoryManager(target).load()

    assert not outcome.ok and isinstance(outcome.error, CorruptDataError)
