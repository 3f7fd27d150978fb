"""Unit tests for the keyed entity repository."""

from __future__ import annotations

from datetime import datetime

import pytest

from core.errors import DuplicateKeyError, EntityNotFoundError, InvalidValueError
from core.types import InventoryItem
from store.repository import Repository, replace_all_together


def _item(item_id: int, name: str = "Stapler", quantity: int = 3) -> InventoryItem:
    return InventoryItem(
        id=item_id,
        name=name,
        quantity=quantity,
        date_added=datetime(2024, 1, 2, 9, 30),
    )


def test_add_then_get_by_id_returns_item() -> None:
    """Added entities should be retrievable by id."""
    repository: Repository[InventoryItem] = Repository("item")
    repository.add(_item(1))

    stored = repository.get_by_id(1)

    assert stored == _item(1)


def test_add_duplicate_id_keeps_first_entity() -> None:
    """Second add with the same id should fail and leave the first entity."""
    repository: Repository[InventoryItem] = Repository("item")
    repository.add(_item(1, name="First"))

    with pytest.raises(DuplicateKeyError):
        repository.add(_item(1, name="Second"))

    assert repository.get_by_id(1).name == "First"


def test_get_by_id_raises_for_missing_id() -> None:
    """Lookups for absent ids should raise not-found."""
    repository: Repository[InventoryItem] = Repository("item")

    with pytest.raises(EntityNotFoundError, match="Item with ID 7 not found"):
        repository.get_by_id(7)


def test_remove_then_get_by_id_raises_not_found() -> None:
    """Removed ids should no longer resolve."""
    repository: Repository[InventoryItem] = Repository("item")
    repository.add(_item(1))
    repository.remove(1)

    with pytest.raises(EntityNotFoundError):
        repository.get_by_id(1)

    assert len(repository) == 0


def test_remove_twice_fails_on_second_call() -> None:
    """Removal succeeds once and reports not-found afterwards."""
    repository: Repository[InventoryItem] = Repository("item")
    repository.add(_item(1))
    repository.remove(1)

    with pytest.raises(EntityNotFoundError):
        repository.remove(1)

    assert 1 not in repository


def test_try_remove_reports_presence() -> None:
    """Lenient removal should return whether an entity was deleted."""
    repository: Repository[InventoryItem] = Repository("item")
    repository.add(_item(1))

    results = (repository.try_remove(1), repository.try_remove(1))

    assert results == (True, False)


def test_update_replaces_value_wholesale() -> None:
    """Strict update should store the replacement value."""
    repository: Repository[InventoryItem] = Repository("item")
    repository.add(_item(1, name="Old"))

    repository.update(1, _item(1, name="New", quantity=9))

    assert repository.get_by_id(1) == _item(1, name="New", quantity=9)


def test_update_missing_id_raises_and_creates_nothing() -> None:
    """Strict update on an absent id should fail without inserting."""
    repository: Repository[InventoryItem] = Repository("item")

    with pytest.raises(EntityNotFoundError):
        repository.update(5, _item(5))

    assert 5 not in repository


def test_try_update_missing_id_returns_false_and_creates_nothing() -> None:
    """Lenient update on an absent id should return False without inserting."""
    repository: Repository[InventoryItem] = Repository("item")

    updated = repository.try_update(5, _item(5))

    assert updated is False and len(repository) == 0


def test_update_rejects_replacement_with_different_id() -> None:
    """Replacement values must keep the id they are stored under."""
    repository: Repository[InventoryItem] = Repository("item")
    repository.add(_item(1))

    with pytest.raises(InvalidValueError):
        repository.try_update(1, _item(2))

    assert repository.get_by_id(1) == _item(1)


def test_get_all_returns_defensive_copy() -> None:
    """Mutating the returned snapshot must not affect stored entities."""
    repository: Repository[InventoryItem] = Repository("item")
    repository.add(_item(1))
    snapshot = repository.get_all()

    snapshot.clear()

    assert len(repository.get_all()) == 1


def test_replace_all_swaps_contents() -> None:
    """Bulk replacement should drop old entities and hold only new ones."""
    repository: Repository[InventoryItem] = Repository("item")
    repository.add(_item(1))

    repository.replace_all([_item(2), _item(3)])

    assert sorted(item.id for item in repository.get_all()) == [2, 3]


def test_replace_all_with_duplicates_leaves_repository_unchanged() -> None:
    """A snapshot repeating an id should be rejected as a whole."""
    repository: Repository[InventoryItem] = Repository("item")
    repository.add(_item(1))

    with pytest.raises(DuplicateKeyError):
        repository.replace_all([_item(2), _item(2)])

    assert [item.id for item in repository.get_all()] == [1]


def test_clear_empties_repository() -> None:
    """Clearing should remove every entity."""
    repository: Repository[InventoryItem] = Repository("item")
    repository.add(_item(1))
    repository.add(_item(2))

    repository.clear()

    assert repository.find(1) is None and len(repository) == 0


def test_replace_all_together_leaves_every_repository_unchanged_on_duplicate() -> None:
    """A duplicate in any snapshot should keep all repositories as they were."""
    first: Repository[InventoryItem] = Repository("item")
    second: Repository[InventoryItem] = Repository("item")
    first.add(_item(9))
    second.add(_item(8))

    with pytest.raises(DuplicateKeyError):
        replace_all_together([(first, [_item(1)]), (second, [_item(2), _item(2)])])

    assert [item.id for item in first.get_all()] == [9]
    assert [item.id for item in second.get_all()] == [8]


def test_replace_all_together_swaps_all_contents() -> None:
    """Valid snapshots should replace each repository."""
    first: Repository[InventoryItem] = Repository("item")
    second: Repository[InventoryItem] = Repository("item")
    first.add(_item(9))

    replace_all_together([(first, [_item(1)]), (second, [_item(2)])])

    assert [item.id for item in first.get_all()] == [1] and 2 in second
