"""Unit tests for quantity mutations."""

from __future__ import annotations

import pytest

from core.errors import EntityNotFoundError, InvalidValueError
from core.types import ElectronicItem
from store.repository import Repository
from store.stock import adjust_quantity, set_quantity


def _electronics() -> Repository[ElectronicItem]:
    repository: Repository[ElectronicItem] = Repository("electronic item")
    repository.add(ElectronicItem(1, "Laptop", 10, "Dell", 24))
    repository.add(ElectronicItem(2, "Smartphone", 15, "Samsung", 12))
    return repository


def test_set_quantity_stores_replacement() -> None:
    """Setting a quantity should store a copy with the new value."""
    repository = _electronics()

    updated = set_quantity(repository, 1, 4)

    assert updated.quantity == 4 and repository.get_by_id(1).brand == "Dell"


def test_set_quantity_rejects_negative_before_mutation() -> None:
    """Negative quantities should fail and keep the original value."""
    repository = _electronics()

    with pytest.raises(InvalidValueError):
        set_quantity(repository, 1, -5)

    assert repository.get_by_id(1).quantity == 10


def test_set_quantity_rejects_negative_for_missing_id() -> None:
    """Quantity validation runs before the existence check."""
    repository = _electronics()

    with pytest.raises(InvalidValueError):
        set_quantity(repository, 99, -1)

    assert 99 not in repository


def test_set_quantity_raises_for_missing_id() -> None:
    """Valid quantities on absent ids should report not-found."""
    repository = _electronics()

    with pytest.raises(EntityNotFoundError):
        set_quantity(repository, 99, 3)

    assert len(repository) == 2


def test_adjust_quantity_adds_delta() -> None:
    """Adjusting should add the delta to the stored quantity."""
    repository = _electronics()

    adjust_quantity(repository, 1, 5)

    assert repository.get_by_id(1).quantity == 15


def test_adjust_quantity_below_zero_is_rejected() -> None:
    """Deltas that would make stock negative should fail without change."""
    repository = _electronics()

    with pytest.raises(InvalidValueError):
        adjust_quantity(repository, 2, -20)

    assert repository.get_by_id(2).quantity == 15
