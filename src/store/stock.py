"""Quantity mutations for stocked entities.

Quantities change by building a replacement with ``dataclasses.replace``
and storing it through the strict repository update.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Hashable

from core.entity import StockedT
from core.errors import InvalidValueError
from store.repository import Repository


def set_quantity(
    repository: Repository[StockedT],
    entity_id: Hashable,
    new_quantity: int,
) -> StockedT:
    """Store a new quantity for an existing entity.

    Args:
        repository: Repository holding the entity.
        entity_id: Id of the entity to change.
        new_quantity: Quantity to store.

    Returns:
        The stored replacement entity.

    Raises:
        InvalidValueError: If the quantity is negative. Nothing is changed.
        EntityNotFoundError: If the id is absent.
    """
    if new_quantity < 0:
        raise InvalidValueError(
            f"Quantity cannot be negative (got {new_quantity} for ID {entity_id})."
        )
    current = repository.get_by_id(entity_id)
    updated = replace(current, quantity=new_quantity)  # type: ignore[type-var]
    repository.update(entity_id, updated)
    return updated


def adjust_quantity(
    repository: Repository[StockedT],
    entity_id: Hashable,
    delta: int,
) -> StockedT:
    """Add ``delta`` to the stored quantity of an existing entity.

    Raises:
        EntityNotFoundError: If the id is absent.
        InvalidValueError: If the resulting quantity would be negative.
    """
    current = repository.get_by_id(entity_id)
    return set_quantity(repository, entity_id, current.quantity + delta)
