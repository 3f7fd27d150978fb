"""Generic keyed entity repository.

This module owns the in-memory id-to-entity map for one entity type.
It enforces one entry per id and reports duplicate, missing, and
mismatched-id conditions through typed errors.
"""

from __future__ import annotations

from typing import Any, Generic, Hashable, Iterable

from core.entity import EntityT
from core.errors import DuplicateKeyError, EntityNotFoundError, InvalidValueError


class Repository(Generic[EntityT]):
    """In-memory store keyed by entity id.

    The internal map is the sole source of truth for whether an entity
    exists. Stored values are replaced wholesale, never mutated.
    """

    def __init__(self, entity_name: str = "entity") -> None:
        """Create an empty repository.

        Args:
            entity_name: Display name used in error messages.
        """
        self._entity_name = entity_name
        self._items: dict[Hashable, EntityT] = {}

    @property
    def entity_name(self) -> str:
        return self._entity_name

    def add(self, item: EntityT) -> None:
        """Insert a new entity.

        Args:
            item: Entity to insert.

        Raises:
            DuplicateKeyError: If an entity with the same id exists.
        """
        if item.id in self._items:
            raise DuplicateKeyError(
                f"{self._entity_name.capitalize()} with ID {item.id} already exists."
            )
        self._items[item.id] = item

    def get_by_id(self, entity_id: Hashable) -> EntityT:
        """Return the entity stored under an id.

        Raises:
            EntityNotFoundError: If the id is absent.
        """
        item = self._items.get(entity_id)
        if item is None:
            raise self._not_found(entity_id)
        return item

    def find(self, entity_id: Hashable) -> EntityT | None:
        """Return the entity stored under an id, or None."""
        return self._items.get(entity_id)

    def remove(self, entity_id: Hashable) -> None:
        """Delete the entity stored under an id.

        Raises:
            EntityNotFoundError: If the id is absent.
        """
        if entity_id not in self._items:
            raise self._not_found(entity_id)
        del self._items[entity_id]

    def try_remove(self, entity_id: Hashable) -> bool:
        """Delete the entity stored under an id if present.

        Returns:
            Whether an entity was removed.
        """
        return self._items.pop(entity_id, None) is not None

    def update(self, entity_id: Hashable, new_value: EntityT) -> None:
        """Replace an existing entity wholesale.

        Args:
            entity_id: Id of the entity to replace.
            new_value: Replacement value carrying the same id.

        Raises:
            EntityNotFoundError: If the id is absent.
            InvalidValueError: If the replacement carries a different id.
        """
        if not self.try_update(entity_id, new_value):
            raise self._not_found(entity_id)

    def try_update(self, entity_id: Hashable, new_value: EntityT) -> bool:
        """Replace an existing entity wholesale if present.

        Returns:
            Whether a replacement occurred. Absent ids never gain an entry.

        Raises:
            InvalidValueError: If the replacement carries a different id.
        """
        if new_value.id != entity_id:
            raise InvalidValueError(
                f"Cannot store {self._entity_name} with ID {new_value.id} under ID {entity_id}. "
                "Replacement values must keep their original ID."
            )
        if entity_id not in self._items:
            return False
        self._items[entity_id] = new_value
        return True

    def get_all(self) -> list[EntityT]:
        """Return a snapshot copy of all stored entities."""
        return list(self._items.values())

    def replace_all(self, items: Iterable[EntityT]) -> None:
        """Swap the whole contents for a new entity sequence.

        Args:
            items: Entities to hold after the call.

        Raises:
            DuplicateKeyError: If ``items`` repeat an id. Contents are unchanged.
        """
        self._items = self._build_replacement(items)

    def clear(self) -> None:
        """Remove every stored entity."""
        self._items = {}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._items

    def _build_replacement(self, items: Iterable[EntityT]) -> dict[Hashable, EntityT]:
        replacement: dict[Hashable, EntityT] = {}
        for item in items:
            if item.id in replacement:
                raise DuplicateKeyError(
                    f"{self._entity_name.capitalize()} with ID {item.id} appears more than once "
                    "in the loaded snapshot. Remove the duplicate entry and reload."
                )
            replacement[item.id] = item
        return replacement

    def _not_found(self, entity_id: Hashable) -> EntityNotFoundError:
        return EntityNotFoundError(
            f"{self._entity_name.capitalize()} with ID {entity_id} not found."
        )


def replace_all_together(loads: Iterable[tuple[Repository[Any], Iterable[Any]]]) -> None:
    """Replace several repositories as one unit.

    Every replacement map is validated before any repository is swapped, so
    a duplicate id in one snapshot leaves all of them unchanged.

    Args:
        loads: Pairs of repository and the entities it should hold.

    Raises:
        DuplicateKeyError: If any snapshot repeats an id.
    """
    staged = [(repository, repository._build_replacement(items)) for repository, items in loads]
    for repository, replacement in staged:
        repository._items = replacement
