"""Derived secondary indexes over repository snapshots.

This module groups a snapshot by a secondary key and orders each group.
An index caches a projection only; it goes stale when the repository
changes and is rebuilt explicitly by its owner.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Generic, Hashable, Iterable, Iterator, TypeVar

KeyT = TypeVar("KeyT", bound=Hashable)
ItemT = TypeVar("ItemT")


def group_records(
    snapshot: Iterable[ItemT],
    group_key_of: Callable[[ItemT], KeyT],
    sort_key_of: Callable[[ItemT], Any],
    descending: bool = False,
) -> dict[KeyT, tuple[ItemT, ...]]:
    """Group records by key and sort each group.

    Args:
        snapshot: Records to group.
        group_key_of: Extracts the grouping key from a record.
        sort_key_of: Extracts the ordering key within a group.
        descending: Order groups largest-first when true.

    Returns:
        Mapping from group key to its ordered records. Groups are never empty.
    """
    buckets: dict[KeyT, list[ItemT]] = {}
    for record in snapshot:
        buckets.setdefault(group_key_of(record), []).append(record)
    return {
        key: tuple(sorted(members, key=sort_key_of, reverse=descending))
        for key, members in buckets.items()
    }


def chronological_key(value: datetime) -> datetime:
    """Sort key that orders naive and timezone-aware datetimes together.

    Aware values are converted to naive local time; naive values are taken
    as local time already.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


class DerivedIndex(Generic[KeyT, ItemT]):
    """Read-optimized grouping rebuilt from full snapshots."""

    def __init__(
        self,
        group_key_of: Callable[[ItemT], KeyT],
        sort_key_of: Callable[[ItemT], Any],
        descending: bool = False,
    ) -> None:
        self._group_key_of = group_key_of
        self._sort_key_of = sort_key_of
        self._descending = descending
        self._groups: dict[KeyT, tuple[ItemT, ...]] = {}

    def rebuild(self, snapshot: Iterable[ItemT]) -> None:
        """Replace the whole index with groups computed from ``snapshot``."""
        self._groups = group_records(
            snapshot,
            self._group_key_of,
            self._sort_key_of,
            descending=self._descending,
        )

    def lookup(self, key: KeyT) -> tuple[ItemT, ...] | None:
        """Return the ordered group for ``key``, or None when it has no members."""
        return self._groups.get(key)

    def keys(self) -> list[KeyT]:
        return list(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __contains__(self, key: object) -> bool:
        return key in self._groups

    def __iter__(self) -> Iterator[KeyT]:
        return iter(list(self._groups))
