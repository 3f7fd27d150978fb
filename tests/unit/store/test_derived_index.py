"""Unit tests for derived secondary indexes."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from core.types import Prescription
from store.derived_index import DerivedIndex, chronological_key, group_records


def _prescriptions() -> list[Prescription]:
    return [
        Prescription(1, 1, "Paracetamol", datetime(2024, 3, 1)),
        Prescription(2, 1, "Amoxicillin", datetime(2024, 3, 6)),
        Prescription(3, 2, "Ibuprofen", datetime(2024, 3, 3)),
        Prescription(4, 3, "Vitamin C", datetime(2024, 3, 8)),
        Prescription(5, 2, "Cough Syrup", datetime(2024, 3, 10)),
    ]


def _prescription_index() -> DerivedIndex[int, Prescription]:
    return DerivedIndex(
        group_key_of=lambda item: item.patient_id,
        sort_key_of=lambda item: item.date_issued,
        descending=True,
    )


def test_group_records_orders_groups_newest_first() -> None:
    """Groups should be sorted by the sort key, descending when requested."""
    groups = group_records(
        _prescriptions(),
        lambda item: item.patient_id,
        lambda item: item.date_issued,
        descending=True,
    )

    assert [item.id for item in groups[2]] == [5, 3]


def test_group_records_ascending_by_default() -> None:
    """Groups should be sorted ascending without the descending flag."""
    groups = group_records(_prescriptions(), lambda item: item.patient_id, lambda item: item.id)

    assert [item.id for item in groups[1]] == [1, 2]


def test_lookup_returns_none_for_missing_group() -> None:
    """Keys without members should be absent rather than empty."""
    index = _prescription_index()
    index.rebuild(_prescriptions())

    assert index.lookup(42) is None and 42 not in index


def test_rebuild_is_pure_function_of_snapshot() -> None:
    """Rebuilding twice from one snapshot should give identical groupings."""
    snapshot = _prescriptions()
    index = _prescription_index()
    index.rebuild(snapshot)
    first = {key: index.lookup(key) for key in index.keys()}

    index.rebuild(snapshot)
    second = {key: index.lookup(key) for key in index.keys()}

    assert first == second


def test_rebuild_replaces_previous_groups() -> None:
    """A rebuild should drop groups that the new snapshot no longer implies."""
    index = _prescription_index()
    index.rebuild(_prescriptions())

    index.rebuild(_prescriptions()[:2])

    assert index.keys() == [1] and len(index) == 1


def test_index_goes_stale_until_rebuilt() -> None:
    """The index reflects only the snapshot it was built from."""
    snapshot = _prescriptions()
    index = _prescription_index()
    index.rebuild(snapshot)

    snapshot.append(Prescription(6, 4, "Zinc", datetime(2024, 3, 11)))

    assert index.lookup(4) is None


def test_chronological_key_orders_mixed_awareness() -> None:
    """Naive and aware timestamps should sort together without errors."""
    aware = datetime(2000, 1, 1, tzinfo=timezone(timedelta(hours=3)))
    naive = datetime(2030, 1, 1)

    ordered = sorted([naive, aware], key=chronological_key)

    assert ordered == [aware, naive]
