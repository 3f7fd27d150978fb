"""Outcome construction and snapshot flushing shared by managers.

Manager verbs never let a KeepstoreError escape; these helpers turn
errors into logged, typed outcomes and flush repositories best-effort.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Iterable

from core.errors import KeepstoreError
from core.logging_config import get_logger
from core.types import OperationOutcome
from store.repository import Repository
from store.snapshot_io import JsonSnapshotFile

_LOGGER = get_logger(__name__)

SnapshotBinding = tuple[JsonSnapshotFile[Any], Repository[Any]]


def succeeded(message: str, value: object | None = None) -> OperationOutcome:
    """Build a successful outcome."""
    return OperationOutcome(ok=True, message=message, value=value)


def failed(action: str, error: KeepstoreError, **fields: object) -> OperationOutcome:
    """Log a rejected verb and build its failed outcome.

    Args:
        action: Verb name recorded in the log event.
        error: Domain error that stopped the verb.
        fields: Extra structured log fields.

    Returns:
        Failed outcome carrying the error and its message.
    """
    _LOGGER.warning(
        "operation_failed",
        action=action,
        error_type=type(error).__name__,
        error=str(error),
        **fields,
    )
    return OperationOutcome(ok=False, message=str(error), error=error)


def flush_snapshots(bindings: Iterable[SnapshotBinding]) -> KeepstoreError | None:
    """Save every bound repository snapshot.

    Returns:
        The first persistence error, or None when every save succeeded.
    """
    first_error: KeepstoreError | None = None
    for snapshot_file, repository in bindings:
        try:
            snapshot_file.save(repository.get_all())
        except KeepstoreError as error:
            _LOGGER.error(
                "snapshot_flush_failed",
                entity=repository.entity_name,
                error=str(error),
            )
            if first_error is None:
                first_error = error
    return first_error


def with_flush_error(
    outcome: OperationOutcome,
    flush_error: KeepstoreError | None,
) -> OperationOutcome:
    """Attach a persistence failure to an already-applied outcome."""
    if flush_error is None:
        return outcome
    return replace(
        outcome,
        message=f"{outcome.message} Saving failed: {flush_error}",
        flush_error=flush_error,
    )
