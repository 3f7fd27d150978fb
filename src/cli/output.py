"""Console rendering of manager outcomes for the Keepstore CLI."""

from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from core.types import OperationOutcome


class SavingManager(Protocol):
    """Manager exposing an explicit snapshot flush."""

    def save(self) -> OperationOutcome: ...


def emit_outcome(outcome: OperationOutcome) -> int:
    """Print an outcome message and map it to an exit code."""
    if outcome.ok:
        print(outcome.message)
        return 0 if outcome.flush_error is None else 1
    print(f"error={outcome.message}")
    return 1


def emit_rows(rows: Iterable[Sequence[object]]) -> None:
    """Print tab-separated rows."""
    for row in rows:
        print("\t".join(str(value) for value in row))


def finish_mutation(manager: SavingManager, outcome: OperationOutcome, autosave: bool) -> int:
    """Report a mutating verb and flush when autosave did not.

    Args:
        manager: Manager that applied the verb.
        outcome: Verb outcome.
        autosave: Whether the manager already flushed after the verb.

    Returns:
        Process exit code.
    """
    exit_code = emit_outcome(outcome)
    if exit_code != 0 or autosave:
        return exit_code
    return emit_outcome(manager.save())
