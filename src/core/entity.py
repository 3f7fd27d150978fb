"""Entity capability contracts.

Repositories accept any value exposing a stable ``id``; quantity
mutations additionally need a ``quantity`` field on a dataclass.
"""

from __future__ import annotations

from typing import Hashable, Protocol, TypeVar


class Identified(Protocol):
    """Anything with a stable, hashable identity."""

    @property
    def id(self) -> Hashable: ...


class Stocked(Identified, Protocol):
    """Identified entity carrying an integer stock quantity."""

    @property
    def quantity(self) -> int: ...


EntityT = TypeVar("EntityT", bound=Identified)
StockedT = TypeVar("StockedT", bound=Stocked)
