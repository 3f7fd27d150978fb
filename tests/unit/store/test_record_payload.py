"""Unit tests for entity payload parsing."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from core.types import Transaction
from store.record_payload import (
    grocery_item_from_payload,
    parse_datetime,
    parse_decimal,
    transaction_to_payload,
)


def test_transaction_payload_keeps_decimal_as_string() -> None:
    """Decimal amounts should serialize without float conversion."""
    transaction = Transaction(1, datetime(2024, 1, 1), Decimal("10.10"), "Utilities")

    payload = transaction_to_payload(transaction)

    assert payload["amount"] == "10.10"


def test_parse_decimal_from_float_uses_shortest_repr() -> None:
    """Float inputs such as YAML scalars should keep their written digits."""
    assert parse_decimal(12.3, "amount") == Decimal("12.3")


def test_parse_decimal_rejects_non_finite_values() -> None:
    """NaN and infinity are not valid amounts."""
    with pytest.raises(ValueError):
        parse_decimal("NaN", "amount")


def test_parse_datetime_accepts_plain_dates() -> None:
    """Date values should become midnight datetimes."""
    assert parse_datetime(date(2025, 1, 31), "expiry_date") == datetime(2025, 1, 31)


def test_grocery_payload_with_bad_quantity_raises_value_error() -> None:
    """Non-integer quantities should fail parsing."""
    payload = {"id": 1, "name": "Rice", "quantity": "lots", "expiry_date": "2025-01-01"}

    with pytest.raises(ValueError, match="quantity"):
        grocery_item_from_payload(payload)
