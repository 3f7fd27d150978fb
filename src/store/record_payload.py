"""Entity payload serialization.

This module converts built-in entities to and from JSON-safe dictionaries.
Datetimes travel as ISO-8601 strings and decimals as exact strings, so a
save/load cycle reproduces every field.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Generic, Mapping

from core.entity import EntityT
from core.types import (
    ElectronicItem,
    GroceryItem,
    InventoryItem,
    Patient,
    Prescription,
    Transaction,
)


@dataclass(frozen=True)
class EntityCodec(Generic[EntityT]):
    """Named payload converter pair for one entity type.

    Attributes:
        entity_name: Name written into snapshot documents.
        to_payload: Converts an entity into a JSON-safe dictionary.
        from_payload: Converts a parsed mapping back into an entity.
    """

    entity_name: str
    to_payload: Callable[[EntityT], dict[str, object]]
    from_payload: Callable[[Mapping[str, Any]], EntityT]


def electronic_item_to_payload(item: ElectronicItem) -> dict[str, object]:
    return {
        "id": item.id,
        "name": item.name,
        "quantity": item.quantity,
        "brand": item.brand,
        "warranty_months": item.warranty_months,
    }


def electronic_item_from_payload(payload: Mapping[str, Any]) -> ElectronicItem:
    return ElectronicItem(
        id=_parse_int(payload["id"], "id"),
        name=str(payload["name"]),
        quantity=_parse_int(payload["quantity"], "quantity"),
        brand=str(payload["brand"]),
        warranty_months=_parse_int(payload["warranty_months"], "warranty_months"),
    )


def grocery_item_to_payload(item: GroceryItem) -> dict[str, object]:
    return {
        "id": item.id,
        "name": item.name,
        "quantity": item.quantity,
        "expiry_date": item.expiry_date.isoformat(),
    }


def grocery_item_from_payload(payload: Mapping[str, Any]) -> GroceryItem:
    return GroceryItem(
        id=_parse_int(payload["id"], "id"),
        name=str(payload["name"]),
        quantity=_parse_int(payload["quantity"], "quantity"),
        expiry_date=parse_datetime(payload["expiry_date"], "expiry_date"),
    )


def patient_to_payload(patient: Patient) -> dict[str, object]:
    return {
        "id": patient.id,
        "name": patient.name,
        "age": patient.age,
        "gender": patient.gender,
    }


def patient_from_payload(payload: Mapping[str, Any]) -> Patient:
    return Patient(
        id=_parse_int(payload["id"], "id"),
        name=str(payload["name"]),
        age=_parse_int(payload["age"], "age"),
        gender=str(payload["gender"]),
    )


def prescription_to_payload(prescription: Prescription) -> dict[str, object]:
    return {
        "id": prescription.id,
        "patient_id": prescription.patient_id,
        "medication_name": prescription.medication_name,
        "date_issued": prescription.date_issued.isoformat(),
    }


def prescription_from_payload(payload: Mapping[str, Any]) -> Prescription:
    return Prescription(
        id=_parse_int(payload["id"], "id"),
        patient_id=_parse_int(payload["patient_id"], "patient_id"),
        medication_name=str(payload["medication_name"]),
        date_issued=parse_datetime(payload["date_issued"], "date_issued"),
    )


def inventory_item_to_payload(item: InventoryItem) -> dict[str, object]:
    return {
        "id": item.id,
        "name": item.name,
        "quantity": item.quantity,
        "date_added": item.date_added.isoformat(),
    }


def inventory_item_from_payload(payload: Mapping[str, Any]) -> InventoryItem:
    return InventoryItem(
        id=_parse_int(payload["id"], "id"),
        name=str(payload["name"]),
        quantity=_parse_int(payload["quantity"], "quantity"),
        date_added=parse_datetime(payload["date_added"], "date_added"),
    )


def transaction_to_payload(transaction: Transaction) -> dict[str, object]:
    return {
        "id": transaction.id,
        "date": transaction.date.isoformat(),
        "amount": str(transaction.amount),
        "category": transaction.category,
    }


def transaction_from_payload(payload: Mapping[str, Any]) -> Transaction:
    return Transaction(
        id=_parse_int(payload["id"], "id"),
        date=parse_datetime(payload["date"], "date"),
        amount=parse_decimal(payload["amount"], "amount"),
        category=str(payload["category"]),
    )


ELECTRONIC_ITEM_CODEC: EntityCodec[ElectronicItem] = EntityCodec(
    "electronic_item", electronic_item_to_payload, electronic_item_from_payload
)
GROCERY_ITEM_CODEC: EntityCodec[GroceryItem] = EntityCodec(
    "grocery_item", grocery_item_to_payload, grocery_item_from_payload
)
PATIENT_CODEC: EntityCodec[Patient] = EntityCodec(
    "patient", patient_to_payload, patient_from_payload
)
PRESCRIPTION_CODEC: EntityCodec[Prescription] = EntityCodec(
    "prescription", prescription_to_payload, prescription_from_payload
)
INVENTORY_ITEM_CODEC: EntityCodec[InventoryItem] = EntityCodec(
    "inventory_item", inventory_item_to_payload, inventory_item_from_payload
)
TRANSACTION_CODEC: EntityCodec[Transaction] = EntityCodec(
    "transaction", transaction_to_payload, transaction_from_payload
)


def parse_datetime(value: object, field_name: str) -> datetime:
    """Parse an ISO string or date value into a datetime.

    Args:
        value: ISO-8601 string, datetime, or date.
        field_name: Field name for error messages.

    Returns:
        Parsed datetime.

    Raises:
        ValueError: If the value is not a recognizable timestamp.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError as error:
            raise ValueError(f"Invalid {field_name}: '{value}' is not an ISO timestamp") from error
    raise ValueError(f"Invalid {field_name}: expected timestamp, got {type(value).__name__}")


def parse_decimal(value: object, field_name: str) -> Decimal:
    """Parse a string or number into an exact Decimal.

    Floats are converted through their shortest repr so ``12.3`` stays ``12.3``.

    Raises:
        ValueError: If the value is not a finite decimal number.
    """
    if isinstance(value, bool) or not isinstance(value, (str, int, float, Decimal)):
        raise ValueError(f"Invalid {field_name}: expected decimal, got {type(value).__name__}")
    try:
        parsed = Decimal(str(value))
    except InvalidOperation as error:
        raise ValueError(f"Invalid {field_name}: '{value}' is not a decimal number") from error
    if not parsed.is_finite():
        raise ValueError(f"Invalid {field_name}: '{value}' is not a finite decimal number")
    return parsed


def _parse_int(value: object, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"Invalid {field_name}: expected integer, got {type(value).__name__}")
    try:
        return int(value)
    except ValueError as error:
        raise ValueError(f"Invalid {field_name}: '{value}' is not an integer") from error
