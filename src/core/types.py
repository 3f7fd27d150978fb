"""Shared typed models.

This module defines the immutable entities stored in repositories and the
outcome value returned by manager verbs.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Literal

from core.errors import KeepstoreError

WarehouseCategory = Literal["electronics", "groceries"]
PaymentChannel = Literal["bank_transfer", "mobile_money", "crypto_wallet"]


@dataclass(frozen=True)
class ElectronicItem:
    """Electronic stock line held in the warehouse.

    Attributes:
        id: Unique item identifier.
        name: Product name.
        quantity: Units in stock.
        brand: Manufacturer brand.
        warranty_months: Warranty length in months.
    """

    id: int
    name: str
    quantity: int
    brand: str
    warranty_months: int


@dataclass(frozen=True)
class GroceryItem:
    """Perishable stock line held in the warehouse.

    Attributes:
        id: Unique item identifier.
        name: Product name.
        quantity: Units in stock.
        expiry_date: Date after which the item must not be sold.
    """

    id: int
    name: str
    quantity: int
    expiry_date: datetime


@dataclass(frozen=True)
class Patient:
    """Registered patient."""

    id: int
    name: str
    age: int
    gender: str


@dataclass(frozen=True)
class Prescription:
    """Medication issued to a patient.

    Attributes:
        id: Unique prescription identifier.
        patient_id: Owning patient id, used as the grouping key.
        medication_name: Prescribed medication.
        date_issued: Issue timestamp, used for newest-first ordering.
    """

    id: int
    patient_id: int
    medication_name: str
    date_issued: datetime


@dataclass(frozen=True)
class InventoryItem:
    """Logged inventory entry."""

    id: int
    name: str
    quantity: int
    date_added: datetime


@dataclass(frozen=True)
class Transaction:
    """Debit applied to a savings account.

    Attributes:
        id: Unique transaction identifier.
        date: Booking timestamp.
        amount: Exact decimal amount debited.
        category: Spending category, used as the grouping key.
    """

    id: int
    date: datetime
    amount: Decimal
    category: str


@dataclass(frozen=True)
class SeedData:
    """Initial entities for every domain.

    Each field is applied by the manager that owns the matching repository.
    """

    electronics: tuple[ElectronicItem, ...] = ()
    groceries: tuple[GroceryItem, ...] = ()
    patients: tuple[Patient, ...] = ()
    prescriptions: tuple[Prescription, ...] = ()
    inventory: tuple[InventoryItem, ...] = ()
    transactions: tuple[Transaction, ...] = ()


@dataclass(frozen=True)
class OperationOutcome:
    """Result of one manager verb.

    Attributes:
        ok: Whether the verb applied its change.
        message: Human-readable summary for display.
        error: Domain error that prevented the change, if any.
        value: Entity or collection produced by the verb, if any.
        flush_error: Persistence failure after an applied change, if any.
    """

    ok: bool
    message: str
    error: KeepstoreError | None = None
    value: object | None = None
    flush_error: KeepstoreError | None = None
