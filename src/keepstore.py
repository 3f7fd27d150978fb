"""Public SDK surface for Keepstore.

This module provides a stable import path for library users.
It re-exports the repository core, the managers, and typed models.
"""

from __future__ import annotations

from core.config import KeepstoreConfig
from core.errors import (
    CorruptDataError,
    DuplicateKeyError,
    EntityNotFoundError,
    InvalidValueError,
    KeepstoreError,
    StorageIOError,
)
from core.types import (
    ElectronicItem,
    GroceryItem,
    InventoryItem,
    OperationOutcome,
    Patient,
    Prescription,
    SeedData,
    Transaction,
)
from managers.client import KeepstoreClient
from managers.healthcare import HealthcareManager
from managers.inventory import InventoryManager
from managers.ledger import LedgerManager
from managers.seed_data import default_seed_data, load_seed_file
from managers.warehouse import WarehouseManager
from store.derived_index import DerivedIndex, group_records
from store.record_payload import EntityCodec
from store.repository import Repository
from store.snapshot_io import JsonSnapshotFile
from store.stock import adjust_quantity, set_quantity

__all__ = [
    "CorruptDataError",
    "DerivedIndex",
    "DuplicateKeyError",
    "ElectronicItem",
    "EntityCodec",
    "EntityNotFoundError",
    "GroceryItem",
    "HealthcareManager",
    "InvalidValueError",
    "InventoryItem",
    "InventoryManager",
    "JsonSnapshotFile",
    "KeepstoreClient",
    "KeepstoreConfig",
    "KeepstoreError",
    "LedgerManager",
    "OperationOutcome",
    "Patient",
    "Prescription",
    "Repository",
    "SeedData",
    "StorageIOError",
    "Transaction",
    "WarehouseManager",
    "adjust_quantity",
    "default_seed_data",
    "group_records",
    "load_seed_file",
    "set_quantity",
]
