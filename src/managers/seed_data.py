"""Seed data for the built-in domains.

This module provides the default starter records and loads custom seed
records from YAML files with the same payload shape as snapshots.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal
from pathlib import Path
from typing import Any, Mapping, cast

import yaml

from core.errors import SeedFileError
from core.types import (
    ElectronicItem,
    GroceryItem,
    InventoryItem,
    Patient,
    Prescription,
    SeedData,
    Transaction,
)
from store.record_payload import (
    ELECTRONIC_ITEM_CODEC,
    GROCERY_ITEM_CODEC,
    INVENTORY_ITEM_CODEC,
    PATIENT_CODEC,
    PRESCRIPTION_CODEC,
    TRANSACTION_CODEC,
    EntityCodec,
)

_SEED_SECTIONS: dict[str, EntityCodec[Any]] = {
    "electronics": ELECTRONIC_ITEM_CODEC,
    "groceries": GROCERY_ITEM_CODEC,
    "patients": PATIENT_CODEC,
    "prescriptions": PRESCRIPTION_CODEC,
    "inventory": INVENTORY_ITEM_CODEC,
    "transactions": TRANSACTION_CODEC,
}


def default_seed_data(now: datetime | None = None) -> SeedData:
    """Build the starter records for every domain.

    Args:
        now: Reference time for relative dates; current time when omitted.

    Returns:
        Seed data with timestamps relative to ``now``.
    """
    reference = now or datetime.now()
    return SeedData(
        electronics=(
            ElectronicItem(id=1, name="Laptop", quantity=10, brand="Dell", warranty_months=24),
            ElectronicItem(
                id=2, name="Smartphone", quantity=15, brand="Samsung", warranty_months=12
            ),
        ),
        groceries=(
            GroceryItem(
                id=1, name="Rice", quantity=50, expiry_date=reference + timedelta(days=365)
            ),
            GroceryItem(id=2, name="Milk", quantity=20, expiry_date=reference + timedelta(days=10)),
        ),
        patients=(
            Patient(id=1, name="John Doe", age=30, gender="Male"),
            Patient(id=2, name="Jane Smith", age=25, gender="Female"),
            Patient(id=3, name="Michael Brown", age=40, gender="Male"),
        ),
        prescriptions=(
            Prescription(1, 1, "Paracetamol", reference - timedelta(days=10)),
            Prescription(2, 1, "Amoxicillin", reference - timedelta(days=5)),
            Prescription(3, 2, "Ibuprofen", reference - timedelta(days=8)),
            Prescription(4, 3, "Vitamin C", reference - timedelta(days=3)),
            Prescription(5, 2, "Cough Syrup", reference - timedelta(days=1)),
        ),
        inventory=(
            InventoryItem(id=1, name="Stapler", quantity=12, date_added=reference),
            InventoryItem(id=2, name="Printer Paper", quantity=40, date_added=reference),
        ),
        transactions=(
            Transaction(1, reference, Decimal("200.00"), "Groceries"),
            Transaction(2, reference, Decimal("150.00"), "Utilities"),
            Transaction(3, reference, Decimal("500.00"), "Entertainment"),
        ),
    )


def load_seed_file(seed_path: str | Path) -> SeedData:
    """Load seed records from a YAML file.

    Args:
        seed_path: YAML file with optional top-level section lists.

    Returns:
        Parsed seed data; absent sections are empty.

    Raises:
        SeedFileError: If the file is missing, unparsable, or has invalid records.
    """
    seed_file = Path(seed_path).expanduser().resolve()
    payload = _load_yaml_payload(seed_file)
    unknown_sections = sorted(set(payload) - set(_SEED_SECTIONS))
    if unknown_sections:
        raise SeedFileError(
            f"Unknown seed sections in {seed_file}: {', '.join(unknown_sections)}. "
            f"Supported sections: {', '.join(_SEED_SECTIONS)}."
        )
    sections = {
        name: _parse_section(seed_file, name, payload.get(name), codec)
        for name, codec in _SEED_SECTIONS.items()
    }
    return SeedData(**sections)


def _load_yaml_payload(seed_file: Path) -> Mapping[str, object]:
    if not seed_file.exists():
        raise SeedFileError(
            f"Seed file does not exist at {seed_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(object, yaml.safe_load(seed_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise SeedFileError(
            f"Failed to read seed file at {seed_file}: {error}. Check file permissions and retry."
        ) from error
    except yaml.YAMLError as error:
        raise SeedFileError(
            f"Failed to parse YAML seed file at {seed_file}: {error}. Fix YAML syntax and retry."
        ) from error
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise SeedFileError(
            f"Invalid seed file at {seed_file}: expected a mapping of section lists."
        )
    return cast(Mapping[str, object], payload)


def _parse_section(
    seed_file: Path,
    section: str,
    value: object,
    codec: EntityCodec[Any],
) -> tuple[Any, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise SeedFileError(
            f"Invalid seed section '{section}' in {seed_file}: expected a list of records."
        )
    records = []
    for position, entry in enumerate(value):
        if not isinstance(entry, Mapping):
            raise SeedFileError(
                f"Invalid {section} entry #{position} in {seed_file}: expected a mapping."
            )
        try:
            records.append(codec.from_payload(entry))
        except KeyError as error:
            raise SeedFileError(
                f"Invalid {section} entry #{position} in {seed_file}: missing field {error}."
            ) from error
        except (TypeError, ValueError) as error:
            raise SeedFileError(
                f"Invalid {section} entry #{position} in {seed_file}: {error}."
            ) from error
    return tuple(records)
