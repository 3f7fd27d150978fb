"""Unit tests for default and YAML seed data."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest

from core.errors import SeedFileError
from managers.seed_data import default_seed_data, load_seed_file

_NOW = datetime(2024, 6, 1, 12, 0)


def test_default_seed_dates_are_relative_to_reference() -> None:
    """Starter expiry and issue dates should be offsets from ``now``."""
    seed_data = default_seed_data(_NOW)

    assert seed_data.groceries[1].expiry_date == datetime(2024, 6, 11, 12, 0)
    assert seed_data.prescriptions[4].date_issued == datetime(2024, 5, 31, 12, 0)


def test_load_seed_file_parses_known_sections(tmp_path) -> None:
    """YAML sections should parse into typed records; absent sections stay empty."""
    seed_path = tmp_path / "seed.yaml"
    seed_path.write_text(
        "\n".join(
            [
                "patients:",
                "  - {id: 7, name: Ama Mensah, age: 33, gender: Female}",
                "transactions:",
                "  - {id: 1, date: 2024-05-01, amount: 12.30, category: Food}",
            ]
        ),
        encoding="utf-8",
    )

    seed_data = load_seed_file(seed_path)

    assert seed_data.patients[0].name == "Ama Mensah"
    assert seed_data.transactions[0].amount == Decimal("12.3")
    assert seed_data.transactions[0].date == datetime(2024, 5, 1)
    assert seed_data.electronics == ()


def test_load_seed_file_rejects_unknown_section(tmp_path) -> None:
    """Unknown top-level keys should be reported by name."""
    seed_path = tmp_path / "seed.yaml"
    seed_path.write_text("furniture: []\n", encoding="utf-8")

    with pytest.raises(SeedFileError, match="furniture"):
        load_seed_file(seed_path)


def test_load_seed_file_reports_missing_field(tmp_path) -> None:
    """Records without required fields should fail with their position."""
    seed_path = tmp_path / "seed.yaml"
    seed_path.write_text("inventory:\n  - {id: 1, name: Stapler}\n", encoding="utf-8")

    with pytest.raises(SeedFileError, match="entry #0"):
        load_seed_file(seed_path)


def test_load_seed_file_missing_path(tmp_path) -> None:
    """Missing seed files are errors, unlike missing snapshots."""
    with pytest.raises(SeedFileError, match="does not exist"):
        load_seed_file(tmp_path / "absent.yaml")


def test_load_seed_file_rejects_invalid_yaml(tmp_path) -> None:
    """YAML syntax errors should be wrapped."""
    seed_path = tmp_path / "seed.yaml"
    seed_path.write_text("patients: [\n", encoding="utf-8")

    with pytest.raises(SeedFileError, match="Failed to parse"):
        load_seed_file(seed_path)
