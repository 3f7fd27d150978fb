"""Core constants used across Keepstore modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

DEFAULT_DATA_ROOT = Path(".keepstore")
DEFAULT_LOG_LEVEL = "WARNING"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
SNAPSHOT_FORMAT_VERSION = 1
SNAPSHOT_ENCODING = "utf-8"
ELECTRONICS_FILE_NAME = "electronics.json"
GROCERIES_FILE_NAME = "groceries.json"
PATIENTS_FILE_NAME = "patients.json"
PRESCRIPTIONS_FILE_NAME = "prescriptions.json"
INVENTORY_FILE_NAME = "inventory_data.json"
TRANSACTIONS_FILE_NAME = "transactions.json"
WAREHOUSE_CATEGORIES = ("electronics", "groceries")
PAYMENT_CHANNELS = ("bank_transfer", "mobile_money", "crypto_wallet")
DEFAULT_PAYMENT_CHANNEL = "bank_transfer"
DEFAULT_ACCOUNT_NUMBER = "ACC123456"
DEFAULT_OPENING_BALANCE = Decimal("1000.00")
