"""Python SDK entry point for domain managers.

This module builds managers whose snapshot files live under the configured
data root and loads any existing snapshots on creation.
"""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal
from pathlib import Path

from core.config import KeepstoreConfig
from core.constants import (
    DEFAULT_OPENING_BALANCE,
    ELECTRONICS_FILE_NAME,
    GROCERIES_FILE_NAME,
    INVENTORY_FILE_NAME,
    PATIENTS_FILE_NAME,
    PRESCRIPTIONS_FILE_NAME,
    TRANSACTIONS_FILE_NAME,
)
from core.errors import StorageIOError
from core.logging_config import get_logger
from core.types import OperationOutcome
from managers.healthcare import HealthcareManager
from managers.inventory import InventoryManager
from managers.ledger import LedgerManager
from managers.warehouse import WarehouseManager

_LOGGER = get_logger(__name__)


class KeepstoreClient:
    """Primary SDK entry point for file-backed managers."""

    def __init__(self, config: KeepstoreConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or KeepstoreConfig.from_env()

    @property
    def config(self) -> KeepstoreConfig:
        return self._config

    def warehouse(self) -> tuple[WarehouseManager, OperationOutcome]:
        """Build the warehouse manager and load its snapshots.

        Returns:
            Pair of manager and load outcome.
        """
        data_root = self._ensure_data_root()
        manager = WarehouseManager(
            electronics_target=data_root / ELECTRONICS_FILE_NAME,
            groceries_target=data_root / GROCERIES_FILE_NAME,
            autosave=self._config.autosave,
        )
        return manager, manager.load()

    def healthcare(self) -> tuple[HealthcareManager, OperationOutcome]:
        """Build the healthcare manager and load its snapshots."""
        data_root = self._ensure_data_root()
        manager = HealthcareManager(
            patients_target=data_root / PATIENTS_FILE_NAME,
            prescriptions_target=data_root / PRESCRIPTIONS_FILE_NAME,
            autosave=self._config.autosave,
        )
        return manager, manager.load()

    def inventory(self) -> tuple[InventoryManager, OperationOutcome]:
        """Build the inventory manager and load its snapshot."""
        data_root = self._ensure_data_root()
        manager = InventoryManager(
            data_root / INVENTORY_FILE_NAME,
            autosave=self._config.autosave,
        )
        return manager, manager.load()

    def ledger(
        self,
        opening_balance: Decimal = DEFAULT_OPENING_BALANCE,
    ) -> tuple[LedgerManager, OperationOutcome]:
        """Build the ledger manager and load its snapshot."""
        data_root = self._ensure_data_root()
        manager = LedgerManager(
            data_root / TRANSACTIONS_FILE_NAME,
            opening_balance=opening_balance,
            autosave=self._config.autosave,
        )
        return manager, manager.load()

    def with_data_root(self, data_root: str) -> "KeepstoreClient":
        """Clone the client with a different local data root.

        Args:
            data_root: New data root path.

        Returns:
            New SDK client instance.
        """
        resolved_root = Path(data_root).expanduser().resolve()
        return KeepstoreClient(replace(self._config, data_root=resolved_root))

    def _ensure_data_root(self) -> Path:
        """Create the data root directory if missing.

        Raises:
            StorageIOError: If the directory cannot be created.
        """
        data_root = self._config.data_root
        try:
            data_root.mkdir(parents=True, exist_ok=True)
        except OSError as error:
            raise StorageIOError(
                f"Failed to create data directory {data_root}: {error}. "
                "Set KEEPSTORE_DATA_ROOT to a writable location."
            ) from error
        _LOGGER.debug("data_root_ready", data_root=str(data_root))
        return data_root
