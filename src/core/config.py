"""Runtime configuration model for Keepstore.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import DEFAULT_DATA_ROOT, DEFAULT_LOG_LEVEL, SUPPORTED_LOG_LEVELS
from core.errors import ConfigError

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class KeepstoreConfig:
    """Validated runtime configuration.

    Attributes:
        data_root: Local directory holding one snapshot file per repository.
        autosave: Whether managers flush to disk after every mutating verb.
        log_level: Minimum level emitted by structured logging.
    """

    data_root: Path
    autosave: bool
    log_level: str

    @classmethod
    def from_env(cls) -> "KeepstoreConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            ConfigError: If environment values are invalid.
        """
        data_root_value = os.getenv("KEEPSTORE_DATA_ROOT", str(DEFAULT_DATA_ROOT))
        autosave = _parse_autosave(os.getenv("KEEPSTORE_AUTOSAVE", "true"))
        log_level = _parse_log_level(os.getenv("KEEPSTORE_LOG_LEVEL", DEFAULT_LOG_LEVEL))
        return cls(
            data_root=Path(data_root_value).expanduser().resolve(),
            autosave=autosave,
            log_level=log_level,
        )


def _parse_autosave(raw_value: str) -> bool:
    """Parse the autosave environment flag.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed boolean flag.

    Raises:
        ConfigError: If value is not a recognized boolean word.
    """
    normalized = raw_value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigError(
        "Invalid KEEPSTORE_AUTOSAVE value: "
        f"expected one of {', '.join(_TRUE_VALUES + _FALSE_VALUES)}, got '{raw_value}'. "
        "Set KEEPSTORE_AUTOSAVE to true or false."
    )


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value."""
    normalized = raw_value.strip().upper()
    if normalized not in SUPPORTED_LOG_LEVELS:
        raise ConfigError(
            "Invalid KEEPSTORE_LOG_LEVEL value: "
            f"expected one of {', '.join(SUPPORTED_LOG_LEVELS)}, got '{raw_value}'. "
            "Set KEEPSTORE_LOG_LEVEL to a supported level name."
        )
    return normalized
