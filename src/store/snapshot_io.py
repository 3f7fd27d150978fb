"""JSON snapshot persistence for repositories.

This module writes a repository's full snapshot as one JSON document and
reads it back. A missing target is a first run and loads as empty.
"""

from __future__ import annotations

import json
from typing import Any, Generic, Iterable, Protocol

from core.constants import SNAPSHOT_ENCODING, SNAPSHOT_FORMAT_VERSION
from core.entity import EntityT
from core.errors import CorruptDataError, StorageIOError
from core.logging_config import get_logger
from store.record_payload import EntityCodec

_LOGGER = get_logger(__name__)


class SnapshotTarget(Protocol):
    """Text storage location; ``pathlib.Path`` satisfies this protocol."""

    def exists(self) -> bool: ...

    def read_text(self, encoding: str | None = None) -> str: ...

    def write_text(self, data: str, encoding: str | None = None) -> int: ...


class JsonSnapshotFile(Generic[EntityT]):
    """Full-collection JSON persistence for one entity type."""

    def __init__(self, target: SnapshotTarget, codec: EntityCodec[EntityT]) -> None:
        """Bind a storage target to an entity codec.

        Args:
            target: Location supplied by the caller, usually a Path.
            codec: Payload converters for the stored entity type.
        """
        self._target = target
        self._codec = codec

    @property
    def target(self) -> SnapshotTarget:
        return self._target

    def save(self, records: Iterable[EntityT]) -> int:
        """Write a complete snapshot document.

        Args:
            records: Snapshot to persist, in the order it should be stored.

        Returns:
            Number of records written.

        Raises:
            StorageIOError: If the target cannot be written.
        """
        payloads = [self._codec.to_payload(record) for record in records]
        document = {
            "entity": self._codec.entity_name,
            "format_version": SNAPSHOT_FORMAT_VERSION,
            "records": payloads,
        }
        body = json.dumps(document, indent=2, ensure_ascii=False) + "\n"
        try:
            self._target.write_text(body, encoding=SNAPSHOT_ENCODING)
        except OSError as error:
            raise StorageIOError(
                f"Failed to write {self._codec.entity_name} snapshot to {self._target}: {error}. "
                "Check the data directory permissions and save again."
            ) from error
        _LOGGER.info(
            "snapshot_saved",
            entity=self._codec.entity_name,
            target=str(self._target),
            record_count=len(payloads),
        )
        return len(payloads)

    def load(self) -> list[EntityT]:
        """Read every record from the snapshot document.

        Returns:
            Parsed records in stored order; empty when the target is missing.

        Raises:
            CorruptDataError: If the document or a record is malformed.
            StorageIOError: If the target exists but cannot be read.
        """
        try:
            if not self._target.exists():
                _LOGGER.info(
                    "snapshot_missing",
                    entity=self._codec.entity_name,
                    target=str(self._target),
                )
                return []
            body = self._target.read_text(encoding=SNAPSHOT_ENCODING)
        except OSError as error:
            raise StorageIOError(
                f"Failed to read {self._codec.entity_name} snapshot at {self._target}: {error}. "
                "Check the data directory permissions and load again."
            ) from error
        except UnicodeDecodeError as error:
            raise CorruptDataError(
                f"Failed to parse {self._codec.entity_name} snapshot at {self._target}: "
                f"not valid {SNAPSHOT_ENCODING} text ({error.reason} at byte {error.start}). "
                "Restore the file from a backup or delete it to start empty."
            ) from error
        records = [
            self._parse_record(payload, position)
            for position, payload in enumerate(self._record_payloads(body))
        ]
        _LOGGER.info(
            "snapshot_loaded",
            entity=self._codec.entity_name,
            target=str(self._target),
            record_count=len(records),
        )
        return records

    def _record_payloads(self, body: str) -> list[Any]:
        """Parse the document and return its raw record list."""
        try:
            document = json.loads(body)
        except json.JSONDecodeError as error:
            raise CorruptDataError(
                f"Failed to parse {self._codec.entity_name} snapshot at {self._target}: "
                f"{error.msg} (line {error.lineno}, column {error.colno}). "
                "Restore the file from a backup or delete it to start empty."
            ) from error
        if isinstance(document, list):
            return document
        if not isinstance(document, dict) or not isinstance(document.get("records"), list):
            raise CorruptDataError(
                f"Failed to parse {self._codec.entity_name} snapshot at {self._target}: "
                "expected a JSON object with a 'records' list."
            )
        entity_name = document.get("entity", self._codec.entity_name)
        if entity_name != self._codec.entity_name:
            raise CorruptDataError(
                f"Snapshot at {self._target} holds '{entity_name}' records, "
                f"expected '{self._codec.entity_name}'. Check the configured file names."
            )
        return document["records"]

    def _parse_record(self, payload: Any, position: int) -> EntityT:
        """Convert one raw record payload into an entity."""
        if not isinstance(payload, dict):
            raise CorruptDataError(
                f"Invalid {self._codec.entity_name} record #{position} in {self._target}: "
                "expected JSON object."
            )
        try:
            return self._codec.from_payload(payload)
        except KeyError as error:
            raise CorruptDataError(
                f"Invalid {self._codec.entity_name} record #{position} in {self._target}: "
                f"missing field {error}."
            ) from error
        except (TypeError, ValueError) as error:
            raise CorruptDataError(
                f"Invalid {self._codec.entity_name} record #{position} in {self._target}: {error}."
            ) from error
