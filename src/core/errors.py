"""Keepstore exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Repositories, persistence, and configuration each raise a specific type.
"""

from __future__ import annotations


class KeepstoreError(Exception):
    """Base exception for all Keepstore failures."""


class DuplicateKeyError(KeepstoreError):
    """Raised when an entity id is already present in a repository."""


class EntityNotFoundError(KeepstoreError):
    """Raised when an entity id is absent from a repository."""


class InvalidValueError(KeepstoreError):
    """Raised when a value violates a domain constraint."""


class CorruptDataError(KeepstoreError):
    """Raised when a persisted snapshot cannot be parsed."""


class StorageIOError(KeepstoreError):
    """Raised when a snapshot target cannot be read or written."""


class ConfigError(KeepstoreError):
    """Raised for invalid runtime configuration."""


class SeedFileError(KeepstoreError):
    """Raised for unreadable or invalid seed files."""
