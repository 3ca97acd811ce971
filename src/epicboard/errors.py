"""Exception types raised by the data layer and storage backends."""

from __future__ import annotations


class EpicboardError(Exception):
    """Base exception for recoverable epicboard errors."""


class NotFoundError(EpicboardError):
    """Raised when a referenced epic or story does not exist."""


class StorageError(EpicboardError):
    """Base exception for storage backend failures."""


class StorageIOError(StorageError):
    """Raised when the backing store cannot be read or written."""


class StorageFormatError(StorageError):
    """Raised when persisted content does not match the state schema."""


class IntegrityError(Exception):
    """Raised when the stored state contradicts its own invariants.

    Deliberately outside :class:`EpicboardError`; the console loop does not
    catch it.
    """


class ConfigError(EpicboardError):
    """Raised when a configuration value is unusable."""
