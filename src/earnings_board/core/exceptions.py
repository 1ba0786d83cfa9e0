"""Custom exceptions for Earnings Board."""

from __future__ import annotations

from pathlib import Path


class EarningsBoardError(Exception):
    """Base exception for all Earnings Board errors."""

    def __init__(self, message: str, *args: object) -> None:
        self.message = message
        super().__init__(message, *args)


# Provider errors
class FetchError(EarningsBoardError):
    """The earnings calendar could not be fetched or did not parse as records."""

    def __init__(self, message: str, from_date: str, to_date: str) -> None:
        self.from_date = from_date
        self.to_date = to_date
        super().__init__(message)


# Processing errors
class TransformError(EarningsBoardError):
    """Raw records could not be grouped or flattened into cards."""


# Storage errors
class StorageError(EarningsBoardError):
    """Base error for the snapshot store."""

    def __init__(self, message: str, path: Path) -> None:
        self.path = path
        super().__init__(message)


class CacheLoadError(StorageError):
    """Persisted snapshot is unreadable or corrupt."""


class CacheWriteError(StorageError):
    """Snapshot could not be written."""
