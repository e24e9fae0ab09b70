"""Blob storage port for icon images."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from cookmeet.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ValidationError,
)


class StorageError(DomainException):
    """Raised when the object store rejects or times out an operation."""

    def __init__(self, message: str, key: Optional[str] = None) -> None:
        self.key = key
        super().__init__(
            message,
            code=ErrorCode.STORAGE_FAILED,
            details={"key": key} if key else None,
        )


class InvalidStoragePathError(ValidationError):
    """Raised when a derived object key would escape the storage root."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(
            "invalid icon path",
            code=ErrorCode.INVALID_STORAGE_PATH,
            details={"key": key},
        )


class BlobStorage(ABC):
    """Object store holding uploaded icons.

    Keys are relative, slash-separated paths inside a bucket.
    """

    @abstractmethod
    async def put(
        self,
        bucket: str,
        key: str,
        data: bytes,
        content_type: str,
    ) -> str:
        """Store ``data`` under ``key`` and return a URL clients can fetch."""

    @abstractmethod
    async def delete(self, bucket: str, key: str) -> None:
        """Remove the object stored under ``key``."""

    @abstractmethod
    def key_for_url(self, bucket: str, url: str) -> Optional[str]:
        """Return the key a URL from ``put`` points at, or None if foreign."""
