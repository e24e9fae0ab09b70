"""Ports: interfaces the application needs from the outside world."""

from cookmeet.application.ports.identity import CurrentUser
from cookmeet.application.ports.storage import (
    BlobStorage,
    InvalidStoragePathError,
    StorageError,
)

__all__ = [
    "BlobStorage",
    "CurrentUser",
    "InvalidStoragePathError",
    "StorageError",
]
