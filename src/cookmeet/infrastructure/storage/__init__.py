"""Blob storage adapters."""

from cookmeet.infrastructure.storage.factory import create_blob_storage
from cookmeet.infrastructure.storage.local_storage import LocalBlobStorage
from cookmeet.infrastructure.storage.s3_storage import S3BlobStorage, build_s3_client

__all__ = [
    "LocalBlobStorage",
    "S3BlobStorage",
    "build_s3_client",
    "create_blob_storage",
]
