"""Build the configured BlobStorage implementation."""

from cookmeet.application.ports.storage import BlobStorage
from cookmeet.infrastructure.storage.local_storage import LocalBlobStorage
from cookmeet.infrastructure.storage.s3_storage import S3BlobStorage, build_s3_client
from cookmeet_config.settings import Settings


def create_blob_storage(settings: Settings) -> BlobStorage:
    if settings.storage_backend == "s3":
        return S3BlobStorage(
            client=build_s3_client(settings),
            timeout_seconds=settings.storage_timeout_seconds,
            url_expire_seconds=settings.storage_signed_url_expire_days * 24 * 3600,
        )
    return LocalBlobStorage(
        base_dir=settings.storage_local_dir,
        public_base_url=settings.storage_public_base_url,
    )
