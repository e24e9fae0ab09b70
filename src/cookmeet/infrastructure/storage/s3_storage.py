"""S3-compatible blob storage using boto3."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, Callable, Optional
from urllib.parse import unquote, urlsplit

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from cookmeet.application.ports.storage import (
    BlobStorage,
    InvalidStoragePathError,
    StorageError,
)
from cookmeet.application.services.icon_keys import normalize_key

if TYPE_CHECKING:
    from cookmeet_config.settings import Settings

logger = logging.getLogger(__name__)

CACHE_CONTROL = "public, max-age=86400"


def build_s3_client(settings: Settings) -> Any:
    """Create an S3 client from settings, with bounded network timeouts."""
    kwargs: dict[str, Any] = {
        "service_name": "s3",
        "config": Config(
            connect_timeout=settings.storage_timeout_seconds,
            read_timeout=settings.storage_timeout_seconds,
            retries={"max_attempts": 2},
        ),
    }
    if settings.s3_region:
        kwargs["region_name"] = settings.s3_region
    if settings.s3_endpoint_url:
        kwargs["endpoint_url"] = settings.s3_endpoint_url
    if settings.s3_access_key_id and settings.s3_secret_access_key:
        kwargs.update(
            aws_access_key_id=settings.s3_access_key_id,
            aws_secret_access_key=settings.s3_secret_access_key.get_secret_value(),
        )
    return boto3.client(**kwargs)


class S3BlobStorage(BlobStorage):
    """Blob storage on an S3 bucket.

    boto3 is synchronous; each call runs in a worker thread and is
    bounded by ``timeout_seconds``. ``put`` returns a presigned GET URL.
    """

    def __init__(
        self,
        client: Any,
        timeout_seconds: float = 30.0,
        url_expire_seconds: int = 7 * 24 * 3600,
    ) -> None:
        self._client = client
        self._timeout = timeout_seconds
        self._url_expire_seconds = url_expire_seconds

    async def _call(self, func: Callable[..., Any], **kwargs: Any) -> Any:
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(func, **kwargs),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            msg = f"storage call timed out after {self._timeout}s"
            raise StorageError(msg, key=kwargs.get("Key")) from e
        except (BotoCoreError, ClientError) as e:
            msg = f"storage call failed: {e}"
            raise StorageError(msg, key=kwargs.get("Key")) from e

    async def put(
        self,
        bucket: str,
        key: str,
        data: bytes,
        content_type: str,
    ) -> str:
        key = normalize_key(key)
        await self._call(
            self._client.put_object,
            Bucket=bucket,
            Key=key,
            Body=data,
            ContentType=content_type,
            CacheControl=CACHE_CONTROL,
        )
        url = await self._call(
            self._client.generate_presigned_url,
            ClientMethod="get_object",
            Params={"Bucket": bucket, "Key": key},
            ExpiresIn=self._url_expire_seconds,
        )
        logger.debug("Uploaded %d bytes to s3://%s/%s", len(data), bucket, key)
        return url

    async def delete(self, bucket: str, key: str) -> None:
        await self._call(
            self._client.delete_object,
            Bucket=bucket,
            Key=normalize_key(key),
        )

    def key_for_url(self, bucket: str, url: str) -> Optional[str]:
        """Recover the key from a virtual-hosted or path-style object URL."""
        if not url:
            return None
        parts = urlsplit(url)
        path = unquote(parts.path).lstrip("/")
        if parts.netloc.startswith(f"{bucket}."):
            key = path
        elif path.startswith(f"{bucket}/"):
            key = path[len(bucket) + 1 :]
        else:
            return None
        try:
            return normalize_key(key)
        except InvalidStoragePathError:
            return None
