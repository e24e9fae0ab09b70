"""Filesystem-backed blob storage for development and tests."""

import logging
from pathlib import Path
from typing import Optional
from urllib.parse import quote, unquote, urlsplit

import aiofiles
import aiofiles.os

from cookmeet.application.ports.storage import (
    BlobStorage,
    InvalidStoragePathError,
    StorageError,
)
from cookmeet.application.services.icon_keys import normalize_key

logger = logging.getLogger(__name__)


class LocalBlobStorage(BlobStorage):
    """Store objects as files under ``<base_dir>/<bucket>/<key>``.

    Returned URLs are ``<public_base_url>/<bucket>/<key>``; the API
    serves ``base_dir`` as static files so those URLs resolve.
    """

    def __init__(self, base_dir: Path | str, public_base_url: str) -> None:
        self._base_dir = Path(base_dir).resolve()
        self._public_base_url = public_base_url.rstrip("/")

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def _resolve(self, bucket: str, key: str) -> Path:
        normalized = normalize_key(key)
        root = (self._base_dir / normalize_key(bucket)).resolve()
        path = (root / normalized).resolve()
        if not path.is_relative_to(root):
            raise InvalidStoragePathError(key)
        return path

    async def put(
        self,
        bucket: str,
        key: str,
        data: bytes,
        content_type: str,
    ) -> str:
        path = self._resolve(bucket, key)
        try:
            await aiofiles.os.makedirs(path.parent, exist_ok=True)
            async with aiofiles.open(path, "wb") as f:
                await f.write(data)
        except OSError as e:
            msg = f"failed to write object {key}"
            raise StorageError(msg, key=key) from e

        logger.debug("Stored %d bytes (%s) at %s", len(data), content_type, path)
        return f"{self._public_base_url}/{quote(bucket)}/{quote(normalize_key(key))}"

    async def delete(self, bucket: str, key: str) -> None:
        path = self._resolve(bucket, key)
        try:
            await aiofiles.os.remove(path)
        except OSError as e:
            msg = f"failed to delete object {key}"
            raise StorageError(msg, key=key) from e

    def key_for_url(self, bucket: str, url: str) -> Optional[str]:
        prefix = f"{self._public_base_url}/{quote(bucket)}/"
        if not url or not url.startswith(prefix):
            return None
        key = unquote(urlsplit(url[len(prefix) :]).path)
        try:
            return normalize_key(key)
        except InvalidStoragePathError:
            return None
