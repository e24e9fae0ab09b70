"""Object key derivation for icon uploads.

Every key produced here is normalized and guaranteed to stay inside
the bucket root; anything else raises InvalidStoragePathError.
"""

import hashlib
import posixpath
import uuid

from cookmeet.application.ports.storage import InvalidStoragePathError

RANDOM_ICON_PREFIX = "images"
USER_ICON_PREFIX = "icons"
CUISINE_ICON_PREFIX = "cuisine_icons"


def icon_extension(filename: str) -> str:
    """Lower-cased extension of the uploaded filename, dot included."""
    basename = posixpath.basename((filename or "").replace("\\", "/"))
    return posixpath.splitext(basename)[1].lower()


def normalize_key(key: str) -> str:
    normalized = posixpath.normpath(key) if key else ""
    if (
        not normalized
        or normalized == "."
        or normalized.startswith("/")
        or normalized == ".."
        or normalized.startswith("../")
    ):
        raise InvalidStoragePathError(key)
    return normalized


def random_icon_key(owner_id: int, filename: str) -> str:
    return normalize_key(
        f"{RANDOM_ICON_PREFIX}/{owner_id}/{uuid.uuid4()}{icon_extension(filename)}",
    )


def content_addressed_key(
    prefix: str,
    owner_id: int,
    data: bytes,
    filename: str,
) -> str:
    """Key derived from the owner and the sha256 of the image bytes.

    The same image uploaded twice by one owner maps to the same key, so
    re-uploads overwrite rather than accumulate. Other owners never
    share it.
    """
    digest = hashlib.sha256(data).hexdigest()
    return normalize_key(
        f"{prefix}/{owner_id}/{digest}{icon_extension(filename)}",
    )


def is_owner_key(key: str, owner_id: int) -> bool:
    """True when ``key`` lives in one of ``owner_id``'s cuisine icon namespaces."""
    return any(
        key.startswith(f"{prefix}/{owner_id}/")
        for prefix in (RANDOM_ICON_PREFIX, CUISINE_ICON_PREFIX)
    )
