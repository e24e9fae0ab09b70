"""Application services."""

from cookmeet.application.services.authentication_service import (
    AuthenticationService,
)
from cookmeet.application.services.icon_keys import (
    CUISINE_ICON_PREFIX,
    USER_ICON_PREFIX,
    content_addressed_key,
    is_owner_key,
    normalize_key,
    random_icon_key,
)

__all__ = [
    "CUISINE_ICON_PREFIX",
    "USER_ICON_PREFIX",
    "AuthenticationService",
    "content_addressed_key",
    "is_owner_key",
    "normalize_key",
    "random_icon_key",
]
