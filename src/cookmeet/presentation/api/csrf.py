"""Double-submit-cookie CSRF protection.

Every response to a client without a ``_csrf`` cookie carries a fresh
token. Unsafe methods must echo the cookie value in ``X-CSRF-Token``;
a missing header yields 403 CSRF_MISSING, a mismatch 403 CSRF_INVALID.
"""

from __future__ import annotations

import logging
import secrets
from typing import TYPE_CHECKING

from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from cookmeet.presentation.api.exception_handlers import create_error_response

if TYPE_CHECKING:
    from starlette.types import ASGIApp

    from cookmeet_config.settings import Settings

logger = logging.getLogger(__name__)

CSRF_COOKIE = "_csrf"
HEADER_NAME = "X-CSRF-Token"
SAFE_METHODS = {"GET", "HEAD", "OPTIONS", "TRACE"}
TOKEN_BYTES = 32


def generate_token() -> str:
    return secrets.token_urlsafe(TOKEN_BYTES)


def get_csrf_token(request: Request) -> str:
    """Token bound to this request, issued by the middleware if needed."""
    token = getattr(request.state, "csrf_token", None)
    if token is None:
        token = request.cookies.get(CSRF_COOKIE) or generate_token()
        request.state.csrf_token = token
    return token


def tokens_match(expected: str, supplied: str) -> bool:
    return secrets.compare_digest(expected.encode(), supplied.encode())


class CSRFMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, settings: Settings) -> None:
        super().__init__(app)
        self._settings = settings

    def _set_csrf_cookie(self, response: Response, token: str) -> None:
        response.set_cookie(
            key=CSRF_COOKIE,
            value=token,
            httponly=True,
            secure=self._settings.api_cookie_secure,
            samesite=self._settings.api_cookie_samesite,
            max_age=self._settings.cookie_max_age_seconds,
            path="/",
            domain=self._settings.api_cookie_domain,
        )

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        cookie_token = request.cookies.get(CSRF_COOKIE)

        if request.method.upper() not in SAFE_METHODS:
            supplied = request.headers.get(HEADER_NAME)
            if not supplied:
                logger.warning(
                    "CSRF token missing on %s %s",
                    request.method,
                    request.url.path,
                )
                return create_error_response(
                    status.HTTP_403_FORBIDDEN,
                    "missing csrf token",
                    "CSRF_MISSING",
                )
            if not cookie_token or not tokens_match(cookie_token, supplied):
                logger.warning(
                    "CSRF token mismatch on %s %s",
                    request.method,
                    request.url.path,
                )
                return create_error_response(
                    status.HTTP_403_FORBIDDEN,
                    "invalid csrf token",
                    "CSRF_INVALID",
                )

        request.state.csrf_token = cookie_token or generate_token()
        response = await call_next(request)
        if not cookie_token:
            self._set_csrf_cookie(response, request.state.csrf_token)
        return response
