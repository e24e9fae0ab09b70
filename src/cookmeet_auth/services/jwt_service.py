"""Signed session tokens (HS256 JWT) carried in the ``token`` cookie."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from cookmeet_auth.exceptions import InvalidTokenError
from cookmeet_auth.schemas import TokenPayload


class JWTService:
    """Issue and check access tokens.

    The token holds the user id as a string ``sub`` claim plus ``iat``
    and ``exp``. Nothing else about the user is embedded.

    Examples
    --------
    >>> tokens = JWTService(secret_key="change-me")
    >>> tokens.verify_token(tokens.create_access_token(user_id=7)).user_id
    7
    """

    ALGORITHM = "HS256"
    DEFAULT_LIFETIME_HOURS = 12

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = DEFAULT_LIFETIME_HOURS,
    ):
        """
        Parameters
        ----------
        secret_key
            HMAC key; an empty key is refused
        access_token_expire_hours
            Lifetime of tokens from ``create_access_token``
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)
        self._key = secret_key
        self._lifetime = timedelta(hours=access_token_expire_hours)

    @property
    def access_token_lifetime(self) -> timedelta:
        return self._lifetime

    def create_access_token(
        self,
        user_id: int,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        issued_at = datetime.now(tz=timezone.utc)
        claims = {
            "sub": str(user_id),
            "iat": issued_at,
            "exp": issued_at + (expires_delta or self._lifetime),
        }
        return jwt.encode(claims, self._key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Decode ``token`` after checking signature and expiry.

        Raises
        ------
        InvalidTokenError
            Bad signature, expired, or missing/non-numeric ``sub``
        """
        try:
            claims = jwt.decode(
                token,
                self._key,
                algorithms=[self.ALGORITHM],
                options={"require": ["sub", "exp"]},
            )
            expires = datetime.fromtimestamp(claims["exp"], tz=timezone.utc)
            issued = claims.get("iat")
            return TokenPayload(
                user_id=int(claims["sub"]),
                issued_at=(
                    datetime.fromtimestamp(issued, tz=timezone.utc)
                    if issued is not None
                    else expires
                ),
                exp=expires,
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.PyJWTError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
