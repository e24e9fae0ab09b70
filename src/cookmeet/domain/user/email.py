"""Email value object."""

import re
from dataclasses import dataclass

from cookmeet.domain.user.exceptions import InvalidEmailError

# local@host.tld, nothing stricter
_EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
EMAIL_MAX_LENGTH = 255


@dataclass(frozen=True)
class Email:
    """A syntactically valid address, stored lower-cased and trimmed.

    Two spellings of the same address compare equal, which is what the
    uniqueness check on ``users.email`` relies on.
    """

    value: str

    def __post_init__(self) -> None:
        raw = (self.value or "").strip()
        if not raw:
            raise InvalidEmailError("email is required")
        if len(raw) > EMAIL_MAX_LENGTH:
            raise InvalidEmailError(f"limited max {EMAIL_MAX_LENGTH} char")

        canonical = raw.lower()
        if _EMAIL_RE.fullmatch(canonical) is None:
            raise InvalidEmailError("is not a valid email address")

        object.__setattr__(self, "value", canonical)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email({self.value!r})"
