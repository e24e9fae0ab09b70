"""Data carried between the auth services and their callers."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenPayload:
    """Claims of a verified access token; ``user_id`` is the ``sub`` claim."""

    user_id: int
    issued_at: datetime
    exp: datetime
