"""CurrentUser - the application's view of the authenticated user."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CurrentUser:
    """Immutable representation of the current authenticated user.

    Repositories are constructed with one of these and scope every
    statement to ``user_id``.
    """

    user_id: int
    email: str

    def __str__(self) -> str:
        return f"CurrentUser({self.email})"
