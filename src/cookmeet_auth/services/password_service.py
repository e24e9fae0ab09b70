"""bcrypt password hashing."""

import bcrypt

from cookmeet_auth.exceptions import WeakPasswordError

_ENCODING = "utf-8"


class PasswordHashingService:
    """Hash and check passwords with bcrypt.

    The cost factor defaults to 10, which is what stored hashes carry in
    their ``$2b$10$`` prefix. Tests pass a lower value to stay fast.

    Examples
    --------
    >>> hasher = PasswordHashingService(rounds=4)
    >>> stored = hasher.hash("secret-pass")
    >>> hasher.verify("secret-pass", stored)
    True
    """

    MIN_LENGTH = 6
    # bcrypt ignores everything past 72 bytes; recent releases raise instead
    MAX_BYTES = 72

    def __init__(self, rounds: int = 10):
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """Return the bcrypt hash of ``password`` as text.

        Raises
        ------
        WeakPasswordError
            If the password is empty, too short or longer than 72 bytes.
        """
        self.validate_strength(password)
        digest = bcrypt.hashpw(
            password.encode(_ENCODING),
            bcrypt.gensalt(rounds=self._rounds),
        )
        return digest.decode(_ENCODING)

    def verify(self, password: str, password_hash: str) -> bool:
        """True when ``password`` matches; a corrupt hash counts as no match."""
        try:
            return bcrypt.checkpw(
                password.encode(_ENCODING),
                password_hash.encode(_ENCODING),
            )
        except (ValueError, TypeError):
            return False

    def validate_strength(self, password: str) -> None:
        if not password:
            raise WeakPasswordError("Password cannot be empty")
        if len(password) < self.MIN_LENGTH:
            raise WeakPasswordError(
                f"Password must be at least {self.MIN_LENGTH} characters",
            )
        if len(password.encode(_ENCODING)) > self.MAX_BYTES:
            raise WeakPasswordError(f"Password cannot exceed {self.MAX_BYTES} bytes")
