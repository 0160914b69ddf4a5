"""
Password hashing and verification.

Uses bcrypt for password hashing with automatic salting and a
configurable work factor.
"""

import bcrypt

DEFAULT_ROUNDS = 10


class BcryptPasswordHasher:
    """bcrypt-backed implementation of IPasswordHasher."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, raw: str) -> str:
        """Hash a password with bcrypt (auto-salted)."""
        return bcrypt.hashpw(raw.encode(), bcrypt.gensalt(rounds=self._rounds)).decode()

    def verify(self, raw: str, digest: str) -> bool:
        """Constant-time comparison against a bcrypt hash."""
        try:
            return bcrypt.checkpw(raw.encode(), digest.encode())
        except (ValueError, TypeError):
            return False
