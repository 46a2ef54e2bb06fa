"""bcrypt implementation of the PasswordHasher port."""

from __future__ import annotations

from passlib.context import CryptContext


class BcryptPasswordHasher:
    """Salted bcrypt hashing via passlib; output is always 60 characters."""

    def __init__(self, rounds: int = 12) -> None:
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def encode(self, raw: str) -> str:
        return self._context.hash(raw)

    def verify(self, raw: str, hashed: str) -> bool:
        """Check ``raw`` against a hash produced by :meth:`encode`."""
        return self._context.verify(raw, hashed)
