"""Collaborator contracts consumed by the account core."""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from seatsync.domain.models import UserAccount


class PasswordHasher(Protocol):
    """One-way, salted transform from a plaintext secret to a storable hash."""

    def encode(self, raw: str) -> str:
        """Return a hash of ``raw``; repeated calls may differ because of salting."""


class AccountRepository(Protocol):
    """Account persistence contract."""

    async def save(self, account: UserAccount) -> UserAccount:
        """Insert or update the account.

        Raises ConflictError when the email is already taken by another account,
        PersistenceError on any other storage failure.
        """

    async def find_by_email(self, email: str) -> UserAccount | None:
        """Return the account registered with exactly this email, or None."""

    async def exists_by_email(self, email: str) -> bool:
        """Return whether an account is registered with exactly this email."""

    async def find_by_id(self, user_id: UUID) -> UserAccount | None:
        """Return the account with this identifier, or None."""
