from __future__ import annotations

import asyncio
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import jwt
from seatsync.core.config import get_settings
from seatsync.domain.email import Email
from seatsync.domain.errors import ConflictError, PersistenceError
from seatsync.domain.models import UserAccount
from seatsync.domain.roles import RoleCode
from seatsync.infrastructure.security import BcryptPasswordHasher

# Minimum bcrypt cost keeps route tests fast
TEST_HASHER = BcryptPasswordHasher(rounds=4)


def make_token(user_id: UUID | str, *, expires_in: int = 3600, secret: str | None = None) -> str:
    """Sign a bearer token the way the upstream identity provider does."""
    settings = get_settings()
    now = datetime.now(UTC)
    payload = {
        "sub": str(user_id),
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(seconds=expires_in)).timestamp()),
    }
    return jwt.encode(payload, secret or settings.jwt_secret, algorithm=settings.jwt_algorithm)


def auth_headers(user_id: UUID | str) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(user_id)}"}


def customer_account(
    *,
    user_id: UUID | None = None,
    full_name: str = "Default Customer",
    email: str = "customer@example.com",
    password_hash: str = "hash123",
) -> UserAccount:
    return UserAccount(
        user_id=user_id or uuid4(),
        full_name=full_name,
        email=Email.of(email),
        password_hash=password_hash,
        roles=frozenset({RoleCode.ROLE_CUSTOMER}),
    )


def staff_account(
    *,
    user_id: UUID | None = None,
    full_name: str = "Default Staff",
    email: str = "staff@example.com",
    password_hash: str = "hash123",
) -> UserAccount:
    return UserAccount(
        user_id=user_id or uuid4(),
        full_name=full_name,
        email=Email.of(email),
        password_hash=password_hash,
        roles=frozenset({RoleCode.ROLE_STAFF, RoleCode.ROLE_CUSTOMER}),
    )


def admin_account(
    *,
    user_id: UUID | None = None,
    full_name: str = "Default Admin",
    email: str = "admin@example.com",
    password_hash: str = "hash123",
) -> UserAccount:
    return UserAccount(
        user_id=user_id or uuid4(),
        full_name=full_name,
        email=Email.of(email),
        password_hash=password_hash,
        roles=frozenset({RoleCode.ROLE_ADMIN, RoleCode.ROLE_STAFF, RoleCode.ROLE_CUSTOMER}),
    )


class FakePasswordHasher:
    """Deterministic, obviously-not-plaintext hasher that records its inputs."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def encode(self, raw: str) -> str:
        self.calls.append(raw)
        return f"fake-hash${len(self.calls)}${raw[::-1]}"


class InMemoryAccountRepository:
    """Account store with a storage-level unique email check, like the SQL table.

    ``check_barrier`` holds every caller inside ``exists_by_email`` until all
    parties have checked, so racing registrations all miss the pre-check.
    """

    def __init__(self, *, check_barrier: asyncio.Barrier | None = None) -> None:
        self.accounts: dict[UUID, UserAccount] = {}
        self.calls: list[str] = []
        self.check_barrier = check_barrier
        self._lock = asyncio.Lock()

    async def save(self, account: UserAccount) -> UserAccount:
        self.calls.append("save")
        async with self._lock:
            for existing in self.accounts.values():
                if existing.email == account.email and existing.user_id != account.user_id:
                    raise ConflictError("Email already registered")
            self.accounts[account.user_id] = account
        return account

    async def find_by_email(self, email: str) -> UserAccount | None:
        self.calls.append("find_by_email")
        return next((a for a in self.accounts.values() if a.email.value == email), None)

    async def exists_by_email(self, email: str) -> bool:
        self.calls.append("exists_by_email")
        found = any(a.email.value == email for a in self.accounts.values())
        if self.check_barrier is not None:
            await self.check_barrier.wait()
        return found

    async def find_by_id(self, user_id: UUID) -> UserAccount | None:
        self.calls.append("find_by_id")
        return self.accounts.get(user_id)


class UnavailableAccountRepository(InMemoryAccountRepository):
    """In-memory store whose named operations fail as if the database were down."""

    def __init__(self, *failing: str) -> None:
        super().__init__()
        self.failing = set(failing)

    def _fail_if_down(self, operation: str) -> None:
        if operation in self.failing:
            raise PersistenceError(f"{operation} failed: database unavailable")

    async def save(self, account: UserAccount) -> UserAccount:
        self._fail_if_down("save")
        return await super().save(account)

    async def find_by_email(self, email: str) -> UserAccount | None:
        self._fail_if_down("find_by_email")
        return await super().find_by_email(email)

    async def exists_by_email(self, email: str) -> bool:
        self._fail_if_down("exists_by_email")
        return await super().exists_by_email(email)

    async def find_by_id(self, user_id: UUID) -> UserAccount | None:
        self._fail_if_down("find_by_id")
        return await super().find_by_id(user_id)
