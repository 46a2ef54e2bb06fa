from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from functools import lru_cache

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from seatsync.core.auth import TokenError, decode_access_token, subject_as_user_id
from seatsync.core.config import get_settings
from seatsync.domain.models import UserAccount
from seatsync.domain.ports import AccountRepository, PasswordHasher
from seatsync.domain.services.registration import RegisterUserUseCase
from seatsync.infrastructure.db.session import get_session
from seatsync.infrastructure.repositories.user_accounts import SqlAlchemyAccountRepository
from seatsync.infrastructure.security import BcryptPasswordHasher
from sqlalchemy.ext.asyncio import AsyncSession

bearer_scheme = HTTPBearer(auto_error=False)


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """Provide an async SQLAlchemy session for API handlers."""
    async for session in get_session():
        yield session


def get_account_repository(
    session: AsyncSession = Depends(get_db_session),  # noqa: B008
) -> AccountRepository:
    return SqlAlchemyAccountRepository(session)


@lru_cache
def _bcrypt_hasher(rounds: int) -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=rounds)


def get_password_hasher() -> PasswordHasher:
    return _bcrypt_hasher(get_settings().bcrypt_rounds)


def get_register_user_use_case(
    repository: AccountRepository = Depends(get_account_repository),  # noqa: B008
    hasher: PasswordHasher = Depends(get_password_hasher),  # noqa: B008
) -> RegisterUserUseCase:
    return RegisterUserUseCase(repository, hasher)


async def get_current_account(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),  # noqa: B008
    repository: AccountRepository = Depends(get_account_repository),  # noqa: B008
) -> UserAccount:
    """Resolve the authenticated account from a bearer token.

    Roles are read from the stored account rather than from token claims, so
    capability checks always reflect the current role set.
    """
    if credentials is None:
        raise _unauthorized("Missing bearer token")

    try:
        payload = decode_access_token(credentials.credentials)
        user_id = subject_as_user_id(payload)
    except TokenError as exc:
        raise _unauthorized(str(exc)) from exc

    account = await repository.find_by_id(user_id)
    if account is None:
        raise _unauthorized("Unknown account")

    return account


def require_capability(
    check: Callable[[UserAccount], bool], detail: str
) -> Callable[[UserAccount], UserAccount]:
    """Dependency factory enforcing a capability check on the current account."""

    def dependency(account: UserAccount = Depends(get_current_account)) -> UserAccount:  # noqa: B008
        if not check(account):
            raise _forbidden(detail)
        return account

    return dependency


require_staff = require_capability(UserAccount.is_staff, "Staff privileges required")
require_admin = require_capability(UserAccount.is_admin, "Admin privileges required")


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _forbidden(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)
