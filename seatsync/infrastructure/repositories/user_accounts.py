"""SQLAlchemy-backed account repository."""

from __future__ import annotations

from collections.abc import Iterable
from uuid import UUID

import structlog
from seatsync.domain.email import Email
from seatsync.domain.errors import ConflictError, PersistenceError
from seatsync.domain.models import UserAccount
from seatsync.domain.roles import RoleCode
from seatsync.infrastructure.db.models import RoleModel, UserAccountModel
from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

logger = structlog.get_logger()

EMAIL_CONSTRAINT = "uq_user_account_email"
SQLITE_EMAIL_UNIQUE = "UNIQUE constraint failed: user_account.email"


def to_domain(row: UserAccountModel) -> UserAccount:
    return UserAccount(
        user_id=UUID(row.user_id),
        full_name=row.full_name,
        email=Email.of(row.email),
        password_hash=row.password_hash,
        roles=frozenset(RoleCode.parse(role.name) for role in row.roles),
    )


def _is_email_conflict(exc: IntegrityError) -> bool:
    # Postgres reports the constraint name, SQLite only the column
    message = str(exc.orig)
    return EMAIL_CONSTRAINT in message or SQLITE_EMAIL_UNIQUE in message


class SqlAlchemyAccountRepository:
    """Stores accounts in the user_account table.

    Email uniqueness is backed by the ``uq_user_account_email`` constraint, so a
    duplicate that slips past a caller's existence check is still rejected here.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, account: UserAccount) -> UserAccount:
        try:
            roles = await self._load_roles(account.roles)

            row = await self.session.get(UserAccountModel, str(account.user_id))
            if row is None:
                row = UserAccountModel(user_id=str(account.user_id))
                self.session.add(row)

            row.full_name = account.full_name
            row.email = account.email.value
            row.password_hash = account.password_hash
            row.roles = roles

            await self.session.commit()
        except PersistenceError:
            await self.session.rollback()
            raise
        except IntegrityError as exc:
            await self.session.rollback()
            if _is_email_conflict(exc):
                await logger.awarning(
                    "account_save_conflict",
                    user_id=str(account.user_id),
                    email=account.email.value,
                )
                raise ConflictError("Email already registered") from exc
            await logger.aerror("account_save_failed", user_id=str(account.user_id), error=str(exc))
            raise PersistenceError("Failed to store account") from exc
        except SQLAlchemyError as exc:
            await self.session.rollback()
            await logger.aerror("account_save_failed", user_id=str(account.user_id), error=str(exc))
            raise PersistenceError("Failed to store account") from exc

        await logger.ainfo("account_saved", user_id=str(account.user_id))
        return account

    async def find_by_email(self, email: str) -> UserAccount | None:
        stmt = select(UserAccountModel).where(UserAccountModel.email == email)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise PersistenceError("Failed to load account") from exc

        row = result.scalar_one_or_none()
        return to_domain(row) if row is not None else None

    async def exists_by_email(self, email: str) -> bool:
        stmt = select(exists().where(UserAccountModel.email == email))
        try:
            return bool(await self.session.scalar(stmt))
        except SQLAlchemyError as exc:
            raise PersistenceError("Failed to check account email") from exc

    async def find_by_id(self, user_id: UUID) -> UserAccount | None:
        try:
            row = await self.session.get(UserAccountModel, str(user_id))
        except SQLAlchemyError as exc:
            raise PersistenceError("Failed to load account") from exc

        return to_domain(row) if row is not None else None

    async def _load_roles(self, codes: Iterable[RoleCode]) -> set[RoleModel]:
        names = {code.value for code in codes}
        result = await self.session.scalars(select(RoleModel).where(RoleModel.name.in_(names)))
        roles = set(result.all())

        missing = names - {role.name for role in roles}
        if missing:
            joined = ", ".join(sorted(missing))
            raise PersistenceError(f"Role(s) missing from catalog: {joined}")
        return roles
