"""User registration use case."""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID, uuid4

import structlog
from seatsync.domain.email import Email
from seatsync.domain.errors import ConflictError, ValidationError
from seatsync.domain.models import UserAccount
from seatsync.domain.ports import AccountRepository, PasswordHasher
from seatsync.domain.roles import RoleCode

logger = structlog.get_logger()

DEFAULT_ROLES = frozenset({RoleCode.ROLE_CUSTOMER})


@dataclass(frozen=True, slots=True)
class RegisterUserCommand:
    """Input for a registration request."""

    full_name: str
    email: str
    raw_password: str = field(repr=False)


class RegisterUserUseCase:
    """Registers a new customer account."""

    def __init__(
        self,
        account_repository: AccountRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self.account_repository = account_repository
        self.password_hasher = password_hasher

    async def execute(self, command: RegisterUserCommand) -> UUID:
        """
        Register a new account and return its identifier.

        The existence check is only a fast path; the repository's unique
        constraint on email is what guarantees a single winner when two
        registrations race, and it reports the loser as ConflictError too.

        Raises:
            ValidationError: malformed email or blank full name
            ConflictError: email already registered
            PersistenceError: the repository failed to store the account
        """
        email = Email.of(command.email)
        if not command.full_name or not command.full_name.strip():
            raise ValidationError("Full name cannot be blank")

        await logger.ainfo("register_attempt", email=email.value)

        if await self.account_repository.exists_by_email(email.value):
            await logger.awarning("register_duplicate_email", email=email.value)
            raise ConflictError("Email already registered")

        password_hash = self.password_hasher.encode(command.raw_password)

        account = UserAccount(
            user_id=uuid4(),
            full_name=command.full_name,
            email=email,
            password_hash=password_hash,
            roles=DEFAULT_ROLES,
        )

        await self.account_repository.save(account)

        await logger.ainfo("register_success", user_id=str(account.user_id), email=email.value)

        return account.user_id
