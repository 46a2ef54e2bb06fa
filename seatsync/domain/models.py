from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

from seatsync.domain import roles as capabilities
from seatsync.domain.email import Email
from seatsync.domain.errors import ValidationError
from seatsync.domain.roles import RoleCode


@dataclass(frozen=True, slots=True)
class UserAccount:
    """Registered account. Immutable; changes require a new instance."""

    user_id: UUID
    full_name: str
    email: Email
    password_hash: str = field(repr=False)
    roles: frozenset[RoleCode] = frozenset()

    def __post_init__(self) -> None:
        if not self.full_name or not self.full_name.strip():
            raise ValidationError("Full name cannot be blank")
        if not self.password_hash:
            raise ValidationError("Password hash cannot be empty")
        object.__setattr__(self, "roles", frozenset(self.roles))

    def is_admin(self) -> bool:
        return capabilities.is_admin(self.roles)

    def is_staff(self) -> bool:
        return capabilities.is_staff(self.roles)
