from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from seatsync.domain.errors import ValidationError


class RoleCode(str, Enum):
    """Role codes an account can hold."""

    ROLE_CUSTOMER = "ROLE_CUSTOMER"
    ROLE_STAFF = "ROLE_STAFF"
    ROLE_ADMIN = "ROLE_ADMIN"

    @classmethod
    def parse(cls, value: str) -> RoleCode:
        try:
            return cls(value)
        except ValueError as exc:
            raise ValidationError(f"Unknown role code: {value}") from exc


def is_admin(roles: Iterable[RoleCode]) -> bool:
    return RoleCode.ROLE_ADMIN in set(roles)


def is_staff(roles: Iterable[RoleCode]) -> bool:
    """Admins carry staff capability without holding ROLE_STAFF."""
    held = set(roles)
    return RoleCode.ROLE_STAFF in held or RoleCode.ROLE_ADMIN in held
