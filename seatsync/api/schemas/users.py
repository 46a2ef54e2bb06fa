"""Pydantic schemas for account lookups."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, Field
from seatsync.domain.models import UserAccount


class UserResponse(BaseModel):
    """Public view of an account. Never carries the password hash."""

    user_id: UUID = Field(..., description="Account identifier")
    full_name: str = Field(..., description="User's full name")
    email: str = Field(..., description="User email")
    roles: list[str] = Field(..., description="Role codes held by the account")
    is_admin: bool = Field(..., description="Account has administrative capability")
    is_staff: bool = Field(..., description="Account has staff capability")

    @classmethod
    def from_account(cls, account: UserAccount) -> UserResponse:
        return cls(
            user_id=account.user_id,
            full_name=account.full_name,
            email=account.email.value,
            roles=sorted(role.value for role in account.roles),
            is_admin=account.is_admin(),
            is_staff=account.is_staff(),
        )
