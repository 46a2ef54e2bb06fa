"""Pydantic schemas for authentication endpoints."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class RegisterRequest(BaseModel):
    """Request schema for user registration.

    The email is accepted as a plain string; its format is checked by the
    domain ``Email`` type so that the stored value keeps its original case.
    """

    full_name: str = Field(
        ...,
        min_length=1,
        max_length=128,
        description="User's full name",
    )
    email: str = Field(..., min_length=1, max_length=255, description="User email address")
    password: str = Field(
        ...,
        min_length=8,
        max_length=128,
        description="Password (min 8 characters)",
    )

    @field_validator("full_name")
    @classmethod
    def full_name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Full name cannot be blank")
        return value


class RegisterResponse(BaseModel):
    """Response schema for user registration."""

    user_id: UUID = Field(..., description="Identifier of the new account")
