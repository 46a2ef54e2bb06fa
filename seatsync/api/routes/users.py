"""Account lookup routes guarded by role capabilities."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from seatsync.api.deps import (
    get_account_repository,
    get_current_account,
    require_admin,
    require_staff,
)
from seatsync.api.schemas.users import UserResponse
from seatsync.domain.models import UserAccount
from seatsync.domain.ports import AccountRepository

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserResponse, summary="Get current account")
async def get_me(account: UserAccount = Depends(get_current_account)) -> UserResponse:  # noqa: B008
    return UserResponse.from_account(account)


@router.get(
    "",
    response_model=UserResponse,
    summary="Find account by email",
    description="Exact, case-sensitive email lookup. Admin only.",
)
async def find_by_email(
    email: str = Query(..., min_length=1, max_length=255),
    _admin: UserAccount = Depends(require_admin),  # noqa: B008
    repository: AccountRepository = Depends(get_account_repository),  # noqa: B008
) -> UserResponse:
    account = await repository.find_by_email(email)
    if account is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Account not found")
    return UserResponse.from_account(account)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get account by id",
    description="Staff and admins may view any account.",
)
async def get_user(
    user_id: UUID,
    _staff: UserAccount = Depends(require_staff),  # noqa: B008
    repository: AccountRepository = Depends(get_account_repository),  # noqa: B008
) -> UserResponse:
    account = await repository.find_by_id(user_id)
    if account is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Account {user_id} not found",
        )
    return UserResponse.from_account(account)
