"""Authentication routes - account registration."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, HTTPException, Response, status
from seatsync.api.deps import get_register_user_use_case
from seatsync.api.schemas.auth import RegisterRequest, RegisterResponse
from seatsync.domain.errors import ConflictError, PersistenceError, ValidationError
from seatsync.domain.services.registration import RegisterUserCommand, RegisterUserUseCase

logger = structlog.get_logger()
router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
    description="Create a customer account with full name, email and password.",
)
async def register(
    payload: RegisterRequest,
    response: Response,
    use_case: RegisterUserUseCase = Depends(get_register_user_use_case),  # noqa: B008
) -> RegisterResponse:
    """Register a new user."""
    command = RegisterUserCommand(
        full_name=payload.full_name,
        email=payload.email,
        raw_password=payload.password,
    )

    try:
        user_id = await use_case.execute(command)
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from exc
    except ConflictError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(exc),
        ) from exc
    except PersistenceError as exc:
        await logger.aerror("register_persistence_failure", error=str(exc))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Account storage unavailable",
        ) from exc

    response.headers["Location"] = f"/users/{user_id}"
    return RegisterResponse(user_id=user_id)
