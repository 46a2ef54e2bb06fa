"""Domain services."""

from seatsync.domain.services.registration import (
    DEFAULT_ROLES,
    RegisterUserCommand,
    RegisterUserUseCase,
)

__all__ = [
    "DEFAULT_ROLES",
    "RegisterUserCommand",
    "RegisterUserUseCase",
]
