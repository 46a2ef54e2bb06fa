from seatsync.domain.email import Email
from seatsync.domain.errors import (
    AccountError,
    ConflictError,
    PersistenceError,
    ValidationError,
)
from seatsync.domain.models import UserAccount
from seatsync.domain.roles import RoleCode, is_admin, is_staff

__all__ = [
    "AccountError",
    "ConflictError",
    "Email",
    "PersistenceError",
    "RoleCode",
    "UserAccount",
    "ValidationError",
    "is_admin",
    "is_staff",
]
