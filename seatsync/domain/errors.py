"""Domain exceptions raised by the account core."""


class AccountError(Exception):
    """Base exception for account errors."""

    pass


class ValidationError(AccountError):
    """Raised when input does not satisfy a structural rule (e.g. email format)."""

    pass


class ConflictError(AccountError):
    """Raised when an email address is already registered."""

    pass


class PersistenceError(AccountError):
    """Raised when the account store fails for reasons other than uniqueness."""

    pass
