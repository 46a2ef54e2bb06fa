from .user_accounts import SqlAlchemyAccountRepository

__all__ = ["SqlAlchemyAccountRepository"]
