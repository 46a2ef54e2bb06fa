from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, String, Table, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base

user_account_roles = Table(
    "user_account_role",
    Base.metadata,
    Column(
        "user_id",
        String(36),
        ForeignKey("user_account.user_id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("role_name", String(32), ForeignKey("role.name"), primary_key=True),
)


class RoleModel(Base):
    """Role catalog row; one per RoleCode."""

    __tablename__ = "role"

    name: Mapped[str] = mapped_column(String(32), primary_key=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<RoleModel(name={self.name})>"


class UserAccountModel(Base):
    """SQLAlchemy model for the user_account table."""

    __tablename__ = "user_account"
    __table_args__ = (UniqueConstraint("email", name="uq_user_account_email"),)

    user_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    full_name: Mapped[str] = mapped_column(String(128), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    roles: Mapped[set[RoleModel]] = relationship(
        secondary=user_account_roles,
        collection_class=set,
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<UserAccountModel(user_id={self.user_id}, email={self.email})>"
