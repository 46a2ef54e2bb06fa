from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient
from seatsync.api.deps import get_db_session, get_password_hasher
from seatsync.api.main import app
from seatsync.domain.reference_data import ROLE_DEFINITIONS
from seatsync.infrastructure.db.base import Base
from seatsync.infrastructure.db.models import RoleModel
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from tests.utils import TEST_HASHER


async def seed_reference_data(session: AsyncSession) -> None:
    for role in ROLE_DEFINITIONS:
        session.add(RoleModel(**role))
    await session.commit()


@pytest.fixture()
async def session_factory() -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    """In-memory SQLite database with the schema created and roles seeded."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    factory = async_sessionmaker(engine, expire_on_commit=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with factory() as session:
        await seed_reference_data(session)

    yield factory

    await engine.dispose()


@pytest.fixture()
async def async_client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncClient]:
    """Async HTTP client bound to the app with the test database wired in."""

    async def override_db_session() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_db_session
    app.dependency_overrides[get_password_hasher] = lambda: TEST_HASHER

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
