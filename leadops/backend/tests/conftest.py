# tests/conftest.py
from datetime import datetime

import pytest
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.models import Base, LeadRecord, LlmResponse


@pytest.fixture
async def engine():
    """
    Fresh in-memory DB per test. StaticPool makes all connections share the same
    in-memory database for the lifetime of this engine fixture.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def async_session_maker(engine):
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=True)


@pytest.fixture
async def session(async_session_maker):
    async with async_session_maker() as s:
        yield s


@pytest.fixture
def make_lead():
    def _make(lead_id: str, user_id: str = "u1", tag: str = "camp", created_at: datetime | None = None, **kw):
        return LeadRecord(
            lead_id=lead_id,
            user_id=user_id,
            tag=tag,
            linkedin_url=f"https://www.linkedin.com/in/{lead_id}",
            created_at=created_at or datetime(2025, 1, 1, 12, 0, 0),
            **kw,
        )

    return _make


@pytest.fixture
def make_response():
    def _make(lead_id: str, created_at: datetime, **kw):
        return LlmResponse(lead_id=lead_id, created_at=created_at, **kw)

    return _make
