"""
Pytest configuration for the points-bank service.

Provides fixtures for:
- Test settings pointing at a throwaway SQLite file per test
- Engine / session factory with the schema created
- Two registered members (sender and recipient)
- An app + httpx client for HTTP-level tests
"""

from __future__ import annotations

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select

from points_bank.app import create_app
from points_bank.config import Settings
from points_bank.db.models import Account, TransferRecord
from points_bank.db.session import build_engine, build_session_factory, create_schema
from points_bank.services.members import MemberService

PASSWORD = "password123"


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'points.db'}",
        jwt_secret="test-secret",
        bcrypt_rounds=4,
        log_level="DEBUG",
        log_dir=str(tmp_path / "logs"),
    )


@pytest_asyncio.fixture
async def engine(test_settings: Settings):
    engine = build_engine(test_settings.database_url)
    await create_schema(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def members(session_factory, test_settings: Settings) -> MemberService:
    return MemberService(session_factory, test_settings)


@pytest_asyncio.fixture
async def sender(members: MemberService) -> Account:
    return await members.register(
        email="test@example.com",
        password=PASSWORD,
        member_id="LBK001234",
        first_name="Somchai",
        last_name="Jaidee",
    )


@pytest_asyncio.fixture
async def recipient(members: MemberService) -> Account:
    return await members.register(
        email="test2@example.com",
        password=PASSWORD,
        member_id="LBK002345",
        first_name="Suay",
        last_name="Ngam",
    )


@pytest_asyncio.fixture
async def app(test_settings: Settings):
    app = create_app(test_settings)
    # httpx's ASGITransport does not run startup handlers
    await create_schema(app.state.engine)
    try:
        yield app
    finally:
        await app.state.engine.dispose()


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
def points_of(session_factory):
    async def _points_of(member_id: str) -> int:
        async with session_factory() as session:
            res = await session.execute(select(Account.points).where(Account.member_id == member_id))
            return int(res.scalar_one())

    return _points_of


@pytest.fixture
def ledger_count(session_factory):
    async def _ledger_count() -> int:
        async with session_factory() as session:
            res = await session.execute(select(func.count()).select_from(TransferRecord))
            return int(res.scalar_one())

    return _ledger_count
