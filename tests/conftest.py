"""Shared fixtures: an in-memory database per test and an HTTP client bound to it."""

import datetime as dt
import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest
from httpx import ASGITransport, AsyncClient
from jose import jwt
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from affirmations.config import config
from affirmations.db import Base
from affirmations.db.session import get_db
from main import app

ALICE = "user-alice"
BOB = "user-bob"


def make_token(user_id, ttl=dt.timedelta(minutes=15), **claims) -> str:
    now = dt.datetime.now(dt.timezone.utc)
    payload = {
        "iat": int(now.timestamp()),
        "exp": int((now + ttl).timestamp()),
    }
    if user_id is not None:
        payload["sub"] = user_id
    if config.JWT_ISSUER:
        payload["iss"] = config.JWT_ISSUER
    payload.update(claims)
    return jwt.encode(payload, config.JWT_SECRET, algorithm=config.JWT_ALG)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def token_for():
    return make_token


@pytest.fixture
def alice():
    return {"Authorization": f"Bearer {make_token(ALICE)}"}


@pytest.fixture
def bob():
    return {"Authorization": f"Bearer {make_token(BOB)}"}
