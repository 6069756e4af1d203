from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import AsyncIterator, Callable

import fakeredis
import jwt
import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from scorecard.config.settings import settings
from scorecard.shared.adapters.redis_adapter import RedisAdapter
from scorecard.shared.models import Base
from scorecard.shared.repositories import rating_repository


def make_redis_adapter(server: fakeredis.FakeServer) -> RedisAdapter:
    """An adapter with its own client on a shared fake Redis, like one more worker."""
    return RedisAdapter(client=fakeredis.FakeAsyncRedis(server=server, decode_responses=True))


@pytest.fixture(autouse=True)
def redis_server(monkeypatch) -> fakeredis.FakeServer:
    """In-memory Redis behind every repository that uses the default adapter."""
    server = fakeredis.FakeServer()
    adapter = make_redis_adapter(server)
    monkeypatch.setattr(rating_repository, "get_redis_adapter", lambda: adapter)
    return server


@pytest.fixture
def new_redis_adapter(redis_server) -> Callable[[], RedisAdapter]:
    """Factory for adapters that share the test Redis but not a client."""
    return lambda: make_redis_adapter(redis_server)


@pytest.fixture
def database(tmp_path: Path) -> Callable[[], object]:
    """
    Factory for a fresh SQLite schema; use inside the test's coroutine:

        async with database() as sessions:
            async with sessions() as session:
                ...
    """
    url = f"sqlite+aiosqlite:///{tmp_path / 'ratings.db'}"

    @asynccontextmanager
    async def _open() -> AsyncIterator[async_sessionmaker]:
        engine = create_async_engine(url, poolclass=NullPool)
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        try:
            yield async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
        finally:
            await engine.dispose()

    return _open


@pytest.fixture
def auth_headers() -> Callable[[str], dict]:
    """Bearer headers as the identity provider would issue them."""

    def _headers(user_id: str) -> dict:
        claims = {
            "user_id": user_id,
            "exp": datetime.now(timezone.utc) + timedelta(minutes=5),
        }
        token = jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
        return {"Authorization": f"Bearer {token}"}

    return _headers
