from __future__ import annotations

from collections.abc import AsyncGenerator
import os
import sys

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from loan_ledger.config import Settings, settings


def _running_under_pytest() -> bool:
    # PYTEST_CURRENT_TEST only exists while a test body runs; collection-time
    # imports are caught through sys.modules.
    return bool(os.getenv("PYTEST_CURRENT_TEST")) or "pytest" in sys.modules


def build_engine(config: Settings) -> AsyncEngine:
    """Create the async engine for the ledger store.

    The sync TestClient drives each request through its own AnyIO portal, so a
    pooled connection can surface on a loop that did not open it. Tests get a
    NullPool for that reason.
    """

    kwargs: dict = {"echo": config.sql_echo}
    if _running_under_pytest():
        kwargs["poolclass"] = NullPool
    else:
        kwargs["pool_pre_ping"] = True
    return create_async_engine(config.database_url, **kwargs)


engine = build_engine(settings)
SessionLocal = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as session:
        yield session
