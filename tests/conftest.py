import asyncio
import os
import tempfile

import pytest

# Must be set before loan_ledger is imported: settings and the engine are module-level.
_DB_DIR = tempfile.mkdtemp(prefix="loan-ledger-tests-")
os.environ["DATABASE_URL"] = os.environ.get(
    "TEST_DATABASE_URL",
    f"sqlite+aiosqlite:///{_DB_DIR}/test.db",
)

from fastapi.testclient import TestClient  # noqa: E402

from loan_ledger.database import engine  # noqa: E402
from loan_ledger.main import app  # noqa: E402
from loan_ledger.models import Base  # noqa: E402


async def _recreate_schema() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture(autouse=True)
def clean_db() -> None:
    """Every test starts from an empty applications table."""

    asyncio.run(_recreate_schema())


@pytest.fixture()
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture(scope="session")
def database_url() -> str:
    return os.environ["DATABASE_URL"]


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    return "asyncio"
