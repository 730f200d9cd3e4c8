from __future__ import annotations

import asyncio
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from loan_ledger.config import settings
from loan_ledger.crud.application import get_application
from loan_ledger.schemas.application import ApplicationRequest
from loan_ledger.services.ledger import ApplicationLedger


@dataclass(frozen=True)
class SeedApplicationSpec:
    id: str
    principal: int
    duration: int


@dataclass(frozen=True)
class SeedResult:
    created_ids: tuple[str, ...]
    application_ids: tuple[str, ...]


# Fixed ids keep reruns idempotent and make the demo rows easy to spot.
DEMO_APPLICATIONS: tuple[SeedApplicationSpec, ...] = (
    SeedApplicationSpec(id="00000000-0000-4000-8000-000000000001", principal=1000, duration=12),
    SeedApplicationSpec(id="00000000-0000-4000-8000-000000000002", principal=1200, duration=6),
    SeedApplicationSpec(id="00000000-0000-4000-8000-000000000003", principal=25000, duration=60),
)


async def _seed(session: AsyncSession) -> SeedResult:
    created: list[str] = []

    for spec in DEMO_APPLICATIONS:
        if await get_application(session, application_id=spec.id) is not None:
            continue

        ledger = ApplicationLedger(session, id_factory=lambda spec=spec: spec.id)
        await ledger.add_application(
            ApplicationRequest(principal=spec.principal, duration=spec.duration)
        )
        created.append(spec.id)

    return SeedResult(
        created_ids=tuple(created),
        application_ids=tuple(spec.id for spec in DEMO_APPLICATIONS),
    )


async def _seed_dev_data(database_url: str) -> SeedResult:
    engine = create_async_engine(database_url, pool_pre_ping=True)
    session_maker = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)

    try:
        async with session_maker() as session:
            return await _seed(session)
    finally:
        await engine.dispose()


def seed_dev_data(database_url: str | None = None) -> SeedResult:
    return asyncio.run(_seed_dev_data(database_url or settings.database_url))


def main() -> None:
    result = seed_dev_data()
    print(f"seeded {len(result.created_ids)} of {len(result.application_ids)} demo applications")


if __name__ == "__main__":
    main()
