from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession


TModel = TypeVar("TModel")


class BaseCRUD(Generic[TModel]):
    """Ordered key-value access to a single SQLAlchemy model (async).

    Rows are addressed by their ``id`` primary key and listed in ascending key
    order.

    Notes:
    - Methods intentionally do NOT commit. Callers control transaction boundaries.
    - ``update`` only touches attributes the model already has.
    """

    def __init__(self, model: type[TModel]) -> None:
        self.model = model

    async def get(self, session: AsyncSession, *, id: Any) -> TModel | None:
        q = select(self.model).where(self.model.id == id)  # type: ignore[attr-defined]
        r = await session.execute(q)
        return r.scalar_one_or_none()

    async def get_multi(self, session: AsyncSession) -> list[TModel]:
        q = select(self.model).order_by(self.model.id.asc())  # type: ignore[attr-defined]
        r = await session.execute(q)
        return list(r.scalars().all())

    async def create(self, session: AsyncSession, *, values: dict[str, Any]) -> TModel:
        db_obj = self.model(**values)
        session.add(db_obj)
        await session.flush()
        return db_obj

    async def update(
        self,
        session: AsyncSession,
        *,
        db_obj: TModel,
        values: dict[str, Any],
    ) -> TModel:
        for field, value in values.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        session.add(db_obj)  # no-op for persistent objects, safe for detached
        await session.flush()
        return db_obj

    async def delete(self, session: AsyncSession, *, id: Any) -> TModel | None:
        obj = await self.get(session, id=id)
        if obj is None:
            return None

        await session.delete(obj)
        await session.flush()
        return obj
