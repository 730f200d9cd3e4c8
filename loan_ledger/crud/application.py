from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from loan_ledger.crud.base import BaseCRUD
from loan_ledger.models.application import Application


application_crud: BaseCRUD[Application] = BaseCRUD(Application)


async def get_application(session: AsyncSession, *, application_id: str) -> Application | None:
    return await application_crud.get(session, id=application_id)


async def list_applications(session: AsyncSession) -> list[Application]:
    return await application_crud.get_multi(session)


async def insert_application(session: AsyncSession, *, values: dict) -> Application:
    return await application_crud.create(session, values=values)


async def overwrite_application(
    session: AsyncSession,
    *,
    db_obj: Application,
    values: dict,
) -> Application:
    return await application_crud.update(session, db_obj=db_obj, values=values)


async def remove_application(session: AsyncSession, *, application_id: str) -> Application | None:
    return await application_crud.delete(session, id=application_id)
