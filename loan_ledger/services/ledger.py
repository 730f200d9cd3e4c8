from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
import logging
from uuid import uuid4

from sqlalchemy.ext.asyncio import AsyncSession

from loan_ledger.config import settings
from loan_ledger.crud.application import (
    get_application,
    insert_application,
    list_applications,
    overwrite_application,
    remove_application,
)
from loan_ledger.models.application import Application
from loan_ledger.schemas.application import ApplicationRequest
from loan_ledger.services.interest import compute_interest


logger = logging.getLogger("loan_ledger.ledger")

U32_MAX = 2**32 - 1

DEFAULT_STATUS = "pending"


class LedgerError(Exception):
    """Base class for errors the ledger reports back to its caller."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(LedgerError):
    """Raised when no application is stored under the requested id."""

    def __init__(self, application_id: str) -> None:
        super().__init__(f"The application with ID {application_id} is not found")
        self.application_id = application_id


class InvalidPayloadError(LedgerError):
    """Raised for a present but unusable payload or id."""

    pass


@dataclass(frozen=True)
class ApplicationReceipt:
    application: Application
    message: str


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid4())


def _validate_request(request: ApplicationRequest | None) -> ApplicationRequest:
    if request is None:
        raise InvalidPayloadError("Invalid payload provided.")
    if not (0 < request.principal <= U32_MAX) or not (0 < request.duration <= U32_MAX):
        logger.warning(
            "invalid_payload principal=%s duration=%s",
            request.principal,
            request.duration,
        )
        raise InvalidPayloadError("Invalid payload provided.")
    return request


def _validate_id(application_id: str | None) -> str:
    if not application_id:
        raise InvalidPayloadError("Invalid ID provided.")
    return application_id


def merge_update(existing: Application, request: ApplicationRequest, *, now: datetime) -> dict:
    """Build the overwrite values for an update.

    principal and duration come from the request. id, created_at,
    interest_rate and status are never part of the result, so the stored
    values survive the overwrite.
    """

    interest, total_amount = compute_interest(
        request.principal, request.duration, existing.interest_rate
    )
    return {
        "principal": request.principal,
        "duration": request.duration,
        "interest": interest,
        "total_amount": total_amount,
        "updated_at": now,
    }


class ApplicationLedger:
    """Lifecycle of loan-application records over the ``applications`` table.

    Each mutating operation commits its own transaction. Errors are raised as
    ``NotFoundError`` / ``InvalidPayloadError``; the API layer turns them into
    responses.
    """

    def __init__(
        self,
        session: AsyncSession,
        *,
        interest_rate: float | None = None,
        clock: Callable[[], datetime] = _utcnow,
        id_factory: Callable[[], str] = _new_id,
    ) -> None:
        self.session = session
        self.interest_rate = settings.interest_rate if interest_rate is None else interest_rate
        self.clock = clock
        self.id_factory = id_factory

    def calculate_amount(self, request: ApplicationRequest | None) -> str:
        request = _validate_request(request)
        interest, total_amount = compute_interest(
            request.principal, request.duration, self.interest_rate
        )
        return (
            f"The interest is '{interest}' and the total amount to be paid is '{total_amount}'"
        )

    async def add_application(self, request: ApplicationRequest | None) -> ApplicationReceipt:
        request = _validate_request(request)
        interest, total_amount = compute_interest(
            request.principal, request.duration, self.interest_rate
        )

        app = await insert_application(
            self.session,
            values={
                "id": self.id_factory(),
                "principal": request.principal,
                "duration": request.duration,
                "interest_rate": self.interest_rate,
                "interest": interest,
                "total_amount": total_amount,
                "status": DEFAULT_STATUS,
                "created_at": self.clock(),
                "updated_at": None,
            },
        )
        await self.session.commit()

        logger.info(
            "application_created id=%s principal=%s duration=%s total_amount=%s",
            app.id,
            app.principal,
            app.duration,
            app.total_amount,
        )
        return ApplicationReceipt(
            application=app,
            message=(
                f"Your application with ID {app.id} for a principal amount of {app.principal} "
                f"and duration of {app.duration} months has been received successfully!"
            ),
        )

    async def get_all_applications(self) -> list[Application]:
        return await list_applications(self.session)

    async def get_specific_application(self, application_id: str | None) -> Application:
        application_id = _validate_id(application_id)

        app = await get_application(self.session, application_id=application_id)
        if app is None:
            raise NotFoundError(application_id)
        return app

    async def update_application(
        self,
        application_id: str | None,
        request: ApplicationRequest | None,
    ) -> ApplicationReceipt:
        # Existence is checked before the payload.
        app = None
        if application_id:
            app = await get_application(self.session, application_id=application_id)
        if app is None:
            logger.warning("update_missing id=%s", application_id)
            raise NotFoundError(application_id or "")

        request = _validate_request(request)

        app = await overwrite_application(
            self.session,
            db_obj=app,
            values=merge_update(app, request, now=self.clock()),
        )
        await self.session.commit()

        logger.info(
            "application_updated id=%s principal=%s duration=%s total_amount=%s",
            app.id,
            app.principal,
            app.duration,
            app.total_amount,
        )
        return ApplicationReceipt(
            application=app,
            message=(
                f"You have updated an application with ID {app.id} to have a principal amount "
                f"of {request.principal} and duration of {request.duration} months"
            ),
        )

    async def delete_application(self, application_id: str | None) -> str:
        application_id = _validate_id(application_id)

        removed = await remove_application(self.session, application_id=application_id)
        if removed is None:
            logger.warning("delete_missing id=%s", application_id)
            raise NotFoundError(application_id)
        await self.session.commit()

        logger.info("application_deleted id=%s", application_id)
        return f"You have deleted an application with ID {application_id}"
