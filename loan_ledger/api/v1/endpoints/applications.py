from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from loan_ledger.database import get_db
from loan_ledger.schemas.application import (
    ApplicationRead,
    ApplicationReceiptRead,
    ApplicationRequest,
    MessageResponse,
)
from loan_ledger.services.ledger import ApplicationLedger, ApplicationReceipt


router = APIRouter(prefix="/applications", tags=["applications"])


def get_ledger(session: AsyncSession = Depends(get_db)) -> ApplicationLedger:
    return ApplicationLedger(session)


def _receipt_read(receipt: ApplicationReceipt) -> ApplicationReceiptRead:
    return ApplicationReceiptRead(
        message=receipt.message,
        application=ApplicationRead.model_validate(receipt.application),
    )


@router.post("/calculate", response_model=MessageResponse)
async def calculate_amount_endpoint(
    payload: ApplicationRequest,
    ledger: ApplicationLedger = Depends(get_ledger),
) -> MessageResponse:
    return MessageResponse(message=ledger.calculate_amount(payload))


@router.post("", response_model=ApplicationReceiptRead, status_code=status.HTTP_201_CREATED)
async def add_application_endpoint(
    payload: ApplicationRequest,
    ledger: ApplicationLedger = Depends(get_ledger),
) -> ApplicationReceiptRead:
    receipt = await ledger.add_application(payload)
    return _receipt_read(receipt)


@router.get("", response_model=list[ApplicationRead])
async def list_applications_endpoint(
    ledger: ApplicationLedger = Depends(get_ledger),
) -> list[ApplicationRead]:
    items = await ledger.get_all_applications()
    return [ApplicationRead.model_validate(i) for i in items]


@router.get("/{application_id}", response_model=ApplicationRead)
async def get_application_endpoint(
    application_id: str,
    ledger: ApplicationLedger = Depends(get_ledger),
) -> ApplicationRead:
    app = await ledger.get_specific_application(application_id)
    return ApplicationRead.model_validate(app)


@router.put("/{application_id}", response_model=ApplicationReceiptRead)
async def update_application_endpoint(
    application_id: str,
    payload: ApplicationRequest,
    ledger: ApplicationLedger = Depends(get_ledger),
) -> ApplicationReceiptRead:
    receipt = await ledger.update_application(application_id, payload)
    return _receipt_read(receipt)


@router.delete("/{application_id}", response_model=MessageResponse)
async def delete_application_endpoint(
    application_id: str,
    ledger: ApplicationLedger = Depends(get_ledger),
) -> MessageResponse:
    """Remove an application permanently (hard delete)."""

    return MessageResponse(message=await ledger.delete_application(application_id))


# A trailing slash with no id would otherwise be redirected to the list route.
# The ledger decides what an empty id means for each operation.
@router.get("/", response_model=ApplicationRead, include_in_schema=False)
async def get_application_empty_id_endpoint(
    ledger: ApplicationLedger = Depends(get_ledger),
) -> ApplicationRead:
    return await get_application_endpoint("", ledger=ledger)


@router.put("/", response_model=ApplicationReceiptRead, include_in_schema=False)
async def update_application_empty_id_endpoint(
    payload: ApplicationRequest,
    ledger: ApplicationLedger = Depends(get_ledger),
) -> ApplicationReceiptRead:
    return await update_application_endpoint("", payload, ledger=ledger)


@router.delete("/", response_model=MessageResponse, include_in_schema=False)
async def delete_application_empty_id_endpoint(
    ledger: ApplicationLedger = Depends(get_ledger),
) -> MessageResponse:
    return await delete_application_endpoint("", ledger=ledger)
