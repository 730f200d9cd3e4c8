from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class ApplicationRequest(BaseModel):
    """Submission payload for calculate / add / update.

    Range checks (both fields > 0, unsigned 32-bit) are enforced by the ledger,
    not here: on update the existence check has to run first.
    """

    principal: int = Field(..., strict=True, description="Loan principal amount")
    duration: int = Field(..., strict=True, description="Loan term in months")


class ApplicationRead(BaseModel):
    id: str

    principal: int
    duration: int

    interest_rate: float
    interest: float
    total_amount: float

    status: str

    created_at: datetime
    updated_at: datetime | None

    class Config:
        from_attributes = True


class ApplicationReceiptRead(BaseModel):
    message: str
    application: ApplicationRead


class MessageResponse(BaseModel):
    message: str
