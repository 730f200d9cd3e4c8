from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, CheckConstraint, DateTime, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Application(Base):
    __tablename__ = "applications"
    __table_args__ = (
        CheckConstraint("principal > 0", name="ck_applications_principal_positive"),
        CheckConstraint("duration > 0", name="ck_applications_duration_positive"),
    )

    # Opaque UUID4 string. Rows are listed in key order, not insertion order.
    id: Mapped[str] = mapped_column(String(36), primary_key=True)

    principal: Mapped[int] = mapped_column(BigInteger, nullable=False)
    duration: Mapped[int] = mapped_column(BigInteger, nullable=False)

    interest_rate: Mapped[float] = mapped_column(Float, nullable=False)
    interest: Mapped[float] = mapped_column(Float, nullable=False)
    total_amount: Mapped[float] = mapped_column(Float, nullable=False)

    status: Mapped[str] = mapped_column(String(50), nullable=False, default="pending", server_default="pending")

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
