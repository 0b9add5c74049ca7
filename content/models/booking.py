"""Tour booking model."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from content.models.base import AUTOINCREMENT_TABLE_ARGS, Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Booking(Base):
    """Customer booking request. Append-only; rows are only ever inserted or deleted."""

    __tablename__ = "bookings"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tour: Mapped[Optional[str]] = mapped_column(Text, nullable=True)  # tour name or id, not a foreign key
    customer_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    customer_phone: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=_utcnow)
