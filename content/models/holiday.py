"""Holiday model."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from content.models.base import AUTOINCREMENT_TABLE_ARGS, Base


class Holiday(Base):
    """Public holiday. The date is the natural key for upserts."""

    __tablename__ = "holidays"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[Optional[str]] = mapped_column(Text, unique=True, nullable=True)  # YYYY-MM-DD
    name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
