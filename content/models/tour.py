"""Tour listing model."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from content.models.base import AUTOINCREMENT_TABLE_ARGS, Base


class Tour(Base):
    """Holiday tour offer shown on the public site."""

    __tablename__ = "tours"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    departure: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    transport: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    date: Mapped[Optional[str]] = mapped_column(Text, nullable=True)  # free text, e.g. "30/4 - 01/5"
    price: Mapped[Optional[str]] = mapped_column(Text, nullable=True)  # formatted, e.g. "2.500.000đ"
    position: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
