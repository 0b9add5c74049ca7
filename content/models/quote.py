"""Quote model."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from content.models.base import AUTOINCREMENT_TABLE_ARGS, Base


class Quote(Base):
    __tablename__ = "quotes"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    text: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    author: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
