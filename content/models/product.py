"""Product listing model."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from content.models.base import AUTOINCREMENT_TABLE_ARGS, Base


class Product(Base):
    """Promoted product card (image linking out to a shop)."""

    __tablename__ = "products"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image: Mapped[Optional[str]] = mapped_column(Text, nullable=True)  # URL or static path
    link: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    position: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)  # display order, not unique
