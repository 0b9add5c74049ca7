"""Site settings (countdown date, popup, meta tags)."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from content.models.base import Base


class Setting(Base):
    """Key/value site setting. Upserted by key, never deleted through the API."""

    __tablename__ = "settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    key: Mapped[Optional[str]] = mapped_column(Text, unique=True, nullable=True)
    value: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
