"""Content store: the single owner of the database engine.

One :class:`ContentStore` is built at startup and handed to every request
handler. Each public coroutine opens its own session, runs one statement and
either returns a value or raises the storage error unchanged.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from content.commands import Insert, Save, Update
from content.models import Base, Booking, FooterLink, Holiday, Product, Quote, Setting, Tour
from content.models.base import make_engine, make_session_factory
from content.seed import seed_defaults

logger = logging.getLogger("holiday.store")

PRODUCT_FIELDS = ("title", "image", "link", "position")
TOUR_FIELDS = ("name", "image", "departure", "transport", "date", "price", "position")
FOOTER_LINK_FIELDS = ("text", "url", "position")


class ContentStore:
    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.engine = make_engine(database_url, echo=echo)
        self._session_factory = make_session_factory(self.engine)

    async def init(self) -> None:
        """Create missing tables and seed default rows."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        async with self._session_factory() as session:
            added = await seed_defaults(session)
        logger.info("Content store ready at %s (%d default quotes added)", self.database_url, added)

    async def close(self) -> None:
        """Dispose the engine. Errors are logged, never raised."""
        try:
            await self.engine.dispose()
        except Exception:
            logger.exception("Failed to close database")
            return
        logger.info("Database connection closed")

    # --- generic row operations ---

    async def _list(self, model, *order_by) -> list[dict[str, Any]]:
        stmt = select(model.__table__)
        if order_by:
            stmt = stmt.order_by(*order_by)
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [dict(row) for row in result.mappings()]

    async def _insert(self, model, fields: dict[str, Any]) -> int:
        async with self._session_factory() as session:
            row = model(**fields)
            session.add(row)
            await session.commit()
            return row.id

    async def _save(self, model, command: Save) -> Optional[int]:
        """Apply an Insert or Update. Returns the new id for inserts, None for updates."""
        if isinstance(command, Update):
            async with self._session_factory() as session:
                # No existence check: updating a missing id is a no-op
                await session.execute(update(model).where(model.id == command.id).values(**command.fields))
                await session.commit()
            return None
        if isinstance(command, Insert):
            return await self._insert(model, command.fields)
        raise TypeError(f"Unsupported save command: {command!r}")

    async def _delete(self, model, row_id: Any) -> None:
        async with self._session_factory() as session:
            await session.execute(delete(model).where(model.id == row_id))
            await session.commit()

    # --- settings ---

    async def list_settings(self) -> dict[str, Any]:
        async with self._session_factory() as session:
            result = await session.execute(select(Setting.key, Setting.value))
            return {row.key: row.value for row in result}

    async def set_setting(self, key: Any, value: Any) -> None:
        stmt = sqlite_insert(Setting).values(key=key, value=value)
        stmt = stmt.on_conflict_do_update(index_elements=[Setting.key], set_={"value": stmt.excluded.value})
        async with self._session_factory() as session:
            await session.execute(stmt)
            await session.commit()

    # --- holidays ---

    async def list_holidays(self) -> list[dict[str, Any]]:
        return await self._list(Holiday, Holiday.date)

    async def upsert_holiday(self, date: Any, name: Any) -> int:
        """Insert a holiday or rename the one already on that date. Returns its id."""
        stmt = sqlite_insert(Holiday).values(date=date, name=name)
        stmt = stmt.on_conflict_do_update(
            index_elements=[Holiday.date], set_={"name": stmt.excluded.name}
        ).returning(Holiday.id)
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            holiday_id = result.scalar_one()
            await session.commit()
        return holiday_id

    async def delete_holiday(self, holiday_id: Any) -> None:
        await self._delete(Holiday, holiday_id)

    # --- quotes ---

    async def list_quotes(self) -> list[dict[str, Any]]:
        return await self._list(Quote)

    async def add_quote(self, text: Any, author: Any) -> int:
        return await self._insert(Quote, {"text": text, "author": author})

    async def delete_quote(self, quote_id: Any) -> None:
        await self._delete(Quote, quote_id)

    # --- products ---

    async def list_products(self) -> list[dict[str, Any]]:
        return await self._list(Product, Product.position, Product.id)

    async def save_product(self, command: Save) -> Optional[int]:
        return await self._save(Product, command)

    async def delete_product(self, product_id: Any) -> None:
        await self._delete(Product, product_id)

    # --- tours ---

    async def list_tours(self) -> list[dict[str, Any]]:
        return await self._list(Tour, Tour.position, Tour.id)

    async def save_tour(self, command: Save) -> Optional[int]:
        return await self._save(Tour, command)

    async def delete_tour(self, tour_id: Any) -> None:
        await self._delete(Tour, tour_id)

    # --- bookings ---

    async def list_bookings(self) -> list[dict[str, Any]]:
        return await self._list(Booking, Booking.created_at.desc(), Booking.id.desc())

    async def add_booking(self, tour: Any, customer_name: Any, customer_phone: Any) -> int:
        """Record a booking. created_at is always stamped here."""
        return await self._insert(
            Booking,
            {"tour": tour, "customer_name": customer_name, "customer_phone": customer_phone},
        )

    async def delete_booking(self, booking_id: Any) -> None:
        await self._delete(Booking, booking_id)

    # --- footer links ---

    async def list_footer_links(self) -> list[dict[str, Any]]:
        return await self._list(FooterLink, FooterLink.position, FooterLink.id)

    async def save_footer_link(self, command: Save) -> Optional[int]:
        return await self._save(FooterLink, command)

    async def delete_footer_link(self, link_id: Any) -> None:
        await self._delete(FooterLink, link_id)
