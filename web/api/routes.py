"""API routes for holidays, quotes, products, tours, bookings and footer links."""
from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from content.commands import Insert, command_from_body
from content.store import FOOTER_LINK_FIELDS, PRODUCT_FIELDS, TOUR_FIELDS, ContentStore
from web.api.utils import get_store

router = APIRouter(prefix="/api", tags=["content"])


# --- Pydantic schemas ---
# Fields are untyped: values go to storage exactly as the client sent them.
# A missing body is treated as an empty object.


class HolidayIn(BaseModel):
    date: Any = None
    name: Any = None


class QuoteIn(BaseModel):
    text: Any = None
    author: Any = None


class ProductIn(BaseModel):
    id: Any = None
    title: Any = None
    image: Any = None
    link: Any = None
    position: Any = None


class TourIn(BaseModel):
    id: Any = None
    name: Any = None
    image: Any = None
    departure: Any = None
    transport: Any = None
    date: Any = None
    price: Any = None
    position: Any = None


class BookingIn(BaseModel):
    tour: Any = None
    customer_name: Any = None
    customer_phone: Any = None


class FooterLinkIn(BaseModel):
    id: Any = None
    text: Any = None
    url: Any = None
    position: Any = None


def _saved(command, new_id) -> dict:
    if isinstance(command, Insert):
        return {"success": True, "id": new_id}
    return {"success": True}


# --- Holidays ---


@router.get("/holidays")
async def list_holidays(store: ContentStore = Depends(get_store)):
    """Holidays sorted by date."""
    return await store.list_holidays()


@router.post("/holidays")
async def upsert_holiday(body: Optional[HolidayIn] = None, store: ContentStore = Depends(get_store)):
    """Add a holiday, or rename the existing one on the same date."""
    body = body or HolidayIn()
    holiday_id = await store.upsert_holiday(body.date, body.name)
    return {"success": True, "id": holiday_id}


@router.delete("/holidays/{holiday_id}")
async def delete_holiday(holiday_id: str, store: ContentStore = Depends(get_store)):
    await store.delete_holiday(holiday_id)
    return {"success": True}


# --- Quotes ---


@router.get("/quotes")
async def list_quotes(store: ContentStore = Depends(get_store)):
    return await store.list_quotes()


@router.post("/quotes")
async def add_quote(body: Optional[QuoteIn] = None, store: ContentStore = Depends(get_store)):
    body = body or QuoteIn()
    quote_id = await store.add_quote(body.text, body.author)
    return {"success": True, "id": quote_id}


@router.delete("/quotes/{quote_id}")
async def delete_quote(quote_id: str, store: ContentStore = Depends(get_store)):
    await store.delete_quote(quote_id)
    return {"success": True}


# --- Products ---


@router.get("/products")
async def list_products(store: ContentStore = Depends(get_store)):
    """Products sorted by position."""
    return await store.list_products()


@router.post("/products")
async def save_product(body: Optional[ProductIn] = None, store: ContentStore = Depends(get_store)):
    """Update the product when body has an id, otherwise create one."""
    body = body or ProductIn()
    command = command_from_body(body.model_dump(), PRODUCT_FIELDS)
    return _saved(command, await store.save_product(command))


@router.delete("/products/{product_id}")
async def delete_product(product_id: str, store: ContentStore = Depends(get_store)):
    await store.delete_product(product_id)
    return {"success": True}


# --- Tours ---


@router.get("/tours")
async def list_tours(store: ContentStore = Depends(get_store)):
    """Tours sorted by position."""
    return await store.list_tours()


@router.post("/tours")
async def save_tour(body: Optional[TourIn] = None, store: ContentStore = Depends(get_store)):
    """Update the tour when body has an id, otherwise create one."""
    body = body or TourIn()
    command = command_from_body(body.model_dump(), TOUR_FIELDS)
    return _saved(command, await store.save_tour(command))


@router.delete("/tours/{tour_id}")
async def delete_tour(tour_id: str, store: ContentStore = Depends(get_store)):
    await store.delete_tour(tour_id)
    return {"success": True}


# --- Bookings ---


@router.get("/bookings")
async def list_bookings(store: ContentStore = Depends(get_store)):
    """Bookings, newest first."""
    return await store.list_bookings()


@router.post("/bookings")
async def add_booking(body: Optional[BookingIn] = None, store: ContentStore = Depends(get_store)):
    body = body or BookingIn()
    booking_id = await store.add_booking(body.tour, body.customer_name, body.customer_phone)
    return {"success": True, "id": booking_id}


@router.delete("/bookings/{booking_id}")
async def delete_booking(booking_id: str, store: ContentStore = Depends(get_store)):
    await store.delete_booking(booking_id)
    return {"success": True}


# --- Footer links ---


@router.get("/footer-links")
async def list_footer_links(store: ContentStore = Depends(get_store)):
    """Footer links sorted by position."""
    return await store.list_footer_links()


@router.post("/footer-links")
async def save_footer_link(body: Optional[FooterLinkIn] = None, store: ContentStore = Depends(get_store)):
    body = body or FooterLinkIn()
    command = command_from_body(body.model_dump(), FOOTER_LINK_FIELDS)
    return _saved(command, await store.save_footer_link(command))


@router.delete("/footer-links/{link_id}")
async def delete_footer_link(link_id: str, store: ContentStore = Depends(get_store)):
    await store.delete_footer_link(link_id)
    return {"success": True}
