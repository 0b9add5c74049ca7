"""Database models."""
from content.models.base import Base
from content.models.booking import Booking
from content.models.footer_link import FooterLink
from content.models.holiday import Holiday
from content.models.product import Product
from content.models.quote import Quote
from content.models.setting import Setting
from content.models.tour import Tour

__all__ = [
    "Base",
    "Booking",
    "FooterLink",
    "Holiday",
    "Product",
    "Quote",
    "Setting",
    "Tour",
]
