"""
Listing
-------

A single rentable vehicle, owned by the provider whose email it carries.
"""
from enum import Enum

from tortoise import Model, fields

from rentwheels.models.fields import EnumField


class ListingStatus(str, Enum):
    AVAILABLE = "Available"
    BOOKED = "Booked"


class Listing(Model):
    """
    Represents a vehicle listed by a provider.

    The status only ever moves from :attr:`~ListingStatus.AVAILABLE` to
    :attr:`~ListingStatus.BOOKED`, and only through the
    :class:`~rentwheels.service.manager.booking_manager.BookingManager`.
    """

    id = fields.IntField(pk=True)
    provider_email = fields.CharField(max_length=255, index=True)
    provider_name = fields.CharField(max_length=255, null=True)

    name = fields.CharField(max_length=255)
    status: ListingStatus = EnumField(ListingStatus, default=ListingStatus.AVAILABLE)

    price_per_day = fields.FloatField(null=True)
    location = fields.CharField(max_length=255, null=True)
    category = fields.CharField(max_length=64, null=True)
    image_url = fields.CharField(max_length=1024, null=True)
    description = fields.TextField(null=True)

    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "listings"

    def serialize(self):
        data = {
            "id": self.id,
            "name": self.name,
            "provider_email": self.provider_email,
            "status": self.status,
            "created_at": self.created_at,
        }

        for attribute in ("provider_name", "price_per_day", "location", "category", "image_url", "description"):
            value = getattr(self, attribute)
            if value is not None:
                data[attribute] = value

        return data

    def __str__(self):
        return f"[{self.id}] {self.name} ({self.status.value})"
