from enum import Enum

from tortoise import Model, fields

from rentwheels.models.fields import EnumField


class BookingStatus(str, Enum):
    BOOKED = "Booked"


class Booking(Model):
    """
    A reservation of a listing by a user.

    Bookings are never updated once made; the listing name is copied
    at booking time so the history survives the listing being removed.
    """

    id = fields.IntField(pk=True)
    listing = fields.ForeignKeyField(
        "models.Listing", related_name="bookings", null=True, on_delete=fields.SET_NULL
    )
    listing_name = fields.CharField(max_length=255)
    user_email = fields.CharField(max_length=255, index=True)
    status: BookingStatus = EnumField(BookingStatus, default=BookingStatus.BOOKED)

    start_date = fields.DateField(null=True)
    end_date = fields.DateField(null=True)
    total_price = fields.FloatField(null=True)
    booked_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "bookings"

    def serialize(self):
        data = {
            "id": self.id,
            "listing_id": self.listing_id,
            "listing_name": self.listing_name,
            "user_email": self.user_email,
            "status": self.status,
            "booked_at": self.booked_at,
        }

        for attribute in ("start_date", "end_date", "total_price"):
            value = getattr(self, attribute)
            if value is not None:
                data[attribute] = value

        return data
