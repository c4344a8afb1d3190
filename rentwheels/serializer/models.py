"""
Model Serializers
-----------------

Defines serializers for the various models in the system.
"""

from marshmallow import Schema, validates_schema, ValidationError
from marshmallow.fields import Integer, String, DateTime, Date, Float, Url
from marshmallow.validate import Length, Range

from rentwheels.models import ListingStatus, BookingStatus
from .fields import EnumField, NormalizedEmail


class UserSchema(Schema):
    """The schema corresponding to the :class:`~rentwheels.models.user.User` model."""

    id = Integer()
    email = NormalizedEmail(required=True)
    name = String(validate=Length(max=255))
    photo_url = Url(allow_none=True)
    created_at = DateTime()


class ListingSchema(Schema):
    """The schema corresponding to the :class:`~rentwheels.models.listing.Listing` model."""

    id = Integer()
    name = String(required=True, validate=Length(min=1, max=255))
    provider_email = NormalizedEmail()
    provider_name = String(validate=Length(max=255))
    status = EnumField(ListingStatus)

    price_per_day = Float(validate=Range(min=0))
    location = String(validate=Length(max=255))
    category = String(validate=Length(max=64))
    image_url = Url()
    description = String()

    created_at = DateTime()


class BookingSchema(Schema):
    """The schema corresponding to the :class:`~rentwheels.models.booking.Booking` model."""

    id = Integer()
    listing_id = Integer(allow_none=True)
    listing_name = String()
    user_email = NormalizedEmail()
    status = EnumField(BookingStatus)

    start_date = Date()
    end_date = Date()
    total_price = Float(validate=Range(min=0))
    booked_at = DateTime()

    @validates_schema
    def assert_dates_in_order(self, data, **kwargs):
        """Asserts that a booking does not end before it starts."""
        if "start_date" in data and "end_date" in data and data["end_date"] < data["start_date"]:
            raise ValidationError("The end date must not be before the start date.")
