from marshmallow import Schema, INCLUDE
from marshmallow.fields import Integer
from marshmallow.validate import Range

from rentwheels.models import MAX_ID
from rentwheels.serializer.fields import NormalizedEmail
from rentwheels.serializer.models import BookingSchema

LISTING_READ_ONLY = ("id", "status", "created_at")
"""Listing fields that are set by the server and never accepted as input."""


class BookingRequestSchema(BookingSchema):
    """The fields a user supplies when booking a listing."""

    listing_id = Integer(required=True, validate=Range(min=1, max=MAX_ID))


BOOKING_REQUEST_FIELDS = ("listing_id", "user_email", "start_date", "end_date", "total_price")


class ClaimSchema(Schema):
    """The identity payload that a token is issued for."""

    class Meta:
        unknown = INCLUDE

    email = NormalizedEmail(required=True)
