"""
Booking Related Views
---------------------

Handles making bookings and viewing your own.
"""
from http import HTTPStatus

from rentwheels.permissions import requires, ValidToken, EmailMatchesClaim
from rentwheels.serializer import JSendSchema, JSendStatus, Many, expects, returns
from rentwheels.serializer.misc import BookingRequestSchema, BOOKING_REQUEST_FIELDS
from rentwheels.serializer.models import BookingSchema
from rentwheels.service.access.bookings import get_user_bookings
from rentwheels.service.manager.booking_manager import BookingConflictError, ListingNotFoundError
from rentwheels.views.base import BaseView


class BookingsView(BaseView):
    """
    Gets the token holder's bookings, or books a car.
    """
    url = "/bookings"
    name = "bookings"

    @requires(ValidToken() & EmailMatchesClaim("email"))
    @returns(JSendSchema.of(bookings=Many(BookingSchema())))
    async def get(self):
        bookings = await get_user_bookings(self.request.query["email"].lower())
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"bookings": [booking.serialize() for booking in bookings]}
        }

    @requires(ValidToken())
    @expects(BookingRequestSchema(only=BOOKING_REQUEST_FIELDS))
    @returns(
        not_user=(JSendSchema(), HTTPStatus.FORBIDDEN),
        already_booked=(JSendSchema(), HTTPStatus.BAD_REQUEST),
        no_listing=(JSendSchema(), HTTPStatus.NOT_FOUND),
        booked=JSendSchema.of(booking=BookingSchema()),
    )
    async def post(self):
        """
        Books a car for the token holder. Only one booking may be held on a
        car, so if somebody else got there first the request fails.
        """
        data = dict(self.request["data"])
        claimed_email = self.request["claim"].get("email")
        user_email = data.pop("user_email", None) or claimed_email

        if user_email is None or user_email != claimed_email:
            return "not_user", {
                "status": JSendStatus.FAIL,
                "data": {"message": "You may only book cars for yourself."}
            }

        try:
            booking = await self.booking_manager.book(user_email, **data)
        except BookingConflictError as error:
            return "already_booked", {
                "status": JSendStatus.FAIL,
                "data": {"message": str(error), "listing_id": data["listing_id"]}
            }
        except ListingNotFoundError as error:
            return "no_listing", {
                "status": JSendStatus.FAIL,
                "data": {"message": str(error), "listing_id": data["listing_id"]}
            }

        return "booked", {
            "status": JSendStatus.SUCCESS,
            "data": {"booking": booking.serialize()}
        }
