"""
Booking Manager
===============

Handles the booking of listings.

A listing may be booked once. The manager guarantees that however many
users try to book the same listing at the same time, exactly one of them
gets it and everybody else is told that it is taken.

Responsibilities
----------------

- flip a listing from available to booked
- record the booking for the user that made it

Both happen in a single store transaction, and the flip is a conditional
update (``UPDATE ... WHERE status = 'Available'``) rather than a read
followed by a write. Whichever request's update lands first claims the
listing; the others match no rows. The guarantee therefore holds across
any number of server processes sharing the store, without any locking
in the server itself.
"""
from datetime import date
from typing import Optional

from tortoise.transactions import in_transaction

from rentwheels import logger
from rentwheels.models import Booking, Listing, ListingStatus, is_storable_id
from rentwheels.service.store import store_operation


class BookingError(Exception):
    pass


class BookingConflictError(BookingError):
    """Raised when the requested listing is already booked."""


class ListingNotFoundError(BookingError):
    """Raised when the requested listing does not exist."""


class BookingManager:

    @store_operation
    async def book(
        self, user_email: str, listing_id: int, *,
        start_date: Optional[date] = None, end_date: Optional[date] = None, total_price: Optional[float] = None
    ) -> Booking:
        """
        Books a listing for a user.

        :raises BookingConflictError: If the listing is already booked.
        :raises ListingNotFoundError: If there is no listing with the given id.
        """
        if not is_storable_id(listing_id):
            raise ListingNotFoundError(f"There is no listing with id {listing_id}.")

        async with in_transaction():
            claimed = await Listing.filter(id=listing_id, status=ListingStatus.AVAILABLE).update(
                status=ListingStatus.BOOKED
            )

            if not claimed:
                if await Listing.filter(id=listing_id).exists():
                    logger.info("User %s tried to book listing %s, but it is already booked", user_email, listing_id)
                    raise BookingConflictError("This car is already booked.")
                raise ListingNotFoundError(f"There is no listing with id {listing_id}.")

            listing = await Listing.get(id=listing_id)
            booking = await Booking.create(
                listing=listing, listing_name=listing.name, user_email=user_email,
                start_date=start_date, end_date=end_date, total_price=total_price
            )

        logger.info("User %s booked %s", user_email, listing)
        return booking
