"""
Bookings
========
"""

from typing import List

from rentwheels.models import Booking
from rentwheels.service.store import store_operation


@store_operation
async def get_user_bookings(email: str) -> List[Booking]:
    """Gets the bookings made by the user with the given email, newest first."""
    return await Booking.filter(user_email=email).order_by("-id")
