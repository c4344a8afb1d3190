"""
.. autoclasstree:: rentwheels.service

Everything the API does to the store goes through here: the access
modules read and write listings, users, and bookings, and the
:class:`BookingManager` makes sure a car is only ever booked once.
"""

from .manager.booking_manager import BookingManager, BookingConflictError, ListingNotFoundError
from .store import StoreUnavailableError, store_operation
from .tokens import TokenService, TokenVerificationError
