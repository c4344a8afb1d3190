"""
The models package contains all the models used on the server.

.. autoclasstree:: rentwheels.models
"""

from .booking import Booking, BookingStatus
from .fields import MAX_ID, is_storable_id
from .listing import Listing, ListingStatus
from .user import User
