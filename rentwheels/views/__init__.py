"""
.. autoclasstree:: rentwheels.views

The HTTP API for browsing, listing, searching, and booking cars.

Routes
------

- ``POST /jwt`` issues an access token for an identity
- ``GET|POST /users`` lists or registers users
- ``GET|POST /cars``, ``GET|PUT|DELETE /cars/{id}`` manage the listings
- ``GET /my-listings?email=`` and ``GET /search?q=`` find listings
- ``GET|POST /bookings`` books cars and shows your bookings

Every route answers with a JSend envelope. Private routes take an
``Authorization: Bearer $TOKEN`` header, and refuse a request with a
401 when the header is missing and a 403 when the token is bad or
belongs to somebody else.
"""

import aiohttp_cors
from aiohttp.web import Application

from rentwheels import logger
from .bookings import BookingsView
from .listings import ListingsView, ListingView, ProviderListingsView, SearchView
from .misc import index
from .tokens import TokenView
from .users import UsersView

views = [
    TokenView,
    UsersView,
    ListingsView, ListingView, ProviderListingsView, SearchView,
    BookingsView,
]


def register_views(app: Application, base: str):
    """
    Registers all the API views under the base url, and lets
    browsers call them from any origin.
    """
    cors = aiohttp_cors.setup(app, defaults={
        "*": aiohttp_cors.ResourceOptions(
            allow_credentials=True,
            expose_headers="*",
            allow_headers="*",
            allow_methods="*",
        )
    })

    for view in views:
        cors.add(view.register_route(app, base))
        logger.debug("Registered %s at %s", view.__name__, base + view.url)
