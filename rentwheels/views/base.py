"""
Base
----

The view that every API view extends.
"""

from typing import Optional

from aiohttp.web import Application, View, AbstractRoute
from aiohttp_cors import CorsViewMixin

from rentwheels.service.manager.booking_manager import BookingManager
from rentwheels.service.tokens import TokenService


class BaseView(View, CorsViewMixin):
    """
    Registering a view binds the services of the app to it, so that the
    handlers can reach them as ``self.booking_manager`` and ``self.token_service``.
    """

    url: str
    name: Optional[str] = None
    route: AbstractRoute
    booking_manager: BookingManager
    token_service: TokenService

    @classmethod
    def register_route(cls, app: Application, base: str = "") -> AbstractRoute:
        """Adds the view to the router of the app under the base url."""
        cls.route = app.router.add_view(base + cls.url, cls, name=cls.name)
        cls.booking_manager = app["booking_manager"]
        cls.token_service = app["token_service"]
        return cls.route
