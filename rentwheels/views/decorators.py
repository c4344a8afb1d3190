"""
Decorators
----------
"""
from functools import wraps
from typing import Awaitable, Callable, Optional

from aiohttp import web
from aiohttp.web_urldispatcher import View

from rentwheels.models import is_storable_id
from rentwheels.serializer import fail
from rentwheels.serializer.decorators import envelope


def match_getter(getter_function: Callable[..., Awaitable[Optional[object]]], injection_parameter: str, **match_map: str):
    """
    Fetches the item identified by the url and hands it to the route,
    responding with a 404 if there is no such item.

    .. code-block:: python

        @match_getter(get_listing, 'listing', lid='id')
        async def get(self, listing: Listing):
            ...

    :param getter_function: Fetches the item, returning None if it doesn't exist.
    :param injection_parameter: The name the item is passed to the route as.
    :param match_map: Maps each argument of the getter to the (integer) url variable it comes from.
    """

    def decorator(original_function):

        @wraps(original_function)
        async def new_func(self: View, **kwargs):
            match_info = self.request.match_info
            try:
                params = {argument: int(match_info[variable]) for argument, variable in match_map.items()}
            except (KeyError, ValueError):
                raise web.HTTPBadRequest(
                    text=envelope.dumps(fail("The url doesn't identify an item.", params=dict(match_info))),
                    content_type="application/json"
                )

            # ids outside the range of the id column can't belong to anything
            stored = all(is_storable_id(value) for value in params.values())
            item = await getter_function(**params) if stored else None
            if item is None:
                raise web.HTTPNotFound(
                    text=envelope.dumps(fail(f"Could not find {injection_parameter} with the given params.", params=params)),
                    content_type="application/json"
                )

            return await original_function(self, **kwargs, **{injection_parameter: item})

        return new_func

    return decorator
