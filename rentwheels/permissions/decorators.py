"""
Decorators
----------
"""

from functools import wraps

from aiohttp.web_urldispatcher import View

from rentwheels.permissions.permission import RoutePermissionError, Permission
from rentwheels.serializer import fail, jsend_response


def requires(permission: Permission):
    """
    Runs the permission before the route, refusing the request if it fails.

    The refusal lists every reason the permission failed, and carries the
    status of the error: 401 when no token was given at all, 403 otherwise.
    """
    if not isinstance(permission, Permission):
        raise TypeError(f"requires takes a Permission, not {type(permission).__name__}")

    def decorator(original_function):

        @wraps(original_function)
        async def new_func(self: View, **kwargs):
            try:
                await permission(self, **kwargs)
            except RoutePermissionError as refusal:
                return jsend_response(
                    fail(f"You cannot do that because {refusal}.", reasons=refusal.serialize()),
                    refusal.status
                )

            return await original_function(self, **kwargs)

        return new_func

    return decorator
