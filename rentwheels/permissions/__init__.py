"""
.. autoclasstree:: rentwheels.permissions

Permissions guard the private routes. Each is an async callable that
returns when it holds and raises a :class:`RoutePermissionError` when
it doesn't; routes list the ones they need with :func:`requires`.
"""

from rentwheels.permissions.decorators import requires
from rentwheels.permissions.listings import ClaimOwnsListing
from rentwheels.permissions.permission import Permission, RoutePermissionError
from rentwheels.permissions.users import ValidToken, EmailMatchesClaim
