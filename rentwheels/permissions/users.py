"""
User Permissions
----------------
"""
from http import HTTPStatus

from aiohttp.web_urldispatcher import View

from rentwheels.permissions.permission import Permission, RoutePermissionError


class ValidToken(Permission):
    """
    Asserts that the request has a valid access token.

    The token itself is checked by the
    :func:`~rentwheels.middleware.validate_token_middleware`,
    which leaves either the claim or the error on the request.
    """

    async def __call__(self, view: View, **kwargs):
        if "Authorization" not in view.request.headers:
            raise RoutePermissionError("You must supply your access token.", status=HTTPStatus.UNAUTHORIZED)

        if "claim" not in view.request:
            error = view.request.get("token_error")
            raise RoutePermissionError(
                *(error.args if error is not None else ("Supplied access token is invalid.",)),
                status=HTTPStatus.FORBIDDEN
            )


class EmailMatchesClaim(Permission):
    """
    Asserts that the email in the query string is the email of the token holder.
    Emails are compared ignoring case, as they are stored in lower case.
    """

    def __init__(self, parameter="email"):
        self.parameter = parameter

    async def __call__(self, view: View, **kwargs):
        claim = view.request.get("claim")
        if claim is None:
            raise RoutePermissionError("You don't have permission to fetch this resource.")

        email = view.request.query.get(self.parameter)
        claimed_email = claim.get("email")
        if email is None or claimed_email is None or email.lower() != claimed_email.lower():
            raise RoutePermissionError("You don't have permission to fetch this resource.")

    def __repr__(self):
        return f"EmailMatchesClaim({self.parameter!r})"
