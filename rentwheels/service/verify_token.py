"""
Verify Token
------------

Pulls the bearer token out of a request and verifies it
against the app's :class:`~rentwheels.service.tokens.TokenService`.
"""
from typing import Dict, Any

from aiohttp.web_request import Request

from rentwheels.service.tokens import TokenVerificationError


class MissingCredentialsError(Exception):
    """Raised when a request carries no Authorization header at all."""


def extract_token(header: str) -> str:
    """Returns everything after the first space of the header, as in ``Bearer $TOKEN``."""
    _, _, token = header.partition(" ")
    return token


def verify_token(request: Request) -> Dict[str, Any]:
    """
    Checks a request for the existence of a valid Authorization header.

    :param request: The request to check.
    :return: The verified claims of the token.
    :raises MissingCredentialsError: When there is no Authorization header.
    :raises TokenVerificationError: When the token in the header is invalid.
    """
    if "Authorization" not in request.headers:
        raise MissingCredentialsError("You must supply your access token.")

    token = extract_token(request.headers["Authorization"])
    if not token:
        raise TokenVerificationError("The Authorization header must be of the format \"Bearer $TOKEN\".")

    return request.app["token_service"].verify_token(token)
