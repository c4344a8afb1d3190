"""
Middleware
----------
"""
from http import HTTPStatus

from aiohttp import web
from aiohttp.web_middlewares import middleware
from aiohttp.web_request import Request

from rentwheels import logger
from rentwheels.serializer import error, jsend_response
from rentwheels.service.store import StoreUnavailableError
from rentwheels.service.verify_token import verify_token, TokenVerificationError

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
}


@middleware
async def validate_token_middleware(request: Request, handler):
    """
    Verifies any Authorization header given to the application, and stores
    the verified claims on the request as the "claim", or the reason it
    failed as the "token_error".

    Nothing is rejected here; routes that need a token say so with
    :class:`~rentwheels.permissions.ValidToken`.
    """

    if "Authorization" in request.headers:
        try:
            request["claim"] = verify_token(request)
        except TokenVerificationError as token_error:
            request["token_error"] = token_error

    return await handler(request)


@middleware
async def store_error_middleware(request: Request, handler):
    """Reports an unreachable store to the caller, who may retry later."""

    try:
        return await handler(request)
    except StoreUnavailableError as unavailable:
        logger.warning("Failed %s %s: %s", request.method, request.rel_url, unavailable)
        return jsend_response(
            error("The store is currently unavailable, please try again later.", errors=list(unavailable.args)),
            HTTPStatus.SERVICE_UNAVAILABLE
        )


@middleware
async def security_headers_middleware(request: Request, handler):
    """Adds some conservative security headers to every response."""

    try:
        response = await handler(request)
    except web.HTTPException as http_error:
        for header, value in SECURITY_HEADERS.items():
            http_error.headers.setdefault(header, value)
        raise

    for header, value in SECURITY_HEADERS.items():
        response.headers.setdefault(header, value)
    return response
