"""
Decorators
----------

Routes declare the JSON they accept with :func:`expects` and the JSON
they send back with :func:`returns`, and return plain dictionaries.
Input that doesn't fit the declared schema is answered with a JSend
failure before the route runs.
"""

from functools import wraps
from http import HTTPStatus
from json import JSONDecodeError
from typing import Optional, Tuple, Union

from aiohttp import web
from aiohttp.web_request import Request
from aiohttp.web_urldispatcher import View
from marshmallow import Schema, ValidationError

from rentwheels.serializer.jsend import JSendSchema, fail, error

envelope = JSendSchema()


def jsend_response(body: dict, status: HTTPStatus = HTTPStatus.OK) -> web.Response:
    """Dumps a JSend body into a JSON response."""
    return web.json_response(envelope.dump(body), status=status)


class RejectedBodyError(Exception):
    """Raised when a request body can't be loaded, carrying the failure to send back."""

    def __init__(self, message, **data):
        super().__init__(message)
        self.body = fail(message, **data)


async def load_body(request: Request, schema: Schema):
    """
    Loads the JSON body of the request through the schema.

    :raises RejectedBodyError: When the body is missing, isn't JSON, or doesn't validate.
    """
    if not request.body_exists or request.content_type != "application/json":
        raise RejectedBodyError(f"This route ({request.method}: {request.rel_url}) only accepts JSON.")

    try:
        raw = await request.json()
    except JSONDecodeError as err:
        raise RejectedBodyError("Could not parse supplied JSON.", errors=[err.msg])
    except UnicodeDecodeError as err:
        raise RejectedBodyError("Could not parse supplied JSON.", errors=[err.reason])

    try:
        return schema.load(raw)
    except ValidationError as err:
        raise RejectedBodyError("The request did not validate properly.", errors=err.messages)


def expects(schema: Schema, into="data"):
    """
    Loads the request body through the schema, storing the result
    on the request under ``into`` before running the route:

    .. code:: python

        @expects(ListingSchema())
        async def post(self):
            listing_data = self.request["data"]

    A body that doesn't load is answered with a 400 and the reasons why.
    """
    if not isinstance(schema, Schema):
        raise TypeError(f"expects takes a Schema, not {type(schema).__name__}")

    def decorator(original_function):

        @wraps(original_function)
        async def new_func(self: View, **kwargs):
            try:
                self.request[into] = await load_body(self.request, schema)
            except RejectedBodyError as rejection:
                return jsend_response(rejection.body, HTTPStatus.BAD_REQUEST)

            return await original_function(self, **kwargs)

        return new_func

    return decorator


def returns(
    schema: Optional[Schema] = None, return_code: HTTPStatus = HTTPStatus.OK,
    **named_schemas: Union[Schema, Tuple[Schema, HTTPStatus]]
):
    """
    Dumps whatever the route returns through the schema.

    A route with more than one outcome names each of them, optionally
    paired with a status code, and returns ``(name, body)``:

    .. code:: python

        @returns(
            already_booked=(JSendSchema(), HTTPStatus.BAD_REQUEST),
            booked=JSendSchema.of(booking=BookingSchema()),
        )
        async def post(self):
            return "booked", {...}

    Returning a name that wasn't declared is a bug, and is answered with a 500.
    The body itself is dumped as is; it is up to the route to return data that
    matches its schema.
    """
    outcomes = {
        name: outcome if isinstance(outcome, tuple) else (outcome, HTTPStatus.OK)
        for name, outcome in named_schemas.items()
    }
    if schema is not None:
        outcomes[None] = (schema, return_code)

    def decorator(original_function):

        @wraps(original_function)
        async def new_func(self: View, **kwargs):
            result = await original_function(self, **kwargs)
            name, body = (None, result) if schema is not None else result

            try:
                outcome_schema, status = outcomes[name]
            except KeyError:
                return jsend_response(
                    error("We tried to send you data back, but it came out wrong.", errors=[f"No response named {name!r}."]),
                    HTTPStatus.INTERNAL_SERVER_ERROR
                )

            return web.json_response(outcome_schema.dump(body), status=status)

        return new_func

    return decorator
