"""
JSend Schema
------------

Every API response is wrapped in a `JSend`_ envelope:

- ``{"status": "success", "data": {...}}`` when the request did what was asked,
- ``{"status": "fail", "data": {"message": ..., ...}}`` when the caller got something wrong,
- ``{"status": "error", "message": ...}`` when the server did.

.. _`JSend`: https://github.com/omniti-labs/jsend
"""

from enum import Enum

from marshmallow import Schema, fields, validates_schema, ValidationError

from .fields import EnumField


class JSendStatus(str, Enum):
    SUCCESS = "success"
    FAIL = "fail"
    ERROR = "error"


def fail(message: str, **data) -> dict:
    """Builds a failure body, which always carries a message for the user."""
    return {"status": JSendStatus.FAIL, "data": {"message": message, **data}}


def error(message: str, **data) -> dict:
    """Builds an error body, with any extra details under ``data``."""
    body = {"status": JSendStatus.ERROR, "message": message}
    if data:
        body["data"] = data
    return body


class JSendSchema(Schema):
    """The untyped envelope. Use :meth:`of` to also check what is inside ``data``."""

    status = EnumField(JSendStatus, required=True)
    data = fields.Dict()
    message = fields.String()
    code = fields.Integer()

    @validates_schema
    def check_envelope(self, body, **kwargs):
        status = body["status"]

        if status == JSendStatus.ERROR:
            if "message" not in body:
                raise ValidationError("An error must say what went wrong.", "message")
            return

        if "data" not in body:
            raise ValidationError(f"A {status.value} response must include data.", "data")
        if status == JSendStatus.FAIL and "message" not in body["data"]:
            raise ValidationError("A failure must include a message for the user.", "data")

    @staticmethod
    def of(**members):
        """
        Creates an envelope whose ``data`` has the given members, each
        either a field or a schema to nest:

        >>> listing_schema = JSendSchema.of(listing=ListingSchema())
        >>> validated_data = listing_schema.load(await response.json())
        """
        data_schema = Schema.from_dict({
            name: member if isinstance(member, fields.Field) else fields.Nested(member)
            for name, member in members.items()
        })
        typed_schema = type("TypedJSendSchema", (JSendSchema,), {"data": fields.Nested(data_schema)})
        return typed_schema()
