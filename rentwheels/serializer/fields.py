"""
Fields
-------

Extra marshmallow fields for the types our models use.
"""

from enum import Enum
from typing import Type

from marshmallow import fields, ValidationError


class EnumField(fields.Field):
    """Dumps an :class:`~enum.Enum` member as its value, and loads it back from one."""

    def __init__(self, enum_type: Type[Enum], **kwargs):
        if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
            raise TypeError(f"Expected an enum type, got {enum_type!r} instead.")
        super().__init__(**kwargs)
        self.enum_type = enum_type
        self.choices = ", ".join(str(member.value) for member in enum_type)

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None
        return self.enum_type(value).value

    def _deserialize(self, value, attr, data, **kwargs) -> Enum:
        try:
            return self.enum_type(value)
        except (ValueError, TypeError):
            raise ValidationError(f"Must be one of {self.choices}.")


class NormalizedEmail(fields.Email):
    """An email address, loaded in lower case so that each address has a single spelling."""

    def _deserialize(self, value, attr, data, **kwargs) -> str:
        return super()._deserialize(value, attr, data, **kwargs).lower()


def Many(schema):
    """A list of the given nested schema."""
    return fields.List(fields.Nested(schema))
