"""
Fields
------
"""
from enum import Enum
from typing import Optional, Type

from tortoise.exceptions import ConfigurationError
from tortoise.fields import CharField


class EnumField(CharField):
    """
    A column holding a member of a string :class:`~enum.Enum`, stored as its value.
    Loading a value the enum doesn't have is an error, since only
    the server writes these columns.
    """

    def __init__(self, enum_type: Type[Enum], **kwargs):
        if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
            raise ConfigurationError(f"{enum_type!r} is not an Enum.")
        super().__init__(max_length=32, **kwargs)
        self.enum_type = enum_type

    def to_db_value(self, value, instance) -> Optional[str]:
        return None if value is None else self.enum_type(value).value

    def to_python_value(self, value) -> Optional[Enum]:
        if value is None or isinstance(value, self.enum_type):
            return value
        try:
            return self.enum_type(value)
        except ValueError:
            raise ValueError(f"{value!r} is not a valid {self.enum_type.__name__}.")


MAX_ID = 2 ** 31 - 1
"""The largest value an ``IntField`` primary key can hold."""


def is_storable_id(value: int) -> bool:
    """Whether the value could be the id of a stored row."""
    return 1 <= value <= MAX_ID
