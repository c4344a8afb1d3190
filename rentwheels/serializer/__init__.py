"""
.. autoclasstree:: rentwheels.serializer

Schemas for everything that goes in and out of the API, along with
the decorators that apply them to the routes.
"""

from .fields import EnumField, Many, NormalizedEmail
from .jsend import JSendSchema, JSendStatus, fail, error
from .decorators import expects, returns, jsend_response
