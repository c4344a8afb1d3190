"""
Permission
----------
"""

from abc import ABC, abstractmethod
from http import HTTPStatus
from typing import List, Optional

from aiohttp.web_urldispatcher import View


class RoutePermissionError(Exception):
    """
    Raised by a permission that doesn't hold. It either carries its own
    messages, or combines the errors of several failed permissions.
    """

    def __init__(
        self, *messages, status: Optional[HTTPStatus] = None,
        qualifier=None, sub_errors: Optional[List['RoutePermissionError']] = None
    ):
        """
        :param status: The HTTP status to respond with.
        :param qualifier: The word joining the sub-errors when printed, such as "and".
        :param sub_errors: The errors this one combines.
        """
        if messages and (qualifier is not None or sub_errors is not None):
            raise ValueError("A RoutePermissionError has either messages or sub errors, not both.")

        super().__init__(*messages)
        self.messages = messages
        self.qualifier = qualifier
        self.sub_errors = list(sub_errors) if sub_errors is not None else []
        self._status = status

    @property
    def status(self) -> HTTPStatus:
        """
        The status given to the error, otherwise the lowest status of the
        errors it combines, so that a missing credential (401) wins over a
        refused one (403). Defaults to 403.
        """
        if self._status is not None:
            return self._status
        if self.sub_errors:
            return min(sub_error.status for sub_error in self.sub_errors)
        return HTTPStatus.FORBIDDEN

    def __str__(self):
        parts = [message.lower().strip(".") for message in self.messages]
        parts += [str(sub_error) for sub_error in self.sub_errors]
        if len(self.sub_errors) > 1:
            parts[-1] = f"{self.qualifier} {parts[-1]}"
        return ", ".join(parts)

    def serialize(self) -> List[str]:
        """Lists the messages of this error and all of the errors it combines."""
        reasons = list(self.messages)
        for sub_error in self.sub_errors:
            reasons.extend(sub_error.serialize())
        return reasons


class Permission(ABC):
    """
    A check that is run before a route. Permissions are combined with ``&``.
    """

    def __and__(self, other: 'Permission') -> 'AndPermission':
        return AndPermission(*self._and_terms(), *other._and_terms())

    def _and_terms(self):
        return self,

    @abstractmethod
    async def __call__(self, view: View, **kwargs) -> None:
        """
        Evaluates the permission against the view's request.

        :raises RoutePermissionError: If the permission doesn't hold.
        """


class AndPermission(Permission):
    """Holds when all of its permissions hold, and reports every one that doesn't."""

    def __init__(self, *permissions: Permission):
        self._permissions = permissions

    async def __call__(self, view, **kwargs):
        errors = []

        for permission in self._permissions:
            try:
                await permission(view, **kwargs)
            except RoutePermissionError as error:
                errors.append(error)

        if errors:
            raise RoutePermissionError(qualifier="and", sub_errors=errors)

    def _and_terms(self):
        return self._permissions

    def __len__(self):
        return len(self._permissions)

    def __repr__(self):
        return " & ".join(repr(permission) for permission in self._permissions)
