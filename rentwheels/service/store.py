"""
Store
-----

Every call into the store goes through :func:`store_operation`, which bounds
it by the configured timeout and turns connection failures into a single
:class:`StoreUnavailableError` that the API reports as a 503.
"""
import asyncio
from functools import wraps

from tortoise.exceptions import DBConnectionError, IntegrityError, OperationalError

from rentwheels import config, logger


class StoreUnavailableError(Exception):
    """Raised when the store can't be reached or doesn't respond in time."""


def store_operation(original_function):
    """
    Wraps a coroutine function that talks to the store.

    Integrity errors are passed through untouched, as they
    are a result of the data rather than of the store.

    :raises StoreUnavailableError: If the store fails or times out.
    """

    @wraps(original_function)
    async def new_func(*args, **kwargs):
        timeout = config.store_timeout.total_seconds()
        try:
            return await asyncio.wait_for(original_function(*args, **kwargs), timeout=timeout)
        except IntegrityError:
            raise
        except asyncio.TimeoutError as error:
            logger.error("Store operation %s timed out after %ss", original_function.__name__, timeout)
            raise StoreUnavailableError(f"The store did not respond within {timeout} seconds.") from error
        except (DBConnectionError, OperationalError) as error:
            logger.error("Store operation %s failed: %s", original_function.__name__, error)
            raise StoreUnavailableError("The store is currently unavailable.") from error

    return new_func
