"""
Users
-----
"""
from typing import List, Tuple

from tortoise.exceptions import IntegrityError

from rentwheels import logger
from rentwheels.models import User
from rentwheels.service.store import store_operation


@store_operation
async def get_users() -> List[User]:
    return await User.all().order_by("id")


@store_operation
async def register_user(email: str, **profile) -> Tuple[User, bool]:
    """
    Registers a user, unless one with that email already exists.

    Emails are stored in lower case, so registering twice, however
    the email is spelled, is not an error; the existing user is
    returned untouched instead.

    :return: The user, and whether they were created.
    """
    email = email.lower()
    existing = await User.filter(email=email).first()
    if existing is not None:
        return existing, False

    try:
        user = await User.create(email=email, **profile)
    except IntegrityError:
        # registered concurrently between the lookup and the insert
        existing = await User.filter(email=email).first()
        if existing is None:
            raise
        return existing, False

    logger.info("Registered user %s", user)
    return user, True
