"""
User Related Views
-------------------------

Handles user registration and listing.
"""
from marshmallow.fields import String

from rentwheels.serializer import JSendSchema, JSendStatus, Many, expects, returns
from rentwheels.serializer.models import UserSchema
from rentwheels.service.access.users import get_users, register_user
from rentwheels.views.base import BaseView


class UsersView(BaseView):
    """
    Gets or adds to the list of users.
    """
    url = "/users"
    name = "users"

    @returns(JSendSchema.of(users=Many(UserSchema())))
    async def get(self):
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"users": [user.serialize() for user in await get_users()]}
        }

    @expects(UserSchema(only=('email', 'name', 'photo_url')))
    @returns(JSendSchema.of(user=UserSchema(), message=String()))
    async def post(self):
        """
        Saves a user's profile after they sign up or log in. This may be done
        any number of times; once a user exists, their profile is returned
        unchanged along with a message saying so.
        """
        user, created = await register_user(**self.request["data"])

        data = {"user": user.serialize()}
        if not created:
            data["message"] = "User already exists."

        return {
            "status": JSendStatus.SUCCESS,
            "data": data
        }
