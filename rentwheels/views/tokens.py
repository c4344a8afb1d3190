"""
Token Views
-----------
"""
from marshmallow.fields import String

from rentwheels.serializer import JSendSchema, JSendStatus, expects, returns
from rentwheels.serializer.misc import ClaimSchema
from rentwheels.views.base import BaseView


class TokenView(BaseView):
    """
    Issues access tokens.
    """
    url = "/jwt"
    name = "token"

    @expects(ClaimSchema())
    @returns(JSendSchema.of(token=String()))
    async def post(self):
        """
        Issues a token for the supplied identity, which must include an email.
        The token is valid for seven days and must be sent with each private
        request as ``Authorization: Bearer $TOKEN``.
        """
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"token": self.token_service.issue(self.request["data"])}
        }
