"""
Listing Permissions
-------------------
"""

from aiohttp.web_urldispatcher import View

from rentwheels import logger
from rentwheels.permissions.permission import Permission, RoutePermissionError
from rentwheels.service.access.listings import get_listing


class ClaimOwnsListing(Permission):
    """
    Asserts that the token holder is the provider of the listing in the url.

    Only checked when the app has ``enforce_listing_ownership`` set. A listing
    that doesn't exist has no owner to protect, so it passes and the
    operation itself reports that nothing matched.
    """

    async def __call__(self, view: View, **kwargs):
        if not view.request.app["enforce_listing_ownership"]:
            return

        claim = view.request.get("claim")
        if claim is None:
            raise RoutePermissionError("You don't have permission to modify this listing.")

        listing = await get_listing(int(view.request.match_info["id"]))
        if listing is None:
            return

        if listing.provider_email != claim.get("email"):
            logger.info("%s tried to modify %s owned by %s", claim.get("email"), listing, listing.provider_email)
            raise RoutePermissionError("You don't have permission to modify this listing.")
