"""
Listing Related Views
---------------------

Handles all the listing CRUD, the recent listing feed, and search.
"""
from http import HTTPStatus

from marshmallow.fields import Integer

from rentwheels.models import Listing
from rentwheels.permissions import requires, ValidToken, EmailMatchesClaim, ClaimOwnsListing
from rentwheels.serializer import JSendSchema, JSendStatus, Many, expects, returns
from rentwheels.serializer.misc import LISTING_READ_ONLY
from rentwheels.serializer.models import ListingSchema
from rentwheels.service.access.listings import (
    create_listing, delete_listing, get_listing, get_provider_listings, get_recent_listings, search_listings,
    update_listing, RECENT_LISTINGS_LIMIT
)
from rentwheels.views.base import BaseView
from rentwheels.views.decorators import match_getter

MAX_LISTINGS_LIMIT = 100


class ListingsView(BaseView):
    """
    Gets the recent listings, or adds a listing.
    """
    url = "/cars"
    name = "listings"

    @returns(
        bad_limit=(JSendSchema(), HTTPStatus.BAD_REQUEST),
        listings=JSendSchema.of(listings=Many(ListingSchema())),
    )
    async def get(self):
        """Lists the most recently added cars, newest first."""
        try:
            limit = int(self.request.query.get("limit", RECENT_LISTINGS_LIMIT))
        except ValueError:
            limit = 0

        if not 1 <= limit <= MAX_LISTINGS_LIMIT:
            return "bad_limit", {
                "status": JSendStatus.FAIL,
                "data": {"message": f"The limit must be a number between 1 and {MAX_LISTINGS_LIMIT}."}
            }

        return "listings", {
            "status": JSendStatus.SUCCESS,
            "data": {"listings": [listing.serialize() for listing in await get_recent_listings(limit)]}
        }

    @requires(ValidToken())
    @expects(ListingSchema(exclude=LISTING_READ_ONLY))
    @returns(
        not_provider=(JSendSchema(), HTTPStatus.FORBIDDEN),
        created=JSendSchema.of(listing=ListingSchema()),
    )
    async def post(self):
        """
        Lists a car on behalf of the token holder. The provider email
        defaults to the email in the token.
        """
        data = dict(self.request["data"])
        claimed_email = self.request["claim"].get("email")
        provider_email = data.pop("provider_email", None) or claimed_email

        if provider_email is None or (
            self.request.app["enforce_listing_ownership"] and provider_email != claimed_email
        ):
            return "not_provider", {
                "status": JSendStatus.FAIL,
                "data": {"message": "You may only list cars under your own email."}
            }

        listing = await create_listing(provider_email=provider_email, **data)
        return "created", {
            "status": JSendStatus.SUCCESS,
            "data": {"listing": listing.serialize()}
        }


class ListingView(BaseView):
    """
    Gets, updates, or deletes a single listing.
    """
    url = r"/cars/{id:\d+}"
    name = "listing"
    with_listing = match_getter(get_listing, 'listing', lid='id')

    @with_listing
    @returns(JSendSchema.of(listing=ListingSchema()))
    async def get(self, listing: Listing):
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"listing": listing.serialize()}
        }

    @requires(ValidToken() & ClaimOwnsListing())
    @expects(ListingSchema(exclude=LISTING_READ_ONLY + ("provider_email",), partial=True))
    @returns(JSendSchema.of(matched_count=Integer()))
    async def put(self):
        """
        Updates the descriptive fields of a listing. A listing's status and
        owner can't be changed here; a ``matched_count`` of 0 means there
        was no such listing.
        """
        matched = await update_listing(int(self.request.match_info["id"]), **self.request["data"])
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"matched_count": matched}
        }

    @requires(ValidToken() & ClaimOwnsListing())
    @returns(JSendSchema.of(deleted_count=Integer()))
    async def delete(self):
        deleted = await delete_listing(int(self.request.match_info["id"]))
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"deleted_count": deleted}
        }


class ProviderListingsView(BaseView):
    """
    Gets the listings of the token holder.
    """
    url = "/my-listings"
    name = "my_listings"

    @requires(ValidToken() & EmailMatchesClaim("email"))
    @returns(JSendSchema.of(listings=Many(ListingSchema())))
    async def get(self):
        listings = await get_provider_listings(self.request.query["email"].lower())
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"listings": [listing.serialize() for listing in listings]}
        }


class SearchView(BaseView):
    """
    Searches the listings by name.
    """
    url = "/search"
    name = "search"

    @returns(JSendSchema.of(listings=Many(ListingSchema())))
    async def get(self):
        """Finds the cars whose name contains ``q``, ignoring case. Leaving ``q`` out lists every car."""
        listings = await search_listings(self.request.query.get("q", ""))
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"listings": [listing.serialize() for listing in listings]}
        }
