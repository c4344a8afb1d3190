"""
Listings
========

Create, read, update, delete, and search over the listings in the store.

Updates and deletes report how many listings they affected rather than
raising when nothing matched, so a caller can tell a no-op from a change.
"""

from typing import List, Optional

from rentwheels import logger
from rentwheels.models import Listing, is_storable_id
from rentwheels.service.store import store_operation

RECENT_LISTINGS_LIMIT = 6
"""The default number of listings in the recent listing feed."""


@store_operation
async def create_listing(provider_email: str, name: str, **attributes) -> Listing:
    listing = await Listing.create(provider_email=provider_email, name=name, **attributes)
    logger.info("Provider %s listed %s", provider_email, listing)
    return listing


@store_operation
async def get_listing(lid: int) -> Optional[Listing]:
    """Gets the listing with the given id."""
    if not is_storable_id(lid):
        return None
    return await Listing.filter(id=lid).first()


@store_operation
async def get_recent_listings(limit: int = RECENT_LISTINGS_LIMIT) -> List[Listing]:
    """Gets the most recently created listings, newest first."""
    return await Listing.all().order_by("-id").limit(limit)


@store_operation
async def search_listings(query: str = "") -> List[Listing]:
    """
    Gets the listings whose name contains the query, ignoring case.

    An empty query matches every listing.
    """
    if not query:
        return await Listing.all().order_by("id")
    return await Listing.filter(name__icontains=query).order_by("id")


@store_operation
async def get_provider_listings(email: str) -> List[Listing]:
    """Gets all the listings made by the provider with the given email."""
    return await Listing.filter(provider_email=email).order_by("-id")


@store_operation
async def update_listing(lid: int, **patch) -> int:
    """
    Merges the given fields into the listing.

    :return: The number of listings that matched the id.
    """
    if not is_storable_id(lid):
        return 0
    if not patch:
        return await Listing.filter(id=lid).count()
    matched = await Listing.filter(id=lid).update(**patch)
    logger.debug("Updated listing %s with %s (%s matched)", lid, ", ".join(patch), matched)
    return matched


@store_operation
async def delete_listing(lid: int) -> int:
    """
    Deletes the listing.

    :return: The number of listings deleted.
    """
    if not is_storable_id(lid):
        return 0
    deleted = await Listing.filter(id=lid).delete()
    logger.info("Deleted listing %s (%s removed)", lid, deleted)
    return deleted
