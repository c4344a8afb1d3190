import pytest
from aiohttp.test_utils import TestClient
from marshmallow.fields import Integer

from rentwheels.models import Listing, ListingStatus
from rentwheels.serializer import JSendSchema, JSendStatus, Many
from rentwheels.serializer.models import ListingSchema
from rentwheels.service.store import StoreUnavailableError

listings_schema = JSendSchema.of(listings=Many(ListingSchema()))
listing_schema = JSendSchema.of(listing=ListingSchema())


class TestListingsView:

    async def test_get_recent_listings(self, client: TestClient, random_listing_factory):
        """Assert that the feed has the six newest listings, newest first."""
        listings = [await random_listing_factory() for _ in range(10)]
        response = await client.get("/cars")
        response_data = listings_schema.load(await response.json())
        assert response.status == 200
        assert [listing["id"] for listing in response_data["data"]["listings"]] == \
            [listing.id for listing in reversed(listings[-6:])]

    async def test_get_recent_listings_limit(self, client: TestClient, random_listing_factory):
        for _ in range(3):
            await random_listing_factory()
        response = await client.get("/cars", params={"limit": 2})
        response_data = listings_schema.load(await response.json())
        assert len(response_data["data"]["listings"]) == 2

    async def test_get_recent_listings_bad_limit(self, client: TestClient):
        response = await client.get("/cars", params={"limit": "lots"})
        response_data = JSendSchema().load(await response.json())
        assert response.status == 400
        assert response_data["status"] == JSendStatus.FAIL

    async def test_create_listing(self, client: TestClient, auth_header):
        """Assert that a provider can list a car, which starts out available."""
        request_data = {
            "name": "Toyota Corolla",
            "price_per_day": 45.0,
            "location": "Dhaka",
            "image_url": "https://example.com/corolla.jpg",
        }
        response = await client.post("/cars", json=request_data, headers=auth_header("provider@example.com"))
        response_data = listing_schema.load(await response.json())
        assert response.status == 200
        listing = response_data["data"]["listing"]
        assert listing["name"] == "Toyota Corolla"
        assert listing["provider_email"] == "provider@example.com"
        assert listing["status"] == ListingStatus.AVAILABLE
        assert await Listing.filter(provider_email="provider@example.com").count() == 1

    async def test_create_listing_for_someone_else(self, client: TestClient, auth_header):
        response = await client.post(
            "/cars", json={"name": "Honda Civic", "provider_email": "victim@example.com"},
            headers=auth_header("provider@example.com")
        )
        assert response.status == 403
        assert await Listing.all().count() == 0

    async def test_create_listing_with_status(self, client: TestClient, auth_header):
        """Assert that a listing can't be created already booked."""
        response = await client.post(
            "/cars", json={"name": "Honda Civic", "status": "Booked"}, headers=auth_header("provider@example.com")
        )
        response_data = JSendSchema().load(await response.json())
        assert response.status == 400
        assert "status" in response_data["data"]["errors"]

    async def test_create_listing_no_token(self, client: TestClient):
        response = await client.post("/cars", json={"name": "Honda Civic"})
        response_data = JSendSchema().load(await response.json())
        assert response.status == 401
        assert response_data["status"] == JSendStatus.FAIL

    async def test_create_listing_bad_token(self, client: TestClient):
        response = await client.post(
            "/cars", json={"name": "Honda Civic"}, headers={"Authorization": "Bearer not-a-token"}
        )
        assert response.status == 403

    async def test_create_listing_expired_token(self, client: TestClient, expired_auth_header):
        response = await client.post(
            "/cars", json={"name": "Honda Civic"}, headers=expired_auth_header("provider@example.com")
        )
        response_data = JSendSchema().load(await response.json())
        assert response.status == 403
        assert "Token is expired." in response_data["data"]["reasons"]

    async def test_store_unavailable(self, client: TestClient, monkeypatch):
        """Assert that an unreachable store is reported as a 503 for the client to retry."""

        async def unavailable(*args, **kwargs):
            raise StoreUnavailableError("The store is currently unavailable.")

        monkeypatch.setattr("rentwheels.views.listings.get_recent_listings", unavailable)
        response = await client.get("/cars")
        response_data = JSendSchema().load(await response.json())
        assert response.status == 503
        assert response_data["status"] == JSendStatus.ERROR


class TestListingView:

    async def test_get_listing(self, client: TestClient, random_listing):
        response = await client.get(f"/cars/{random_listing.id}")
        response_data = listing_schema.load(await response.json())
        assert response.status == 200
        assert response_data["data"]["listing"]["name"] == random_listing.name

    async def test_get_missing_listing(self, client: TestClient, database):
        response = await client.get("/cars/1000")
        assert response.status == 404

    async def test_get_listing_id_out_of_range(self, client: TestClient, database):
        """Assert that an id too large for the store is just a listing that doesn't exist."""
        response = await client.get("/cars/" + "9" * 30)
        response_data = JSendSchema().load(await response.json())
        assert response.status == 404
        assert response_data["status"] == JSendStatus.FAIL

    async def test_update_listing(self, client: TestClient, random_listing, auth_header):
        """Assert that the provider can change the price, and only the given fields change."""
        response = await client.put(
            f"/cars/{random_listing.id}", json={"price_per_day": 60.0},
            headers=auth_header(random_listing.provider_email)
        )
        response_data = JSendSchema.of(matched_count=Integer()).load(await response.json())
        assert response.status == 200
        assert response_data["data"]["matched_count"] == 1

        listing = await Listing.get(id=random_listing.id)
        assert listing.price_per_day == 60.0
        assert listing.name == random_listing.name

    async def test_update_missing_listing(self, client: TestClient, auth_header, database):
        response = await client.put(
            "/cars/1000", json={"price_per_day": 60.0}, headers=auth_header("provider@example.com")
        )
        response_data = JSendSchema.of(matched_count=Integer()).load(await response.json())
        assert response.status == 200
        assert response_data["data"]["matched_count"] == 0

    async def test_update_listing_status(self, client: TestClient, random_listing, auth_header):
        """Assert that a listing can't be marked booked by editing it."""
        response = await client.put(
            f"/cars/{random_listing.id}", json={"status": "Booked"},
            headers=auth_header(random_listing.provider_email)
        )
        assert response.status == 400
        assert (await Listing.get(id=random_listing.id)).status == ListingStatus.AVAILABLE

    async def test_update_someone_elses_listing(self, client: TestClient, random_listing, auth_header):
        response = await client.put(
            f"/cars/{random_listing.id}", json={"price_per_day": 1.0},
            headers=auth_header("intruder@example.com")
        )
        assert response.status == 403
        assert (await Listing.get(id=random_listing.id)).price_per_day == random_listing.price_per_day

    async def test_update_listing_no_token(self, client: TestClient, random_listing):
        response = await client.put(f"/cars/{random_listing.id}", json={"price_per_day": 1.0})
        assert response.status == 401

    async def test_update_listing_without_ownership(
        self, aiohttp_client, app_factory, random_listing, auth_header
    ):
        """Assert that any token holder may edit a listing when ownership isn't enforced."""
        client = await aiohttp_client(app_factory(enforce_listing_ownership=False))
        response = await client.put(
            f"/cars/{random_listing.id}", json={"price_per_day": 1.0},
            headers=auth_header("someone@example.com")
        )
        assert response.status == 200
        assert (await Listing.get(id=random_listing.id)).price_per_day == 1.0

    async def test_delete_listing(self, client: TestClient, random_listing, auth_header):
        response = await client.delete(
            f"/cars/{random_listing.id}", headers=auth_header(random_listing.provider_email)
        )
        response_data = JSendSchema.of(deleted_count=Integer()).load(await response.json())
        assert response.status == 200
        assert response_data["data"]["deleted_count"] == 1
        assert not await Listing.filter(id=random_listing.id).exists()

    async def test_delete_missing_listing(self, client: TestClient, auth_header, database):
        response = await client.delete("/cars/1000", headers=auth_header("provider@example.com"))
        response_data = JSendSchema.of(deleted_count=Integer()).load(await response.json())
        assert response.status == 200
        assert response_data["data"]["deleted_count"] == 0

    async def test_delete_someone_elses_listing(self, client: TestClient, random_listing, auth_header):
        response = await client.delete(f"/cars/{random_listing.id}", headers=auth_header("intruder@example.com"))
        assert response.status == 403
        assert await Listing.filter(id=random_listing.id).exists()

    @pytest.mark.parametrize("method", ["put", "delete"])
    async def test_modify_listing_id_out_of_range(self, client: TestClient, auth_header, database, method):
        response = await client.request(
            method, "/cars/" + "9" * 30, json={"price_per_day": 1.0}, headers=auth_header("provider@example.com")
        )
        response_data = JSendSchema().load(await response.json())
        assert response.status == 200
        assert 0 in response_data["data"].values()


class TestProviderListingsView:

    async def test_get_own_listings_any_case(self, client: TestClient, random_listing_factory, auth_header):
        listing = await random_listing_factory(provider_email="provider@example.com")
        response = await client.get(
            "/my-listings", params={"email": "Provider@Example.com"}, headers=auth_header("provider@example.com")
        )
        response_data = listings_schema.load(await response.json())
        assert response.status == 200
        assert [item["id"] for item in response_data["data"]["listings"]] == [listing.id]

    async def test_get_own_listings(self, client: TestClient, random_listing_factory, auth_header):
        own = [await random_listing_factory(provider_email="provider@example.com") for _ in range(2)]
        await random_listing_factory()

        response = await client.get(
            "/my-listings", params={"email": "provider@example.com"}, headers=auth_header("provider@example.com")
        )
        response_data = listings_schema.load(await response.json())
        assert response.status == 200
        assert [listing["id"] for listing in response_data["data"]["listings"]] == \
            [listing.id for listing in reversed(own)]

    async def test_get_someone_elses_listings(self, client: TestClient, auth_header, database):
        response = await client.get(
            "/my-listings", params={"email": "victim@example.com"}, headers=auth_header("provider@example.com")
        )
        assert response.status == 403

    async def test_get_listings_without_email(self, client: TestClient, auth_header, database):
        response = await client.get("/my-listings", headers=auth_header("provider@example.com"))
        assert response.status == 403

    async def test_get_listings_no_token(self, client: TestClient, database):
        """Assert that a missing token takes precedence over a mismatched email."""
        response = await client.get("/my-listings", params={"email": "provider@example.com"})
        assert response.status == 401


class TestSearchView:

    async def test_search(self, client: TestClient, random_listing_factory):
        corolla = await random_listing_factory(name="Toyota Corolla")
        await random_listing_factory(name="Honda Civic")

        response = await client.get("/search", params={"q": "toyota"})
        response_data = listings_schema.load(await response.json())
        assert response.status == 200
        assert [listing["id"] for listing in response_data["data"]["listings"]] == [corolla.id]

    async def test_search_without_query(self, client: TestClient, random_listing_factory):
        for _ in range(3):
            await random_listing_factory()

        response = await client.get("/search")
        response_data = listings_schema.load(await response.json())
        assert len(response_data["data"]["listings"]) == 3

    async def test_search_no_match(self, client: TestClient, random_listing):
        response = await client.get("/search", params={"q": "zzz-not-a-car"})
        response_data = listings_schema.load(await response.json())
        assert response.status == 200
        assert response_data["data"]["listings"] == []
