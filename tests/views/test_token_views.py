from aiohttp.test_utils import TestClient
from marshmallow.fields import String

from rentwheels.serializer import JSendSchema

token_schema = JSendSchema.of(token=String())


class TestTokenView:

    async def test_issue_token(self, client: TestClient, token_service):
        """Assert that the issued token verifies and carries the supplied identity."""
        response = await client.post("/jwt", json={"email": "renter@example.com", "name": "Renter"})
        response_data = token_schema.load(await response.json())
        assert response.status == 200

        claim = token_service.verify_token(response_data["data"]["token"])
        assert claim["email"] == "renter@example.com"
        assert claim["name"] == "Renter"
        assert claim["exp"] > claim["iat"]

    async def test_issued_token_is_accepted(self, client: TestClient, random_listing):
        response = await client.post("/jwt", json={"email": "renter@example.com"})
        token = token_schema.load(await response.json())["data"]["token"]

        response = await client.post(
            "/bookings", json={"listing_id": random_listing.id}, headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status == 200

    async def test_issue_token_without_email(self, client: TestClient):
        response = await client.post("/jwt", json={"name": "Renter"})
        response_data = JSendSchema().load(await response.json())
        assert response.status == 400
        assert "email" in response_data["data"]["errors"]

    async def test_issue_token_email_case(self, client: TestClient, token_service, random_listing):
        """Assert that the token carries the email in lower case, matching what is stored."""
        response = await client.post("/jwt", json={"email": "Renter@Example.com"})
        token = token_schema.load(await response.json())["data"]["token"]
        assert token_service.verify_token(token)["email"] == "renter@example.com"

        await client.post(
            "/bookings", json={"listing_id": random_listing.id}, headers={"Authorization": f"Bearer {token}"}
        )
        response = await client.get(
            "/bookings", params={"email": "RENTER@example.com"}, headers={"Authorization": f"Bearer {token}"}
        )
        response_data = JSendSchema().load(await response.json())
        assert response.status == 200
        assert len(response_data["data"]["bookings"]) == 1
