from datetime import timedelta
from itertools import count

import pytest
from aiohttp.test_utils import TestClient
from faker import Faker
from faker.providers import internet, person, company
from tortoise import Tortoise, connections

from rentwheels.app import build_app
from rentwheels.models import Listing, User
from rentwheels.service.manager.booking_manager import BookingManager
from rentwheels.service.tokens import TokenService

fake = Faker()
fake.add_provider(internet)
fake.add_provider(person)
fake.add_provider(company)

TOKEN_SECRET = "rentwheels-test-secret"


@pytest.fixture
def database_url():
    return "sqlite://:memory:"


@pytest.fixture
async def database(database_url):
    await Tortoise.init(
        db_url=database_url,
        modules={'models': ['rentwheels.models']},
    )
    await Tortoise.generate_schemas(safe=True)
    yield
    await connections.close_all()


@pytest.fixture
def token_service():
    return TokenService(TOKEN_SECRET)


@pytest.fixture
def auth_header(token_service):
    """Creates the Authorization header of a user with the given email."""

    def create_header(email):
        return {"Authorization": f"Bearer {token_service.issue({'email': email})}"}

    return create_header


@pytest.fixture
def expired_auth_header():
    """Creates the Authorization header of a user whose token has expired."""
    expired_service = TokenService(TOKEN_SECRET, lifetime=timedelta(seconds=-10))

    def create_header(email):
        return {"Authorization": f"Bearer {expired_service.issue({'email': email})}"}

    return create_header


@pytest.fixture
def app_factory(database):

    def create_app(enforce_listing_ownership=True):
        return build_app(
            secret=TOKEN_SECRET,
            enforce_listing_ownership=enforce_listing_ownership,
            init_database=False,  # we get the database from a fixture
        )

    return create_app


@pytest.fixture
async def client(aiohttp_client, app_factory) -> TestClient:
    return await aiohttp_client(app_factory())


@pytest.fixture
def booking_manager(database):
    return BookingManager()


@pytest.fixture
def random_user_factory(database):

    async def create_user():
        return await User.create(email=fake.unique.email(), name=fake.name())

    return create_user


@pytest.fixture
def random_listing_factory(database):
    listing_number = count(1)

    async def create_listing(provider_email=None, name=None, **attributes):
        return await Listing.create(
            provider_email=provider_email if provider_email is not None else fake.unique.email(),
            name=name if name is not None else f"{fake.company()} Model {next(listing_number)}",
            price_per_day=attributes.pop("price_per_day", 49.5),
            location=attributes.pop("location", fake.city()),
            **attributes
        )

    return create_listing


@pytest.fixture
async def random_user(random_user_factory) -> User:
    """Creates a random user in the database."""
    return await random_user_factory()


@pytest.fixture
async def random_listing(random_listing_factory) -> Listing:
    """Creates a random listing in the database."""
    return await random_listing_factory()
