import pytest
from aiohttp import web
from aiohttp.test_utils import make_mocked_request

from rentwheels.service.verify_token import extract_token, verify_token, MissingCredentialsError
from rentwheels.service.tokens import TokenVerificationError


@pytest.mark.parametrize(("header", "token"), [
    ("Bearer abc.def.ghi", "abc.def.ghi"),
    ("Token abc", "abc"),
    ("Bearer a b", "a b"),
    ("Bearer", ""),
    ("", ""),
])
def test_extract_token(header, token):
    """Assert that the token is everything after the first space."""
    assert extract_token(header) == token


@pytest.fixture
def token_app(token_service):
    app = web.Application()
    app["token_service"] = token_service
    return app


def test_verify_token(token_app, token_service):
    token = token_service.issue({"email": "renter@example.com"})
    request = make_mocked_request("GET", "/", headers={"Authorization": f"Bearer {token}"}, app=token_app)
    assert verify_token(request)["email"] == "renter@example.com"


def test_verify_token_missing_header(token_app):
    request = make_mocked_request("GET", "/", app=token_app)
    with pytest.raises(MissingCredentialsError):
        verify_token(request)


def test_verify_token_empty(token_app):
    request = make_mocked_request("GET", "/", headers={"Authorization": "Bearer"}, app=token_app)
    with pytest.raises(TokenVerificationError):
        verify_token(request)
