import os
from datetime import timedelta

server_mode = os.getenv("SERVER_MODE", "development")
"""The operational mode of the server."""

port = int(os.getenv("PORT", 3000))
"""The port the server listens on."""

api_root = os.getenv("API_ROOT", "")
"""The base url for the api."""

database_url = os.getenv("DATABASE_URL", "sqlite://db.sqlite3")
"""The tortoise connection url of the listing, booking, and user store."""

access_token_secret = os.getenv("ACCESS_TOKEN_SECRET")
"""The secret used to sign and verify access tokens."""

development_token_secret = "rentwheels-development-secret"
"""The signing secret used when running in development without a configured secret."""

access_token_lifetime = timedelta(days=7)
"""How long an issued access token stays valid."""

store_timeout = timedelta(seconds=float(os.getenv("STORE_TIMEOUT", 5)))
"""The maximum time a single store operation may take."""

enforce_listing_ownership = os.getenv("ENFORCE_LISTING_OWNERSHIP", "true").lower() not in ("0", "false", "no")
"""Whether only the provider of a listing may update or delete it."""

sentry_dsn = os.getenv("SENTRY_DSN")
"""The sentry DSN to report exceptions to."""
