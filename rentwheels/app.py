"""
App
-----
"""

import sentry_sdk
from aiohttp import web
from sentry_sdk.integrations.aiohttp import AioHttpIntegration

from rentwheels import config, logger
from rentwheels.middleware import validate_token_middleware, store_error_middleware, security_headers_middleware
from rentwheels.service.manager.booking_manager import BookingManager
from rentwheels.service.tokens import TokenService
from rentwheels.signals import register_signals
from rentwheels.version import __version__, name
from rentwheels.views import register_views, index


class ConfigurationError(Exception):
    """Raised when the server is missing a setting it can't run without."""


def token_secret() -> str:
    """
    Gets the configured token secret, falling back to the
    development secret when running in development.

    :raises ConfigurationError: If there is no secret outside development.
    """
    if config.access_token_secret:
        return config.access_token_secret

    if config.server_mode == "development":
        logger.warning("No ACCESS_TOKEN_SECRET set, using the development secret.")
        return config.development_token_secret

    raise ConfigurationError("ACCESS_TOKEN_SECRET must be set outside of development.")


def build_app(db_uri=None, secret=None, enforce_listing_ownership=None, init_database=True):
    """Sets up the app with its services, views, and signals."""
    app = web.Application(middlewares=[
        security_headers_middleware, store_error_middleware, validate_token_middleware
    ])

    app['database_uri'] = db_uri if db_uri is not None else config.database_url
    app['token_service'] = TokenService(secret if secret is not None else token_secret())
    app['booking_manager'] = BookingManager()
    app['enforce_listing_ownership'] = (
        enforce_listing_ownership if enforce_listing_ownership is not None else config.enforce_listing_ownership
    )

    if not app['enforce_listing_ownership']:
        logger.warning("Listing ownership is not enforced; any signed in user may edit or delete any listing.")

    register_signals(app, init_database)

    # register views
    register_views(app, config.api_root)
    app.router.add_get("/", index)

    # set up sentry exception tracking
    if config.server_mode != "development" and config.sentry_dsn:
        logger.info("Starting Sentry Logging")
        sentry_sdk.init(
            dsn=config.sentry_dsn,
            environment=config.server_mode,
            release=f"{name}@{__version__}",
            integrations=[AioHttpIntegration()],
        )

    return app
