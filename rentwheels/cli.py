"""
The entry point for the CLI tool
"""
import sys

import uvloop
from aiohttp import web
from tortoise.exceptions import DBConnectionError, OperationalError

from rentwheels import config, logger
from rentwheels.app import build_app, ConfigurationError
from rentwheels.version import __version__, name


def run():
    """Builds the app from the environment and serves it on a uvloop event loop."""
    logger.info(f'Starting {name} %s!', __version__)

    try:
        app = build_app()
        web.run_app(app, port=config.port, loop=uvloop.new_event_loop())
    except ConfigurationError as error:
        logger.error("%s Exiting.", error)
        sys.exit(1)
    except (DBConnectionError, OperationalError, OSError) as error:
        logger.error("The server failed to start (%s). Exiting.", error)
        sys.exit(1)


if __name__ == '__main__':
    run()
