"""
Signals
-------

Defines a number of signals that the aiohttp server uses
to manage the lifetime of the store connection.

Each signal must accept an the ``app`` argument.
"""
import asyncio

from aiohttp.web import Application
from tortoise import Tortoise, connections
from tortoise.exceptions import DBConnectionError, OperationalError

from rentwheels import config, logger


async def initialize_database(app: Application):
    """
    Connects to and generates the schema for our database.

    Nothing can be served without the store, so failing
    to connect here aborts the startup of the server.
    """
    try:
        await Tortoise.init(
            db_url=app['database_uri'],
            modules={'models': ['rentwheels.models']}
        )
        await Tortoise.generate_schemas(safe=True)
    except (DBConnectionError, OperationalError, OSError) as error:
        logger.error("Could not connect to the store at startup: %s", error)
        raise

    logger.info("Connected to the store")


async def enable_loop_debug(app: Application):
    """Turns on asyncio debugging outside of production."""
    asyncio.get_running_loop().set_debug(True)


async def close_database_connections(app: Application):
    """Closes the open database connections."""
    await connections.close_all()


def register_signals(app: Application, init_database=True):
    """Registers all the signals at the appropriate hooks."""
    if init_database:
        app.on_startup.append(initialize_database)
        app.on_cleanup.append(close_database_connections)

    if config.server_mode in ("development", "testing"):
        app.on_startup.append(enable_loop_debug)
