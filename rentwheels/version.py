"""The version and distribution name of the server, as reported to sentry and the CLI."""

__version__ = "1.0.0"
name = "rentwheels-server"
