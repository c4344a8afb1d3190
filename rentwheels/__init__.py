"""
The RentWheels API server: a small marketplace where providers list
cars for rent, and signed in users browse, search, and book them.
"""

import logging

from rentwheels.config import server_mode

logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG if server_mode == "development" else logging.INFO)

if not logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter('%(asctime)s %(name)-12s %(levelname)-8s %(message)s'))
    logger.addHandler(_handler)
