"""
Logger setup for the products service.

Import as: ``from .logger import logger``
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logger(name: str = "products_api", level: str = "INFO") -> logging.Logger:
    log = logging.getLogger(name)
    log.setLevel(level)

    # avoid duplicate handlers on reimport
    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)

    return log


logger = setup_logger()
