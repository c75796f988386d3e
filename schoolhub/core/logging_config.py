# /schoolhub/core/logging_config.py

import logging

from .config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = None) -> None:
    """Installs a single stream handler on the root logger. Safe to call twice."""
    logging.basicConfig(level=level or settings.LOG_LEVEL, format=LOG_FORMAT)
    logging.getLogger("schoolhub").setLevel(level or settings.LOG_LEVEL)
