"""
Purpose:
- One place to configure stdlib logging from settings.log_level.
"""

import logging

from .settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
    )
