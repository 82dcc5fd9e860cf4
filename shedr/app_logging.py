# shedr/app_logging.py

# Logging setup for the API and CLI entrypoints.
# One stream handler on the "shedr" logger; calling it again is a no-op.

import logging

from shedr.config import settings


def configure_logging(level: str | None = None) -> None:
    logger = logging.getLogger("shedr")
    logger.setLevel((level or settings.LOG_LEVEL).upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
