# Logging setup is idempotent and takes its level from the argument or settings.

import logging

from shedr.app_logging import configure_logging
from shedr.config import Settings


def test_configure_logging_idempotent():
    logger = logging.getLogger("shedr")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    logger.handlers.clear()
    try:
        configure_logging("debug")
        configure_logging()
        assert len(logger.handlers) == 1
        assert logger.propagate is False
    finally:
        logger.handlers[:] = saved[0]
        logger.setLevel(saved[1])
        logger.propagate = saved[2]

def test_settings_defaults_and_env(monkeypatch):
    monkeypatch.setenv("SHEDR_UPCOMING_LIMIT", "5")
    s = Settings(_env_file=None)
    assert s.UPCOMING_LIMIT == 5
    assert s.REMINDER_LEAD_MINUTES == 30
    assert s.SCHEDULES_CSV is None
