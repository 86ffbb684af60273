"""Logging setup for the service process."""

import logging

from admissions.infrastructure.config.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    """
    Install a console handler on the ``admissions`` logger at the configured level.

    Safe to call more than once; the handler is only added the first time.
    """
    logger = logging.getLogger("admissions")
    logger.setLevel(settings.log_level)

    if not any(getattr(h, "_admissions", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._admissions = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    # SQL echo is governed by db_echo, keep the engine logger quiet otherwise
    if not settings.db_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
