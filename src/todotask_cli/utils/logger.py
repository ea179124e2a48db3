"""Application logger.

Everything goes to a rotating file under the platform log directory; the
terminal is left to the rich console output of the commands.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

LOGGER_NAME = "todotask_cli"
LOG_FILE_NAME = "todotask.log"
LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3

_logger: logging.Logger | None = None


def _file_handler() -> logging.Handler:
    log_dir = Path(user_log_dir(LOGGER_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    return handler


def get_logger() -> logging.Logger:
    """The shared ``todotask_cli`` logger, configured on first use."""
    global _logger
    if _logger is None:
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        if not any(
            isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
        ):
            logger.addHandler(_file_handler())
        _logger = logger
    return _logger
