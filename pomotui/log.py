"""Application logger writing to platformdirs user_log_dir.

The terminal belongs to the UI, so log records go to a rotating file.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "pomotui"
_LOG_FILE = "pomotui.log"
_MAX_BYTES = 1024 * 1024  # 1 MB
_BACKUP_COUNT = 3
_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

_logger: logging.Logger | None = None


def _file_handler(log_dir: Path) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_dir / _LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT))
    return handler


def get_logger(debug: bool = False, log_dir: Path | None = None) -> logging.Logger:
    """Return the package logger, attaching the file handler on first call.

    Later calls only change the level. Handlers installed by others (test
    log capture, for one) do not stop the file handler from being added.
    """
    global _logger
    level = logging.DEBUG if debug else logging.INFO
    if _logger is not None:
        _logger.setLevel(level)
        return _logger

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(level)
    if not any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
    ):
        logger.addHandler(_file_handler(log_dir or Path(user_log_dir(_APP_NAME))))
    logger.propagate = False

    _logger = logger
    return _logger
