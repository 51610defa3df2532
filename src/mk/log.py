from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

from mk import consts


def get_logger(name: str = consts.LOGGER_NAME) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(*, level: str | None = None, stream: TextIO | None = None) -> None:
    """Send `mk` log records to stderr at `level` (a name such as "debug").

    Without `level`, `$MK_LOG_LEVEL` is used, then the default.
    """
    if level is None:
        level = os.environ.get(consts.ENV_LOG_LEVEL, consts.LOG_LEVEL_DEFAULT)
    normalized = level.strip().upper()
    level_value = getattr(logging, normalized, logging.WARNING)
    if not isinstance(level_value, int):
        level_value = logging.WARNING

    if stream is None:
        stream = sys.stderr
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s %(message)s"))

    logger = get_logger()
    logger.setLevel(level_value)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.propagate = False
