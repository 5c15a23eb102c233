import logging
import sys
from typing import Optional

logger = logging.getLogger("manifestkit")

DEBUG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None


def configure_logging(debug: bool) -> None:
    """
    Route package log records to stderr, keeping stdout for command results.

    The handler is replaced on every call so it always writes to the current
    ``sys.stderr``. Debug mode also shows the level and the logger name.
    """
    global _handler

    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(DEBUG_FORMAT if debug else "%(message)s"))
    logger.addHandler(_handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
