"""Package-wide logger for loctree.

Tree construction and nearest-location searches report summaries at DEBUG;
nothing is logged from inside the recursive walks.
"""

import logging

LOGGER_NAME = "loctree"
LOG_FORMAT = "[%(name)s] %(levelname)s: %(message)s"

logger = logging.getLogger(LOGGER_NAME)

if not logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)

logger.setLevel(logging.INFO)


def set_debug(enabled: bool) -> None:
    logger.setLevel(logging.DEBUG if enabled else logging.INFO)


def is_debug() -> bool:
    """True when DEBUG summaries would be emitted, so callers can skip
    computing values that only feed a log line."""
    return logger.isEnabledFor(logging.DEBUG)
