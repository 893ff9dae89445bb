"""
logging setup

one place to configure the root logger so every module can just do
logger = logging.getLogger(__name__) and not care about handlers.
"""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None


def configure_logging(level: str = "INFO") -> logging.Handler:
    """
    Attaches the service's stream handler to the root logger and sets the level.

    Calling it again (tests, reloads) only updates the level instead of
    stacking duplicate handlers.
    """
    global _handler

    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    if _handler not in root.handlers:
        root.addHandler(_handler)
    root.setLevel(level.upper())
    return _handler
