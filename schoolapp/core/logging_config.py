"""
Logging setup - one console handler on the root logger.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_console_handler: Optional[logging.Handler] = None


def configure_logging(level: str = "INFO") -> None:
    """Attach the stdout handler to the root logger (once) and set its level."""
    global _console_handler
    root = logging.getLogger()
    if _console_handler is None:
        _console_handler = logging.StreamHandler(sys.stdout)
        _console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    if _console_handler not in root.handlers:
        root.addHandler(_console_handler)
    root.setLevel(level.upper())
