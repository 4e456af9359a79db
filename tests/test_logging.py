import logging

from schoolapp.core.logging_config import LOG_FORMAT, configure_logging


def test_configure_logging_adds_one_handler():
    root = logging.getLogger()
    configure_logging("INFO")
    configure_logging("DEBUG")
    ours = [h for h in root.handlers
            if h.formatter is not None and h.formatter._fmt == LOG_FORMAT]
    assert len(ours) == 1
    assert root.level == logging.DEBUG
