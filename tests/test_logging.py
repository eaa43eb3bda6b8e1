"""test_logging: RichHandler wiring."""

import logging

from rich.logging import RichHandler

from core.logging import LOGGER_NAMES, configure_logging


def test_configure_is_idempotent():
    configure_logging("INFO")
    configure_logging("INFO")

    for name in LOGGER_NAMES:
        handlers = [h for h in logging.getLogger(name).handlers if isinstance(h, RichHandler)]
        assert len(handlers) == 1


def test_level_resolution():
    assert configure_logging("debug") == logging.DEBUG
    assert logging.getLogger("core").level == logging.DEBUG
    assert configure_logging(logging.ERROR) == logging.ERROR
    assert configure_logging("not-a-level") == logging.WARNING
