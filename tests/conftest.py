"""Shared pytest fixtures."""

import logging
import sys
from collections.abc import Iterator

import pytest
import structlog

from ci_demo_utils.utils.settings import (
    reset_fetch_settings,
    reset_interface_settings,
    reset_settings,
)


@pytest.fixture(autouse=True)
def reset_global_state() -> Iterator[None]:
    """Give each test fresh settings singletons and logging configuration."""
    int_max_str_digits = sys.get_int_max_str_digits()
    reset_settings()
    reset_interface_settings()
    reset_fetch_settings()
    yield
    reset_settings()
    reset_interface_settings()
    reset_fetch_settings()

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == "ci_demo_utils":
            root_logger.removeHandler(handler)
            handler.close()
    structlog.reset_defaults()
    sys.set_int_max_str_digits(int_max_str_digits)
