"""Unit tests for logging setup."""

import logging

import pytest

from sociallogin.config import Settings
from sociallogin.util.logging import get_logger, setup_logging


@pytest.mark.parametrize(
    "environment,debug,expected",
    [
        ("development", False, logging.INFO),
        ("production", False, logging.WARNING),
        ("production", True, logging.DEBUG),
        ("test", False, logging.INFO),
    ],
)
def test_level_follows_environment(environment, debug, expected):
    setup_logging(Settings(environment=environment, debug=debug))

    assert logging.getLogger().level == expected
    assert get_logger("sociallogin").level == expected


def test_sql_logging_is_quiet_unless_debug():
    setup_logging(Settings(environment="development", debug=False))

    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
