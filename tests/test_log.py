import logging

import pytest

from amazingcore.log import get_logger, set_logger


@pytest.fixture
def restore_logger():
    previous = get_logger()
    yield
    set_logger(previous)


def test_set_then_get(restore_logger):
    logger = logging.getLogger("amazingcore-test")
    set_logger(logger)
    assert get_logger() is logger


def test_replace_logger(restore_logger):
    first = logging.getLogger("first")
    second = logging.getLogger("second")
    set_logger(first)
    set_logger(second)
    assert get_logger() is second
    assert get_logger().name == "second"


def test_clear_logger(restore_logger):
    set_logger(logging.getLogger("x"))
    set_logger(None)
    assert get_logger() is None