import logging

import pytest

from logging_utils import LOGGER_NAME, configure_logging, get_logger


@pytest.fixture(autouse=True)
def restore_level():
    logger = logging.getLogger(LOGGER_NAME)
    original = logger.level
    yield
    logger.setLevel(original)


def test_module_loggers_nest_under_the_library_logger():
    assert get_logger("yamlmodule.module").name == "yamlbridge.yamlmodule.module"
    assert get_logger("yamlbridge.cli").name == "yamlbridge.cli"
    assert get_logger(LOGGER_NAME) is logging.getLogger(LOGGER_NAME)


@pytest.mark.parametrize(
    "flags, level",
    [
        ({}, logging.INFO),
        ({"verbose": True}, logging.DEBUG),
        ({"quiet": True}, logging.ERROR),
    ],
)
def test_configure_logging_sets_library_level(flags, level):
    logger = configure_logging(**flags)

    assert logger is logging.getLogger(LOGGER_NAME)
    assert logger.level == level


def test_verbose_debug_messages_reach_handlers(caplog):
    configure_logging(verbose=True)

    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        get_logger("jsonmodule").debug("encoded %d values", 3)

    assert ("yamlbridge.jsonmodule", logging.DEBUG, "encoded 3 values") in caplog.record_tuples
