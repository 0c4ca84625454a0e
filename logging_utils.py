"""Logging helpers shared by the library and the command line.

Every module logs under the ``yamlbridge`` logger, so an embedding application
can tune or silence the YAML bridge without touching its own loggers.
``configure_logging`` sets that logger's level from the ``--verbose/--quiet``
flags and only installs a root handler when the process has none yet.
"""

from __future__ import annotations

import logging

LOGGER_NAME = "yamlbridge"
DEFAULT_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Set the ``yamlbridge`` log level based on verbosity flags."""

    level = logging.INFO

    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not logging.getLogger().handlers:
        logging.basicConfig(format=DEFAULT_LOG_FORMAT)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` nested under ``yamlbridge``."""

    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)

    return logging.getLogger(f"{LOGGER_NAME}.{name}")
