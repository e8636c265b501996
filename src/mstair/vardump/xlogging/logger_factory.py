# File: src/mstair/vardump/xlogging/logger_factory.py
"""
Logger factory for creating CoreLogger instances.

Loggers are created through logging.getLogger() so that they take part in the
standard hierarchy (parents, propagation, pytest's caplog).
"""

import logging

from mstair.vardump.xlogging.core_logger import CoreLogger


__all__ = ["create_logger"]


def create_logger(name: str, *, level: int | str | None = None) -> CoreLogger:
    """
    Return the CoreLogger registered under `name`, creating it if needed.

    :param name: Logger name, usually `__name__`.
    :param level: Optional explicit level; otherwise the environment decides.
    :raises TypeError: If a plain logging.Logger was already registered under `name`.
    """
    existing = logging.Logger.manager.loggerDict.get(name)
    if isinstance(existing, CoreLogger):
        logger = existing
    else:
        logging_class = logging.getLoggerClass()
        logging.setLoggerClass(CoreLogger)
        try:
            logger = logging.getLogger(name)
        finally:
            logging.setLoggerClass(logging_class)
        if not isinstance(logger, CoreLogger):
            raise TypeError(f"Failed to create CoreLogger: {logger!r}")
    if level is not None:
        logger.setLevel(level)
    return logger


# End of file: src/mstair/vardump/xlogging/logger_factory.py
