# File: src/mstair/vardump/xlogging/core_logger.py
"""
Structured logging with environment-driven configuration.

Example:
    >>> from mstair.vardump.xlogging.logger_factory import create_logger
    >>> LOG = create_logger(__name__)
    >>> with LOG.prefix_with("[dump]"):
    ...     LOG.debug("eliding %d elements", 2)

Design:
- Only the root logger owns handlers/formatters; CoreLogger instances propagate.
- Log levels are controlled per-logger (via environment and LogLevelConfig).
- initialize_root() is the only supported entry point for root setup.
"""

from __future__ import annotations

import contextvars
import logging
import os
import re
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, TextIO

from mstair.vardump.xlogging.logger_constants import TRACE, initialize_logger_constants
from mstair.vardump.xlogging.logger_formatter import CoreFormatter
from mstair.vardump.xlogging.logger_util import LogLevelConfig


__all__: list[str] = [
    "CoreLogger",
    "initialize_root",
]

_LOG_ROOT_ATTR_NAME = "_vardump_corelogger_initialized"

_log_prefix: contextvars.ContextVar[str] = contextvars.ContextVar("log_prefix", default="")


class CoreLogger(logging.Logger):
    """
    Application logger that extends logging.Logger with:

    - A TRACE level below DEBUG.
    - Levels resolved from the environment by LogLevelConfig.
    - A prefix context manager for scoped message prefixes.

    Handlers are not attached directly; all CoreLogger instances propagate
    to the root logger, which holds a single stderr handler per initialize_root().
    """

    def __init__(
        self,
        name: str,
        level: int | str = logging.NOTSET,
    ) -> None:
        """
        :param name: The name of the logger, typically the module name.
        :param level: The initial log level. NOTSET resolves the level from the environment.
        """
        initialize_logger_constants()
        if level in {logging.NOTSET, "NOTSET", ""}:
            level = LogLevelConfig.get_instance().get_effective_level(name)
        super().__init__(name, level)

    def __repr__(self) -> str:
        level = self.getEffectiveLevel()
        return f"<{type(self).__name__} '{self.name}' {logging.getLevelName(level)}={level}>"

    def _log(self, level: int, msg: object, args: Any, *a: Any, **kw: Any) -> None:
        initialize_root()
        prefix = _log_prefix.get()
        if prefix:
            msg = f"{prefix}{msg}"
        kw["stacklevel"] = kw.get("stacklevel", 1) + 1
        super()._log(level, msg, args, *a, **kw)

    def trace(self, msg: object, *args: Any, **kwargs: Any) -> None:
        """Log a message at TRACE level (below DEBUG)."""
        if self.isEnabledFor(TRACE):
            kwargs["stacklevel"] = kwargs.get("stacklevel", 1) + 1
            self._log(TRACE, msg, args, **kwargs)

    @contextmanager
    def prefix_with(self, prefix: str) -> Iterator[None]:
        """
        Context manager to prefix all log messages within the current context.

        Nested prefixes accumulate. State lives in a ContextVar, not on the logger.

        :param prefix: The prefix string to prepend to all log messages.
        """
        formatted_prefix = prefix + " > "
        token = _log_prefix.set(_log_prefix.get() + formatted_prefix)
        try:
            yield
        finally:
            _log_prefix.reset(token)


def initialize_root(
    fmt: str | None = None,
    datefmt: str | None = None,
    level: int | str | None = None,
    force: bool = False,
) -> None:
    """
    Idempotently configure the root logger for CoreLogger.

    - Ensures exactly one stderr StreamHandler with CoreFormatter exists.
    - If `force=True`, removes and recreates the stderr handler.
    - Sets root level to `level` if provided, otherwise uses WARNING if NOTSET.
    - Does not modify non-stderr handlers owned by the host application.

    :param fmt: Format string. Defaults to LOG_FORMAT or package default.
    :param datefmt: Date format. Defaults to LOG_DATEFMT or package default. If it contains
        no percent directives, timestamps are removed from the format.
    :param level: Root logger level (int or name).
    :param force: Reinitialize even if already initialized.
    """
    root = logging.getLogger()
    if getattr(root, _LOG_ROOT_ATTR_NAME, False) and not force:
        return
    setattr(root, _LOG_ROOT_ATTR_NAME, True)
    initialize_logger_constants()

    stderr_handlers: list[logging.StreamHandler[TextIO]] = [
        h for h in root.handlers if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr
    ]
    if force:
        for h in stderr_handlers:
            root.removeHandler(h)
        stderr_handlers = []

    fmt = fmt or os.environ.get(
        "LOG_FORMAT", r"%(levelName)s %(asctime)s %(fileAndLine)s %(name)s: %(message)s"
    )
    datefmt = os.environ.get("LOG_DATEFMT", "%-I:%M%p") if datefmt is None else datefmt
    if "%" not in datefmt:
        fmt = re.sub(r"\s*%\(asctime\)s\s*", " ", fmt)

    if not stderr_handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(CoreFormatter(fmt, datefmt or None))
        root.addHandler(handler)
    elif not any(isinstance(h.formatter, CoreFormatter) for h in stderr_handlers):
        stderr_handlers[0].setFormatter(CoreFormatter(fmt, datefmt or None))

    if level is not None:
        if isinstance(level, str):
            level = logging.getLevelNamesMapping().get(level.upper(), logging.WARNING)
        root.setLevel(level)
    elif root.getEffectiveLevel() == logging.NOTSET:
        root.setLevel(logging.WARNING)


# End of file: src/mstair/vardump/xlogging/core_logger.py
