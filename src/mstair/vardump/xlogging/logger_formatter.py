# File: src/mstair/vardump/xlogging/logger_formatter.py

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Literal

import pytz
from colorama import Fore, Style

import mstair.vardump.base.config as cfg
from mstair.vardump.xlogging.logger_constants import K_COLOR


__all__ = ["CoreFormatter", "get_color_code", "rgb_code"]


FormatStyle = Literal["%", "{", "$"]

DEFAULT_TIMEZONE = "US/Eastern"


def rgb_code(r: int, g: int, b: int) -> str:
    """
    Convert RGB values to ANSI escape code for terminal color output.

    :param r: Red component (0-255)
    :param g: Green component (0-255)
    :param b: Blue component (0-255)
    :return str: ANSI escape code for the specified RGB color.
    """
    return f"\033[38;2;{max(0, min(255, r))};{max(0, min(255, g))};{max(0, min(255, b))}m"


COLOR_MAP: dict[str | None, str] = {
    "fileAndLine": rgb_code(4 << 4, 8 << 4, 10 << 4),
    "TRACE": rgb_code(96, 0, 64),
    "DEBUG": Style.DIM,
    "INFO": rgb_code(184, 184, 216),
    "WARNING": rgb_code(192, 176, 0),
    "ERROR": rgb_code(224, 128, 0),
    "CRITICAL": rgb_code(255, 64, 64),
    None: Fore.RESET + Style.RESET_ALL,
}


def get_color_code(key: Any = None) -> str:
    # No color codes outside of an interactive display
    if not cfg.in_desktop_mode():
        return ""
    if key in COLOR_MAP:
        return COLOR_MAP[key]
    if isinstance(key, str) and key.upper() in dir(Fore):
        return getattr(Fore, key.upper())
    return COLOR_MAP[None]


class CoreFormatter(logging.Formatter):
    """
    Formatter for CoreLogger that adds a colored level name, a project-relative
    `fileAndLine` field and timezone-aware timestamps.
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: FormatStyle = "%",
        validate: bool = True,
        *,
        timezone: str | None = None,
    ) -> None:
        """
        :param fmt: The format string for log messages.
        :param datefmt: The date format string for log timestamps.
        :param style: The style for the format string (default is "%").
        :param validate: Whether to validate the format strings (default is True).
        :param timezone: Timezone name for timestamps. Defaults to LOG_TIMEZONE or US/Eastern.
        """
        super().__init__(fmt=fmt, datefmt=datefmt, style=style, validate=validate)
        self.tz = pytz.timezone(timezone or os.environ.get("LOG_TIMEZONE", DEFAULT_TIMEZONE))

    def format(self, record: logging.LogRecord) -> str:
        record.fileAndLine = self.format_fileAndLine(record.pathname, record.lineno)
        record.levelName = get_color_code(record.levelname) + record.levelname + get_color_code()
        color_key = getattr(record, K_COLOR, None)
        message = super().format(record)
        if color_key:
            message = get_color_code(color_key) + message + get_color_code()
        return message

    @staticmethod
    def format_fileAndLine(file: str, lineno: int) -> str:
        path = Path(file) if file else None
        if path is None:
            return "<unknown file>"
        try:
            posix = path.relative_to(Path.cwd()).as_posix()
        except ValueError:
            posix = path.as_posix()
        return get_color_code("fileAndLine") + f"{posix}:{lineno}" + get_color_code()

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        stamp = datetime.fromtimestamp(record.created, self.tz)
        if datefmt:
            result = stamp.strftime(datefmt.replace("%-", "%"))
            result = result.replace("AM", "am").replace("PM", "pm").lstrip("0")
        else:
            result = stamp.isoformat()
        return result


# End of file: src/mstair/vardump/xlogging/logger_formatter.py
