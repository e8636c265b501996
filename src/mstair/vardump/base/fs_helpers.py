# File: src/mstair/vardump/base/fs_helpers.py

from __future__ import annotations

import logging
from os import PathLike
from typing import IO, TypeAlias

import dotenv


__all__ = [
    "StrPath",
    "fs_load_dotenv",
]

StrPath: TypeAlias = str | PathLike[str]

_dotenv_loaded: bool = False


def fs_load_dotenv(
    *,
    logger: logging.Logger | None = None,
    dotenv_path: StrPath | None = None,
    stream: IO[str] | None = None,
    override: bool = False,
    force: bool = False,
) -> bool:
    """
    Parse a .env file once per process and load its variables into the environment.

    :param logger: Logger for the "loaded" message, if supplied.
    :param dotenv_path: Absolute or relative path to the .env file.
    :param stream: Text stream with .env content, used if `dotenv_path` is `None`.
    :param override: Whether variables from the .env file replace existing ones.
    :param force: Load again even if a previous call already loaded a file.
    :return: True if at least one environment variable was set, else False.
    """
    global _dotenv_loaded
    if _dotenv_loaded and not force:
        return False
    _dotenv_loaded = True
    if dotenv_path is None and stream is None:
        dotenv_path = dotenv.find_dotenv(usecwd=True)
        if not dotenv_path:
            return False
    loaded = dotenv.load_dotenv(dotenv_path=dotenv_path, stream=stream, override=override)
    if logger is not None and loaded:
        logger.debug("Loaded environment from %s", dotenv_path or "<stream>")
    return loaded


# End of file: src/mstair/vardump/base/fs_helpers.py
