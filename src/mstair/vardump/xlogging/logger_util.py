# File: src/mstair/vardump/xlogging/logger_util.py
"""
Environment variable-driven log level configuration.

Two sources are supported:
- Pattern-based DSL strings in LOG_LEVEL / LOG_LEVELS
- Per-logger overrides in variables like LOG_LEVEL_<NAME>

See LogLevelConfig for resolution rules.
"""

from __future__ import annotations

import fnmatch
import logging
import os
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import ClassVar, Final, NamedTuple

from mstair.vardump.base.fs_helpers import fs_load_dotenv
from mstair.vardump.xlogging.logger_constants import initialize_logger_constants


__all__ = ["LogEnvVar", "LogLevelConfig"]

_FRAGMENT_SEPARATOR_RX: Final[re.Pattern[str]] = re.compile(r"[;, ]+")
_ASSIGNMENT_OPERATOR_RX: Final[re.Pattern[str]] = re.compile(r"[:=]+")

_log_level_config_instance: LogLevelConfig | None = None


@dataclass(slots=True)
class LogEnvVar:
    """
    Parsed representation of a log-level environment variable.

    The suffix after LOG_LEVEL_ names the target logger, with "__" -> "_" and "_" -> ".".
    """

    NAME_RX: ClassVar[re.Pattern[str]] = re.compile(
        r"""
        ^LOG_LEVELS?                        # LOG_LEVEL or LOG_LEVELS
        (?P<SUFFIX>(?:_[A-Z][A-Z0-9_]*)*)$  # optional logger suffix
        """,
        re.VERBOSE,
    )

    module: str = ""
    value: str = field(default="", repr=False)

    @classmethod
    def from_env_var(cls, name: str, value: str) -> LogEnvVar | None:
        """Return a LogEnvVar if the given (name, value) is valid, else None."""
        re_match = cls.NAME_RX.match(name)
        if re_match is None:
            return None
        suffix = re_match["SUFFIX"].lstrip("_")
        if not suffix or suffix.upper() == "ROOT":
            module = ""
        else:
            module = suffix.replace("__", "\0").replace("_", ".").replace("\0", "_").lower()
        return cls(module=module, value=value)

    @classmethod
    def from_environ(cls) -> Iterator[LogEnvVar]:
        """Yield LogEnvVar instances for all matching environment variables."""
        fs_load_dotenv()
        for name, value in sorted(os.environ.items(), reverse=True):
            env_var = cls.from_env_var(name, value)
            if env_var:
                yield env_var


class LogEnvPatternLevel(NamedTuple):
    """Mapping from a pattern string to an integer log level."""

    pattern: str
    level: int


@dataclass(slots=True)
class LogLevelConfig:
    """
    Resolve log levels using environment variables.

    Precedence: exact > ancestor > glob > default > fallback.
    """

    pattern_to_level: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.pattern_to_level:
            self.update_from_environment()

    def update_from_environment(self) -> None:
        """Rebuild pattern->level mappings from current environment."""
        self.pattern_to_level.clear()
        for var in LogEnvVar.from_environ():
            for pattern, level in self.parse_log_var(var):
                self.pattern_to_level[pattern] = level

    def get_effective_level(self, logger_name: str, *, default: int = logging.WARNING) -> int:
        """Return the effective log level for a logger name."""
        name_lc = logger_name.lower()
        lc_map = {k.lower(): v for k, v in self.pattern_to_level.items() if k}

        if name_lc in lc_map:
            return lc_map[name_lc]

        for ancestor in self._ancestors(name_lc):
            if ancestor in lc_map:
                return lc_map[ancestor]

        best_level: int | None = None
        best_score = -1
        for pattern, level in lc_map.items():
            if not any(ch in pattern for ch in "*?[") or not fnmatch.fnmatch(name_lc, pattern):
                continue
            score = min(i for i, ch in enumerate(pattern) if ch in "*?[")
            if score > best_score:
                best_score, best_level = score, level
        if best_level is not None:
            return best_level

        return self.pattern_to_level.get("", default)

    @classmethod
    def get_instance(cls) -> LogLevelConfig:
        """Return the singleton LogLevelConfig instance, creating it if needed."""
        global _log_level_config_instance
        if _log_level_config_instance is None:
            initialize_logger_constants()
            _log_level_config_instance = LogLevelConfig()
        return _log_level_config_instance

    @staticmethod
    def parse_log_var(var: LogEnvVar) -> Iterator[LogEnvPatternLevel]:
        """Parse one LogEnvVar into pattern->level mappings, ignoring unknown level names."""
        initialize_logger_constants()
        level_names = logging.getLevelNamesMapping()
        for fragment in _FRAGMENT_SEPARATOR_RX.split(var.value):
            fragment = fragment.strip()
            if not fragment:
                continue
            parts = _ASSIGNMENT_OPERATOR_RX.split(fragment, maxsplit=1)
            if len(parts) == 2:
                pattern, level_name = (p.strip().strip("'\"") for p in parts)
            else:
                pattern, level_name = "", parts[0].strip().strip("'\"")

            if var.module:
                pattern = f"{var.module}.{pattern}" if pattern not in {"", "root"} else var.module
            if pattern.lower() == "root":
                pattern = ""

            level = level_names.get(level_name.upper(), logging.NOTSET)
            if level != logging.NOTSET:
                yield LogEnvPatternLevel(pattern, level)

    @staticmethod
    def _ancestors(logger_name: str) -> list[str]:
        """Return ancestor names of a dotted logger path, most specific first."""
        parts = logger_name.split(".")
        return [".".join(parts[:i]) for i in range(len(parts) - 1, 0, -1)]


# End of file: src/mstair/vardump/xlogging/logger_util.py
