# File: src/mstair/vardump/xlogging/test_logger_util.py
"""
Tests for LogLevelConfig and create_logger().

Covers:
- DSL parsing from LOG_LEVELS
- Per-logger overrides from LOG_LEVEL_* variables
- Precedence rules and matching semantics
- CoreLogger creation, TRACE level and message prefixes
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

import pytest

from mstair.vardump.xlogging import logger_util as lu
from mstair.vardump.xlogging.core_logger import CoreLogger
from mstair.vardump.xlogging.logger_constants import TRACE
from mstair.vardump.xlogging.logger_factory import create_logger
from mstair.vardump.xlogging.logger_util import LogEnvVar, LogLevelConfig


# ---------- Fixtures ----------


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear LOG_LEVEL* vars and reset the singleton, skipping .env loads."""
    monkeypatch.setattr(lu, "fs_load_dotenv", lambda *a, **k: False)
    for k in [k for k in os.environ if k.startswith("LOG_LEVEL")]:
        monkeypatch.delenv(k, raising=False)
    monkeypatch.setattr(lu, "_log_level_config_instance", None)
    yield


# ---------- Parsing ----------


class TestEnvironmentParsing:
    def test_bare_level_is_the_default(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("LOG_LEVELS", "DEBUG")
        assert LogLevelConfig().get_effective_level("any.module") == logging.DEBUG

    @pytest.mark.parametrize(
        "value",
        ["pkg1.*:DEBUG;pkg2.*:INFO", "pkg1.*=DEBUG,pkg2.*=INFO", "pkg1.*:DEBUG pkg2.*:INFO"],
    )
    def test_multiple_patterns_various_separators(
        self, monkeypatch: pytest.MonkeyPatch, clean_env: None, value: str
    ) -> None:
        monkeypatch.setenv("LOG_LEVELS", value)
        cfg = LogLevelConfig()
        assert cfg.pattern_to_level == {"pkg1.*": logging.DEBUG, "pkg2.*": logging.INFO}

    def test_per_logger_override(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("LOG_LEVEL_MSTAIR_VARDUMP__X", "ERROR")
        assert LogLevelConfig().get_effective_level("mstair.vardump_x") == logging.ERROR

    def test_trace_level_name_is_known(
        self, monkeypatch: pytest.MonkeyPatch, clean_env: None
    ) -> None:
        monkeypatch.setenv("LOG_LEVELS", "mstair:TRACE")
        assert LogLevelConfig().get_effective_level("mstair") == TRACE

    def test_unknown_level_is_ignored(
        self, monkeypatch: pytest.MonkeyPatch, clean_env: None
    ) -> None:
        monkeypatch.setenv("LOG_LEVELS", "pkg:LOUD")
        assert LogLevelConfig().pattern_to_level == {}

    def test_env_var_name_parsing(self) -> None:
        assert LogEnvVar.from_env_var("LOG_LEVEL_ROOT", "INFO") == LogEnvVar(module="", value="INFO")
        assert LogEnvVar.from_env_var("LOGLEVEL", "INFO") is None


# ---------- Precedence ----------


class TestPrecedence:
    def test_exact_beats_ancestor_beats_glob_beats_default(self) -> None:
        cfg = LogLevelConfig(
            pattern_to_level={
                "": logging.ERROR,
                "app.*": logging.INFO,
                "app.core": logging.DEBUG,
                "app.core.io": TRACE,
            }
        )
        assert cfg.get_effective_level("app.core.io") == TRACE
        assert cfg.get_effective_level("app.core.db") == logging.DEBUG
        assert cfg.get_effective_level("app.web") == logging.INFO
        assert cfg.get_effective_level("other") == logging.ERROR

    def test_more_specific_glob_wins(self) -> None:
        cfg = LogLevelConfig(pattern_to_level={"a*": logging.ERROR, "ab.c*": logging.DEBUG})
        assert cfg.get_effective_level("ab.cd") == logging.DEBUG

    def test_fallback_is_warning(self) -> None:
        cfg = LogLevelConfig(pattern_to_level={"x": logging.DEBUG})
        assert cfg.get_effective_level("y") == logging.WARNING


# ---------- CoreLogger ----------


class TestCoreLogger:
    def test_create_logger_returns_same_core_logger(self) -> None:
        first = create_logger("mstair.vardump.test_factory")
        assert isinstance(first, CoreLogger)
        assert create_logger("mstair.vardump.test_factory") is first

    def test_trace_and_prefix(self, caplog: pytest.LogCaptureFixture) -> None:
        log = create_logger("mstair.vardump.test_trace", level=TRACE)
        caplog.set_level(TRACE, logger=log.name)
        with log.prefix_with("[outer]"), log.prefix_with("[inner]"):
            log.trace("value=%d", 3)
        log.trace("plain")

        assert caplog.messages == ["[outer] > [inner] > value=3", "plain"]
        assert caplog.records[0].levelname == "TRACE"
        assert caplog.records[0].funcName == "test_trace_and_prefix"
