# File: src/mstair/vardump/base/test_config.py

import io
import logging
import os
from collections.abc import Iterator

import pytest

from mstair.vardump.base import config as cfg
from mstair.vardump.base import fs_helpers
from mstair.vardump.xlogging.logger_formatter import CoreFormatter, get_color_code


@pytest.fixture
def no_overrides() -> Iterator[None]:
    yield
    cfg.in_test_mode(unset_override=True)
    cfg.in_desktop_mode(unset_override=True)


@pytest.mark.unit
def test_pytest_run_is_test_mode(no_overrides: None) -> None:
    assert cfg.in_test_mode() is True
    assert cfg.in_desktop_mode() is True


@pytest.mark.unit
def test_overrides_are_sticky_until_unset(no_overrides: None) -> None:
    assert cfg.in_desktop_mode(override=False) is False
    assert cfg.in_desktop_mode() is False
    assert cfg.in_desktop_mode(unset_override=True) is True


@pytest.mark.unit
def test_no_color_codes_outside_desktop_mode(no_overrides: None) -> None:
    cfg.in_desktop_mode(override=False)
    assert get_color_code("ERROR") == ""
    cfg.in_desktop_mode(override=True)
    assert get_color_code("ERROR") != ""


@pytest.mark.unit
def test_core_formatter_adds_level_and_location(no_overrides: None) -> None:
    cfg.in_desktop_mode(override=False)
    formatter = CoreFormatter("%(levelName)s %(fileAndLine)s %(message)s", timezone="UTC")
    record = logging.LogRecord("x", logging.INFO, __file__, 12, "hello %s", ("you",), None)
    text = formatter.format(record)
    assert text.startswith("INFO ")
    assert text.endswith("test_config.py:12 hello you")


@pytest.mark.unit
def test_fs_load_dotenv_from_stream(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("VARDUMP_DOTENV_PROBE", raising=False)
    stream = io.StringIO("VARDUMP_DOTENV_PROBE=1\n")
    assert fs_helpers.fs_load_dotenv(stream=stream, force=True) is True
    assert os.environ["VARDUMP_DOTENV_PROBE"] == "1"
    monkeypatch.delenv("VARDUMP_DOTENV_PROBE")
