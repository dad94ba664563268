import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from treewright.utils.config import LogLevel, Settings, get_settings
from treewright.utils.logger import attach_file_logger, bind, detach_file_logger, get_logger, log_with_context, unbind


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("WAIT_TIMEOUT_MS", raising=False)
    monkeypatch.delenv("POLL_INTERVAL_MS", raising=False)
    s = Settings(_env_file=None)
    assert s.WAIT_TIMEOUT_MS == 10000
    assert s.POLL_INTERVAL_MS == 100
    assert s.LOG_LEVEL is LogLevel.INFO
    assert s.LOG_FILE.is_absolute()


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("WAIT_TIMEOUT_MS", "2500")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    s = Settings(_env_file=None)
    assert s.WAIT_TIMEOUT_MS == 2500
    assert s.LOG_LEVEL is LogLevel.DEBUG


def test_poll_interval_must_be_positive(monkeypatch):
    monkeypatch.setenv("POLL_INTERVAL_MS", "0")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_memoized():
    assert get_settings() is get_settings()


def test_file_logger_writes_json_with_context(tmp_path: Path):
    path = tmp_path / "logs" / "run.log"
    handler = attach_file_logger(path)
    bind(snapshot="demo.yaml")
    try:
        log = get_logger("tests")
        log_with_context(log, selector="button#ok").warning("clicking")
    finally:
        unbind("snapshot")
        detach_file_logger(handler)

    record = json.loads(path.read_text(encoding="utf-8").splitlines()[-1])
    assert record["msg"] == "clicking"
    assert record["level"] == "WARNING"
    assert record["logger"] == "treewright.tests"
    assert record["selector"] == "button#ok"
    assert record["snapshot"] == "demo.yaml"
    assert set(record) == {"ts", "level", "logger", "msg", "selector", "snapshot"}
