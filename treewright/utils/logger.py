# treewright/utils/logger.py
from __future__ import annotations

import json
import logging
import os
import threading
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional

from rich.console import Console
from rich.logging import RichHandler

from treewright.utils.config import get_settings, LogLevel


__all__ = [
    "get_logger",
    "set_log_level",
    "bind",
    "unbind",
    "log_with_context",
    "attach_file_logger",
    "detach_file_logger",
]


# ------------- Internal state -------------

_config_lock = threading.Lock()
_configured = False
_global_extra: Dict[str, Any] = {}  # optional global context attached to every record


# ------------- JSON Formatter (for file logs) -------------

class JsonFormatter(logging.Formatter):
    """One JSON object per line: timestamp, level, logger, msg and any bound context."""

    default_time_format = "%Y-%m-%dT%H:%M:%S"

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(self.default_time_format),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        # bound context (bind / log_with_context)
        if hasattr(record, "extra") and isinstance(record.extra, dict):
            payload.update(record.extra)

        return json.dumps(payload, ensure_ascii=False, default=str)


# ------------- Helpers -------------

_LEVEL_MAP = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.CRITICAL: logging.CRITICAL,
}


def _ensure_configured() -> None:
    """
    Configure the package logger once based on settings.
    Subsequent calls are no-ops.
    """
    global _configured
    if _configured:
        return

    with _config_lock:
        if _configured:
            return

        settings = get_settings()
        level = _LEVEL_MAP.get(settings.LOG_LEVEL, logging.INFO)

        # Library code: configure our own logger tree, leave the root alone
        base = logging.getLogger("treewright")
        base.setLevel(level)
        for h in list(base.handlers):
            base.removeHandler(h)

        console = Console(stderr=True, force_jupyter=False, color_system="auto")
        rich_handler = RichHandler(
            console=console,
            show_time=True,
            show_path=False,
            rich_tracebacks=True,
            markup=settings.COLORIZED_OUTPUT,
            omit_repeated_times=False,
        )
        rich_handler.setFormatter(logging.Formatter("%(message)s"))
        rich_handler.setLevel(level)
        base.addHandler(rich_handler)

        if settings.LOG_TO_FILE:
            settings.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                filename=str(settings.LOG_FILE),
                maxBytes=5 * 1024 * 1024,  # 5MB per file
                backupCount=5,
                encoding="utf-8",
                delay=True,
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(JsonFormatter())
            base.addHandler(file_handler)

        _configured = True


def _logger_name(name: Optional[str]) -> str:
    if not name:
        return "treewright"
    if name == "treewright" or name.startswith("treewright."):
        return name
    return f"treewright.{name}"


def get_logger(name: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a configured logger wrapped with a LoggerAdapter
    that injects `_global_extra` into every log record.
    """
    _ensure_configured()
    base = logging.getLogger(_logger_name(name))
    return logging.LoggerAdapter(base, extra={"extra": _global_extra})


def set_log_level(level: LogLevel | str) -> None:
    """
    Dynamically adjust log level at runtime.
    """
    _ensure_configured()
    lvl = level if isinstance(level, str) else level.value
    py_level = getattr(logging, lvl.upper(), logging.INFO)
    base = logging.getLogger("treewright")
    base.setLevel(py_level)
    for h in base.handlers:
        h.setLevel(py_level)


def bind(**kwargs: Any) -> None:
    """
    Bind global context (e.g., snapshot="login.yaml").
    Will be attached to every subsequent log line (file JSON + console).
    """
    _global_extra.update(kwargs)


def unbind(*keys: str) -> None:
    """
    Remove keys from global context.
    """
    for k in keys:
        _global_extra.pop(k, None)


def log_with_context(logger: logging.LoggerAdapter, **kwargs: Any) -> logging.LoggerAdapter:
    """
    Return a new LoggerAdapter that merges additional context for a scoped section.
    Usage:
        log = get_logger(__name__)
        scoped = log_with_context(log, selector="button#login")
        scoped.info("clicking")
    """
    merged = dict(_global_extra)
    merged.update(kwargs)
    return logging.LoggerAdapter(logger.logger, extra={"extra": merged})


# ------------- Dynamic per-invocation file logging -------------

def attach_file_logger(path: os.PathLike | str, level: Optional[int] = None) -> logging.Handler:
    """
    Attach a JSON file handler at runtime (e.g., one log file per CLI invocation).
    Returns the handler so the caller can later detach it via detach_file_logger.
    """
    _ensure_configured()
    base = logging.getLogger("treewright")
    lvl = level if level is not None else base.level
    p = os.path.abspath(os.fspath(path))
    os.makedirs(os.path.dirname(p), exist_ok=True)
    fh = RotatingFileHandler(filename=p, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8", delay=True)
    fh.setLevel(lvl)
    fh.setFormatter(JsonFormatter())
    base.addHandler(fh)
    return fh


def detach_file_logger(handler: logging.Handler) -> None:
    """Remove a previously attached handler returned by attach_file_logger."""
    logging.getLogger("treewright").removeHandler(handler)
    handler.close()
