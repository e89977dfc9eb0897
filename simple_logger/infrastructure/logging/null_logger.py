from __future__ import annotations

import threading
from typing import override

from ...application.ports.services import LoggerPort, LogLevel

_null_logger: NullLogger | None = None
_null_logger_lock = threading.Lock()


class NullLogger(LoggerPort):
    """Discards every message and reports itself inactive.

    The threshold is fixed at ``LogLevel.INFO``; assignments are ignored.
    """

    @override
    def get_threshold(self) -> LogLevel:
        return LogLevel.INFO

    @override
    def set_threshold(self, level: LogLevel) -> None:
        return None

    @override
    def log(self, level: LogLevel, message: str) -> None:
        return None

    @override
    def is_active(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NullLogger()"


def get_null_logger() -> NullLogger:
    """Return the process-wide NullLogger, creating it on first use."""
    global _null_logger
    if _null_logger is None:
        with _null_logger_lock:
            if _null_logger is None:
                _null_logger = NullLogger()
    return _null_logger


def ensure_logger(logger: LoggerPort | None) -> LoggerPort:
    """Return ``logger`` itself, or the shared NullLogger when it is None."""
    if logger is None:
        return get_null_logger()
    return logger
