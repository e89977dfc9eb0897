from __future__ import annotations

import threading
from typing import override

from ...application.ports.services import LoggerPort, LogLevel


class MemoryLogger(LoggerPort):
    """Records every ``(level, message)`` pair in call order.

    The threshold is stored but advisory: nothing is filtered, which makes
    this sink handy for asserting on what a component logged.
    """

    def __init__(self, threshold: LogLevel = LogLevel.INFO) -> None:
        super().__init__()
        self._threshold = threshold
        self._records: list[tuple[LogLevel, str]] = []
        self._lock = threading.Lock()

    @override
    def get_threshold(self) -> LogLevel:
        return self._threshold

    @override
    def set_threshold(self, level: LogLevel) -> None:
        self._threshold = level

    @override
    def log(self, level: LogLevel, message: str) -> None:
        with self._lock:
            self._records.append((level, message))

    @property
    def records(self) -> list[tuple[LogLevel, str]]:
        with self._lock:
            return list(self._records)

    def messages(self, level: LogLevel | None = None) -> list[str]:
        return [
            message
            for record_level, message in self.records
            if level is None or record_level == level
        ]

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
