from __future__ import annotations

from abc import abstractmethod
from enum import IntEnum
from typing import Protocol, final, runtime_checkable


class LogLevel(IntEnum):
    """Severity of a message, ordered from least to most verbose."""

    INFO = 0
    DEBUG = 1
    TRACE = 2


@runtime_checkable
class LoggerPort(Protocol):
    """A sink that accepts messages tagged with a severity level.

    Implementations override ``log`` plus the threshold accessors. The
    severity-named helpers always forward to ``log`` and are not meant to
    be overridden. Whether ``log`` honors the threshold is up to each
    implementation and must be documented there.

    None of the operations may raise: a sink that fails to deliver a
    message deals with it locally.
    """

    @abstractmethod
    def get_threshold(self) -> LogLevel: ...

    @abstractmethod
    def set_threshold(self, level: LogLevel) -> None: ...

    @abstractmethod
    def log(self, level: LogLevel, message: str) -> None: ...

    def is_active(self) -> bool:
        """Return False when messages are discarded unseen.

        Callers may test this once and skip building expensive messages.
        """
        return True

    @final
    def info(self, message: str) -> None:
        self.log(LogLevel.INFO, message)

    @final
    def debug(self, message: str) -> None:
        self.log(LogLevel.DEBUG, message)

    @final
    def trace(self, message: str) -> None:
        self.log(LogLevel.TRACE, message)
