"""Bridge from the logger port to the standard :mod:`logging` module."""

from __future__ import annotations

import logging
from typing import override

from ...application.ports.services import LoggerPort, LogLevel

TRACE = 5

_STDLIB_LEVELS: dict[LogLevel, int] = {
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.TRACE: TRACE,
}


class StdlibLogger(LoggerPort):
    """Forwards messages to a :class:`logging.Logger`.

    Constructing one registers the ``TRACE`` level name (value 5) with the
    logging module.

    Messages more verbose than the threshold are dropped here; the rest are
    handed to the wrapped logger, whose own level and handlers still apply.
    Handler failures go through :meth:`logging.Handler.handleError`, so
    nothing is raised to the caller.
    """

    def __init__(
        self,
        logger: logging.Logger | str | None = None,
        threshold: LogLevel = LogLevel.INFO,
    ) -> None:
        super().__init__()
        if logging.getLevelName(TRACE) != "TRACE":
            logging.addLevelName(TRACE, "TRACE")
        if logger is None or isinstance(logger, str):
            logger = logging.getLogger(logger or "simple_logger")
        self.logger = logger
        self._threshold = threshold

    @override
    def get_threshold(self) -> LogLevel:
        return self._threshold

    @override
    def set_threshold(self, level: LogLevel) -> None:
        self._threshold = level

    @override
    def log(self, level: LogLevel, message: str) -> None:
        if level > self._threshold:
            return
        self.logger.log(_STDLIB_LEVELS[level], "%s", message)
