"""Simple logger package.

A minimal logging contract: an abstract sink accepting messages tagged
with a severity level, plus a no-op sink to use when no real one is
configured.

Features:
- ``LoggerPort`` contract with ``info``/``debug``/``trace`` helpers
- Shared ``NullLogger`` and ``ensure_logger`` to normalize optional sinks
- Console (rich), in-memory and stdlib ``logging`` sinks
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("simple-logger")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from simple_logger.application.ports.services import LoggerPort, LogLevel
from simple_logger.config import LoggerConfig
from simple_logger.infrastructure.logging import (
    ConsoleLogger,
    MemoryLogger,
    NullLogger,
    StdlibLogger,
    ensure_logger,
    get_null_logger,
)

__all__ = [
    "__version__",
    # Contract
    "LogLevel",
    "LoggerPort",
    # Null sink
    "NullLogger",
    "ensure_logger",
    "get_null_logger",
    # Sinks
    "ConsoleLogger",
    "MemoryLogger",
    "StdlibLogger",
    # Configuration
    "LoggerConfig",
]
