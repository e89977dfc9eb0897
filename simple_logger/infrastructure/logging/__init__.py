"""Logging infrastructure.

This module provides the concrete sinks implementing ``LoggerPort``.
"""

from .console_logger import ConsoleLogger
from .memory_logger import MemoryLogger
from .null_logger import NullLogger, ensure_logger, get_null_logger
from .stdlib_logger import StdlibLogger

__all__ = [
    "ConsoleLogger",
    "MemoryLogger",
    "NullLogger",
    "StdlibLogger",
    "ensure_logger",
    "get_null_logger",
]
