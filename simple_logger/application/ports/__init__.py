"""Port interfaces for logging sinks.

This module defines the abstract contract that logging adapters must
implement. Callers depend on the port only, never on a concrete sink.
"""

from .services import LoggerPort, LogLevel

__all__ = ["LogLevel", "LoggerPort"]
