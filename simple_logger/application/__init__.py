"""Application layer for the simple logger.

Holds the port (contract) definitions that adapters implement.
"""

__all__ = []
