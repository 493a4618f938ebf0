"""Utility modules for Marcado.

Provides:
- logger: get_logger for logging
"""

from marcado.utils.logger import get_logger

__all__ = [
    "get_logger",
]
