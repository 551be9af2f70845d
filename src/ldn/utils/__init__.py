"""Utility modules for LDN.

Provides:
- logger: get_logger for logging
"""

from ldn.utils.logger import get_logger

__all__ = ["get_logger"]
