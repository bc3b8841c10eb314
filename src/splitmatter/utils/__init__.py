"""Utility modules for splitmatter.

Provides:
- logger: get_logger for logging
"""

from splitmatter.utils.logger import get_logger

__all__ = ["get_logger"]
