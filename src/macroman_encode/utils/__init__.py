"""Utility modules for macroman_encode.

Provides:
- logger: get_logger for logging
"""

from macroman_encode.utils.logger import get_logger

__all__ = ["get_logger"]
