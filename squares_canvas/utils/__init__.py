"""Utility functions for Squares Canvas"""

from .logging_config import LoggingConfig
from .qt_geometry import to_qrectf, from_qpointf, format_dimensions

__all__ = [
    'LoggingConfig',
    'to_qrectf',
    'from_qpointf',
    'format_dimensions',
]
