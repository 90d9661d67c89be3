"""
Utility functions for adfontem.
"""

from adfontem.utils.formatting import format_duration, parse_duration
from adfontem.utils.logging import configure_logging, log_timed

__all__ = [
    "format_duration",
    "parse_duration",
    "configure_logging",
    "log_timed",
]
