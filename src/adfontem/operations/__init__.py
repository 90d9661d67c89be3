"""
Message-level operations for adfontem.
"""

from adfontem.operations.processor import process_message
from adfontem.operations.reply import format_length_comparison, format_reply

__all__ = ["format_length_comparison", "format_reply", "process_message"]
