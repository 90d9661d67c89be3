"""
Logging utilities.
"""

import logging
import sys
import time

logger = logging.getLogger("adfontem")


def configure_logging(debug: bool = False) -> None:
    """Configure root logging for command-line use.

    Args:
        debug: Log at DEBUG instead of INFO
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def log_timed(msg: str, start_time: float | None = None) -> None:
    """Log timestamped message.

    Args:
        msg: Message to log
        start_time: Start time from time.time(), or None for [START]
    """
    elapsed = f"[{time.time() - start_time:.1f}s]" if start_time else "[START]"
    logger.info(f"{elapsed} {msg}")
