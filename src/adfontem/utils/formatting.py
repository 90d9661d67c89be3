"""
Duration parsing and formatting.

YouTube reports durations as ISO 8601 strings (PT1H2M3S); replies show them
as compact tokens ("1h 2m", "2m 30s").
"""

import logging
import re

logger = logging.getLogger(__name__)

_ISO_DURATION_RE = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")


def parse_duration(duration: str | None) -> int:
    """Convert an ISO 8601 duration (PT1H2M3S) to total seconds.

    Missing components count as zero. Input that doesn't look like a
    duration at all is logged and treated as zero seconds. Day components
    (P1DT2H) are outside the PT grammar, so such durations parse as 0.

    Args:
        duration: Duration string from the YouTube API

    Returns:
        Total seconds
    """
    match = _ISO_DURATION_RE.search(duration or "")
    if not match:
        logger.warning(f"Invalid duration format: {duration!r}")
        return 0

    hours, minutes, seconds = (int(part or 0) for part in match.groups())
    return hours * 3600 + minutes * 60 + seconds


def format_duration(total_seconds: int) -> str:
    """Format seconds as a compact human-readable duration.

    Seconds are only shown for videos shorter than an hour.

    Args:
        total_seconds: Duration in whole seconds

    Returns:
        Formatted duration string (e.g., "1h 2m", "45m", "2m 30s", "0s")
    """
    total_seconds = max(int(total_seconds), 0)
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60

    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    if seconds > 0 and hours == 0:
        parts.append(f"{seconds}s")

    return " ".join(parts) if parts else "0s"
