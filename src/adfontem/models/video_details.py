"""
VideoDetails dataclass for YouTube video metadata.
"""

from dataclasses import dataclass
from typing import Any

from adfontem.utils.formatting import parse_duration


@dataclass(frozen=True)
class VideoDetails:
    """Metadata for one YouTube video, as returned by the Data API.

    Attributes:
        video_id: The 11-character video ID
        title: Video title
        channel_title: Display name of the uploading channel
        description: Free-text description (input to link extraction)
        channel_id: Uploading channel ID
        duration: ISO 8601 duration (e.g., "PT12M5S"), empty if unknown
    """

    video_id: str
    title: str
    channel_title: str
    description: str = ""
    channel_id: str = ""
    duration: str = ""

    @property
    def duration_seconds(self) -> int | None:
        """Duration in seconds, or None if the API didn't report one."""
        if not self.duration:
            return None
        return parse_duration(self.duration)

    @classmethod
    def from_api_item(cls, item: dict[str, Any]) -> "VideoDetails":
        """Create from one entry of a videos.list response's ``items``."""
        snippet = item.get("snippet") or {}
        content_details = item.get("contentDetails") or {}
        return cls(
            video_id=item.get("id", ""),
            title=snippet.get("title", ""),
            channel_title=snippet.get("channelTitle", ""),
            description=snippet.get("description", ""),
            channel_id=snippet.get("channelId", ""),
            duration=content_details.get("duration", ""),
        )
