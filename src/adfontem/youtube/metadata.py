"""
adfontem.youtube.metadata - YouTube Data API v3 metadata lookups.

Fetches title, channel, description and duration for a video ID using the
``videos`` endpoint. Every failure (HTTP or transport errors, bad JSON or a
malformed video item, an unknown video) is logged and reported as None.

Example:
    >>> client = YouTubeMetadataClient(api_key="...")
    >>> details = await client.get_video_details("dQw4w9WgXcQ")
    >>> print(details.title if details else "not found")
"""

from __future__ import annotations

import asyncio
import json
import logging
import urllib.error
import urllib.request
from typing import Any
from urllib.parse import urlencode

from adfontem.config.defaults import METADATA_TIMEOUT, YOUTUBE_API_URL
from adfontem.exceptions import MetadataError
from adfontem.models.video_details import VideoDetails

logger = logging.getLogger(__name__)

_PARTS = "snippet,contentDetails"


class YouTubeMetadataClient:
    """Looks up video metadata with an API key.

    Args:
        api_key: YouTube Data API key.
        api_url: Override the videos endpoint (tests, proxies).
        timeout: Per-request timeout in seconds.
    """

    def __init__(
        self,
        api_key: str,
        api_url: str = YOUTUBE_API_URL,
        timeout: float = METADATA_TIMEOUT,
    ):
        self._api_key = api_key
        self._api_url = api_url
        self._timeout = timeout

    def _build_url(self, video_id: str) -> str:
        query = urlencode({"part": _PARTS, "id": video_id, "key": self._api_key})
        return f"{self._api_url}?{query}"

    def _fetch_json(self, video_id: str) -> dict[str, Any]:
        """Blocking GET of the videos endpoint.

        Raises:
            MetadataError: On HTTP errors, transport errors or invalid JSON.
        """
        req = urllib.request.Request(self._build_url(video_id), method="GET")
        try:
            with urllib.request.urlopen(req, timeout=self._timeout) as resp:
                body = resp.read()
        except urllib.error.HTTPError as e:
            raise MetadataError(
                f"YouTube API HTTP error! Status: {e.code}",
                video_id=video_id,
                status=e.code,
            ) from e
        except (urllib.error.URLError, OSError) as e:
            raise MetadataError(
                f"YouTube API request failed: {e}", video_id=video_id
            ) from e

        try:
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MetadataError(
                f"YouTube API returned invalid JSON: {e}", video_id=video_id
            ) from e

        if not isinstance(data, dict):
            raise MetadataError(
                "YouTube API returned an unexpected payload", video_id=video_id
            )
        return data

    def fetch_video_details(self, video_id: str) -> VideoDetails | None:
        """Blocking lookup of one video.

        Returns:
            VideoDetails, or None if the video doesn't exist.

        Raises:
            MetadataError: If the API could not be queried or the video item
                is malformed.
        """
        logger.debug(f"Fetching video details for ID: {video_id}")
        data = self._fetch_json(video_id)

        items = data.get("items") or []
        if not isinstance(items, list):
            raise MetadataError(
                "YouTube API returned malformed items", video_id=video_id
            )
        if not items:
            logger.warning(f"Video with ID '{video_id}' not found.")
            return None

        item = items[0]
        if not isinstance(item, dict) or not all(
            isinstance(item.get(part) or {}, dict) for part in _PARTS.split(",")
        ):
            raise MetadataError(
                "YouTube API returned a malformed video item", video_id=video_id
            )

        details = VideoDetails.from_api_item(item)
        logger.debug(f"Found video: {details.title} by {details.channel_title}")
        return details

    async def get_video_details(self, video_id: str) -> VideoDetails | None:
        """Look up one video without blocking the event loop.

        Never raises; failures are logged and reported as None.
        """
        try:
            return await asyncio.to_thread(self.fetch_video_details, video_id)
        except MetadataError as e:
            logger.error(f"Failed to fetch video details: {e}")
            return None
