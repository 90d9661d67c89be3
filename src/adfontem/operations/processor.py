"""
Message processing: from a chat message to a reply, or nothing.

Steps:
1. Find the first YouTube link in the message
2. Fetch its metadata
3. Find original-content links in its description
4. Fetch metadata for each YouTube original
5. Format the reply
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from adfontem.operations.reply import format_reply
from adfontem.urls import YouTubeURL, find_youtube_link
from adfontem.utils.logging import log_timed

if TYPE_CHECKING:
    from adfontem.extraction.finder import OriginalContentFinder
    from adfontem.models.video_details import VideoDetails
    from adfontem.youtube.metadata import YouTubeMetadataClient

logger = logging.getLogger(__name__)


async def _resolve_links(
    links: list[str],
    metadata_client: YouTubeMetadataClient,
) -> dict[str, VideoDetails | None]:
    details_by_link: dict[str, VideoDetails | None] = {}
    for index, link in enumerate(links, start=1):
        logger.info(f"Processing original content link {index}: {link}")
        youtube_url = YouTubeURL.try_parse(link)
        if youtube_url is None:
            # Non-YouTube link, shown as-is
            details_by_link[link] = None
            continue
        details_by_link[link] = await metadata_client.get_video_details(
            youtube_url.video_id
        )
    return details_by_link


async def process_message(
    text: str,
    metadata_client: YouTubeMetadataClient,
    finder: OriginalContentFinder,
) -> str | None:
    """Build a reply for a chat message that links a repost.

    Args:
        text: Chat message content
        metadata_client: YouTube metadata lookups
        finder: Original-content link finder

    Returns:
        Reply text, or None if the message has no YouTube link, the video
        can't be fetched, or its description credits nothing.
    """
    youtube_url = YouTubeURL.try_parse(find_youtube_link(text))
    if youtube_url is None:
        return None

    start = time.time()
    log_timed(f"YouTube link detected: {youtube_url.url}")
    video_id = youtube_url.video_id

    try:
        details = await metadata_client.get_video_details(video_id)
        if details is None:
            logger.warning(f"Could not fetch video details for ID: {video_id}")
            return None

        logger.info(f'Processing video: "{details.title}" by {details.channel_title}')

        links = await finder.find_links(details.description)
        if not links:
            logger.debug(
                f"No original content links found in description for: {details.title}"
            )
            return None

        logger.info(f"Found {len(links)} original content link(s)")
        details_by_link = await _resolve_links(links, metadata_client)
        reply = format_reply(details, links, details_by_link)
    except Exception as e:
        logger.error(f"Error processing YouTube link {youtube_url.url}: {e}")
        return None

    log_timed(f"Built reply with {len(links)} original content link(s)", start)
    return reply
