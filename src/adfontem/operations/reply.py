"""
Reply formatting for detected reposts.
"""

from __future__ import annotations

from adfontem.models.video_details import VideoDetails
from adfontem.utils.formatting import format_duration

REPLY_HEADER = "🔗 **Original Content Found!**"
REPLY_FOOTER = "*This appears to be a repost. Here's the original content.*"


def format_length_comparison(
    reaction: VideoDetails, original: VideoDetails
) -> str | None:
    """Format "⏱️ reaction-length → original-length", or None if unknown."""
    reaction_seconds = reaction.duration_seconds
    original_seconds = original.duration_seconds
    if reaction_seconds is None or original_seconds is None:
        return None
    return f"⏱️ {format_duration(reaction_seconds)} → {format_duration(original_seconds)}"


def _format_link_block(
    index: int,
    link: str,
    details: VideoDetails | None,
    reaction: VideoDetails,
    numbered: bool,
) -> str:
    if details is None:
        if numbered:
            return f"\n**Original Content {index}:** {link}\n"
        return f"**Link:** {link}\n"

    if numbered:
        block = f'\n**Original Video {index}:** "{details.title}"\n'
    else:
        block = f'**Original Video:** "{details.title}"\n'
    block += f"**Channel:** {details.channel_title}\n"
    block += f"**Link:** {link}\n"

    comparison = format_length_comparison(reaction, details)
    if comparison:
        block += f"{comparison}\n"
    return block


def format_reply(
    reaction: VideoDetails,
    links: list[str],
    details_by_link: dict[str, VideoDetails | None],
) -> str:
    """Build the reply for a video whose description credits other videos.

    Args:
        reaction: The video that was posted in chat
        links: Original-content links, primary first
        details_by_link: Metadata for each link that could be resolved;
            missing or None entries are shown as bare links

    Returns:
        Markdown reply text
    """
    numbered = len(links) > 1
    content = f"{REPLY_HEADER}\n"
    for index, link in enumerate(links, start=1):
        content += _format_link_block(
            index, link, details_by_link.get(link), reaction, numbered
        )
    content += f"\n{REPLY_FOOTER}"
    return content
