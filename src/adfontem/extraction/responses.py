"""
adfontem.extraction.responses - Recover links from free-form LLM replies.

Models are asked for a bracketed list of URLs but don't always comply, so
replies are read with two grammars in order:

1. Bracketed list: ``["https://youtu.be/...", "https://youtu.be/..."]``
2. One candidate per line, for conversational replies.

The line grammar only runs when the bracketed grammar found nothing.
Every candidate is re-validated as a YouTube link.
"""

import logging

from adfontem.urls import find_youtube_link

logger = logging.getLogger(__name__)

_QUOTES = "'\""


def _add_link(candidate: str, found: list[str]) -> None:
    link = find_youtube_link(candidate)
    if link and link not in found:
        found.append(link)
        logger.info(f"LLM found original content link: {link}")


def parse_bracketed_links(text: str) -> list[str]:
    """Parse a ``[link, link, ...]`` reply.

    Returns an empty list if the reply isn't bracketed.
    """
    stripped = text.strip()
    if not (stripped.startswith("[") and stripped.endswith("]")):
        return []

    pieces = stripped[1:-1].split(",")
    logger.debug(f"Found array format with {len(pieces)} potential links")

    found: list[str] = []
    for piece in pieces:
        candidate = piece.strip().strip(_QUOTES).strip()
        logger.debug(f"Processing array item: {candidate!r}")
        _add_link(candidate, found)
    return found


def parse_line_links(text: str) -> list[str]:
    """Parse a reply that has (at most) one link per line."""
    lines = text.split("\n")
    logger.debug(f"Split response into {len(lines)} lines")

    found: list[str] = []
    for line in lines:
        _add_link(line.strip(), found)
    return found


def parse_llm_links(text: str | None) -> list[str]:
    """Extract distinct YouTube links from a model reply.

    Args:
        text: Raw reply text

    Returns:
        Distinct links in reply order; empty if nothing usable was found.
    """
    if not text:
        return []

    found = parse_bracketed_links(text)
    if not found:
        found = parse_line_links(text)

    if not found:
        logger.debug("No links found in LLM response")
    return found
