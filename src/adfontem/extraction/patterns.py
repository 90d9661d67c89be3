"""
adfontem.extraction.patterns - Regex attribution-link extraction.

Reaction and repost descriptions usually credit the source video with a
labeled link ("Original: https://youtu.be/..."). This module scans for
those labels in priority order and, only when none match, falls back to a
looser pattern that accepts any text between a label word and a link.

Results are de-duplicated by exact string, first occurrence wins.
"""

import logging
import re

from adfontem.urls import YOUTUBE_LINK_PATTERN

logger = logging.getLogger(__name__)

_LINK = rf"({YOUTUBE_LINK_PATTERN})"

# Checked in order; every match of every pattern is collected.
ATTRIBUTION_PATTERNS = [
    # "Original: ...", "Original video: ...", "Source: ..."
    re.compile(rf"(?:original(?:\s+video)?|source):\s*{_LINK}", re.IGNORECASE),
    # "Credit: ...", "Credits: ..."
    re.compile(rf"credits?:\s*{_LINK}", re.IGNORECASE),
    # "From: ..."
    re.compile(rf"from:\s*{_LINK}", re.IGNORECASE),
    # "Reacts to: ...", "Reacting to: ..."
    re.compile(rf"react(?:s|ing)?\s+to:\s*{_LINK}", re.IGNORECASE),
    # "Video by: ..."
    re.compile(rf"video\s+by:\s*{_LINK}", re.IGNORECASE),
    # "By: ..."
    re.compile(rf"by:\s*{_LINK}", re.IGNORECASE),
]

# Only used when no labeled pattern matched. Non-greedy, so each label word
# pairs with the nearest link after it on the same line.
GENERAL_ATTRIBUTION_PATTERN = re.compile(
    rf"(?:original|source|credit|from|react(?:s|ing)?\s+to|video\s+by|by).*?{_LINK}",
    re.IGNORECASE,
)


def _collect(pattern: re.Pattern, text: str, found: list[str], label: str) -> None:
    for match in pattern.finditer(text):
        link = match.group(1)
        if link and link not in found:
            found.append(link)
            logger.debug(f"Found original content link with {label} pattern: {link}")


def extract_original_content_links(description: str) -> list[str]:
    """Extract attributed original-content links from a video description.

    Args:
        description: The video description to analyze

    Returns:
        Distinct links in pattern-priority order, then text order.
    """
    if not description:
        return []

    found: list[str] = []
    for pattern in ATTRIBUTION_PATTERNS:
        _collect(pattern, description, found, "labeled")

    if not found:
        _collect(GENERAL_ATTRIBUTION_PATTERN, description, found, "general")

    return found


def extract_original_content_link(description: str) -> str | None:
    """Return the first link extract_original_content_links() would find."""
    links = extract_original_content_links(description)
    return links[0] if links else None
