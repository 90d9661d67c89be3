"""
URL parsing and video ID extraction for adfontem.

Recognizes the YouTube URL shapes that show up in chat messages and video
descriptions (watch pages, youtu.be short links, embeds, legacy /v/ links
and shorts) and pulls out the 11-character video ID.
"""

import re

from pydantic import BaseModel, Field, field_validator, model_validator

# Video IDs are exactly 11 characters; the lookahead keeps longer tokens from
# matching on their first 11 characters.
VIDEO_ID_PATTERN = r"[a-zA-Z0-9_-]{11}(?![a-zA-Z0-9_-])"

# Ordered: the first pattern that matches wins.
VIDEO_ID_PATTERNS = [
    re.compile(
        r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)"
        rf"(?P<video_id>{VIDEO_ID_PATTERN})"
    ),
    re.compile(rf"youtube\.com/v/(?P<video_id>{VIDEO_ID_PATTERN})"),
    re.compile(rf"youtube\.com/shorts/(?P<video_id>{VIDEO_ID_PATTERN})"),
]

# A complete YouTube link, scheme included. Shared with the attribution
# patterns in adfontem.extraction.patterns.
YOUTUBE_LINK_PATTERN = (
    r"https?://(?:www\.)?"
    r"(?:youtube\.com/(?:watch\?v=|embed/|v/|shorts/)|youtu\.be/)"
    rf"{VIDEO_ID_PATTERN}"
)

_YOUTUBE_LINK_RE = re.compile(YOUTUBE_LINK_PATTERN)


def extract_video_id(url: str) -> str | None:
    """Extract the YouTube video ID from a URL.

    Args:
        url: Any URL-ish string.

    Returns:
        The 11-character video ID, or None if no known URL shape matches.
    """
    if not url:
        return None
    for pattern in VIDEO_ID_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group("video_id")
    return None


def find_youtube_link(text: str) -> str | None:
    """Find the first YouTube video link in a block of text.

    Returns the whole matched URL (scheme, host and ID), not just the ID.
    """
    if not text:
        return None
    match = _YOUTUBE_LINK_RE.search(text)
    return match.group(0) if match else None


def is_youtube_link(url: str) -> bool:
    """Check if a string contains a recognizable YouTube video link."""
    return find_youtube_link(url) is not None


class YouTubeURL(BaseModel):
    """Parsed and validated YouTube video URL."""

    url: str = Field(..., description="Original URL (whitespace stripped)")
    video_id: str = Field(default="", description="Extracted 11-character video ID")

    @field_validator("url", mode="before")
    @classmethod
    def normalize_url(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("URL cannot be empty")
        return v

    @model_validator(mode="after")
    def extract_id(self) -> "YouTubeURL":
        video_id = extract_video_id(self.url)
        if video_id is None:
            raise ValueError(f"Not a recognizable YouTube video URL: {self.url}")
        self.video_id = video_id
        return self

    @classmethod
    def parse(cls, url: str) -> "YouTubeURL":
        """Parse a URL and extract its video ID.

        Raises:
            ValueError: If the URL is empty or not a YouTube video URL.
        """
        return cls(url=url)

    @classmethod
    def try_parse(cls, url: str | None) -> "YouTubeURL | None":
        """Try to parse a URL, returning None on failure instead of raising."""
        if not url:
            return None
        try:
            return cls.parse(url)
        except ValueError:
            return None

    @property
    def canonical_url(self) -> str:
        return f"https://www.youtube.com/watch?v={self.video_id}"

    def __str__(self) -> str:
        return self.video_id
