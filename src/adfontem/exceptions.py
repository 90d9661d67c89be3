"""
Custom exceptions for adfontem.

All adfontem exceptions inherit from AdFontemError for easy catching.
Extraction itself never raises to its callers; these exceptions classify
failures inside collaborators before they are logged and degraded.
"""

from __future__ import annotations

from typing import Any


class AdFontemError(Exception):
    """Base exception for all adfontem errors."""

    pass


class ConfigError(AdFontemError):
    """Configuration is missing required values or is inconsistent.

    Attributes:
        errors: One human-readable line per problem found.
    """

    def __init__(self, message: str, *, errors: list[str] | None = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []

    def __str__(self) -> str:
        if not self.errors:
            return self.message
        return f"{self.message}: " + "; ".join(self.errors)


class MetadataError(AdFontemError):
    """Video metadata could not be retrieved from the YouTube API.

    Attributes:
        video_id: The video that was requested.
        status: HTTP status code, if the API answered at all.
    """

    def __init__(
        self,
        message: str,
        *,
        video_id: str | None = None,
        status: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.video_id = video_id
        self.status = status

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "type": self.__class__.__name__,
            "message": self.message,
        }
        if self.video_id:
            result["video_id"] = self.video_id
        if self.status is not None:
            result["status"] = self.status
        return result


class ExtractionError(AdFontemError):
    """A link extractor produced a reply that could not be used."""

    pass
