"""
YouTube metadata access for adfontem.
"""

from adfontem.youtube.metadata import YouTubeMetadataClient

__all__ = ["YouTubeMetadataClient"]
