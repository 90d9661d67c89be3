"""
Data models for adfontem.
"""

from adfontem.models.video_details import VideoDetails

__all__ = ["VideoDetails"]
