"""Tests for the VideoDetails model."""

from adfontem.models import VideoDetails


class TestVideoDetails:
    def test_from_api_item(self):
        details = VideoDetails.from_api_item(
            {
                "id": "abcdefghijk",
                "snippet": {"title": "T", "channelTitle": "C"},
                "contentDetails": {"duration": "PT1H2M"},
            }
        )
        assert details.video_id == "abcdefghijk"
        assert details.title == "T"
        assert details.channel_title == "C"
        assert details.description == ""
        assert details.duration_seconds == 3720

    def test_from_sparse_item(self):
        details = VideoDetails.from_api_item({"id": "abcdefghijk"})
        assert details.title == ""
        assert details.duration == ""
        assert details.duration_seconds is None

    def test_unparseable_duration(self):
        details = VideoDetails("abcdefghijk", "T", "C", duration="P1D")
        assert details.duration_seconds == 0
