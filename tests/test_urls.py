"""Tests for YouTube URL recognition."""

import pytest

from adfontem.urls import (
    YouTubeURL,
    extract_video_id,
    find_youtube_link,
    is_youtube_link,
)


class TestExtractVideoId:
    """Tests for extract_video_id()."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            "https://youtube.com/watch?v=dQw4w9WgXcQ&t=120",
            "https://youtu.be/dQw4w9WgXcQ",
            "https://www.youtube.com/embed/dQw4w9WgXcQ",
            "https://youtube.com/v/dQw4w9WgXcQ",
            "https://youtube.com/shorts/dQw4w9WgXcQ",
            "youtu.be/dQw4w9WgXcQ",
        ],
    )
    def test_known_shapes(self, url):
        assert extract_video_id(url) == "dQw4w9WgXcQ"

    def test_short_link(self):
        assert extract_video_id("https://youtu.be/dQw4w9WgXcQ") == "dQw4w9WgXcQ"

    def test_unknown_host(self):
        assert extract_video_id("https://example.com/dQw4w9WgXcQ") is None

    def test_id_too_short(self):
        assert extract_video_id("https://youtu.be/dQw4w9WgXc") is None

    def test_id_too_long(self):
        assert extract_video_id("https://youtu.be/dQw4w9WgXcQQ") is None

    def test_trailing_punctuation(self):
        assert extract_video_id("(https://youtu.be/dQw4w9WgXcQ).") == "dQw4w9WgXcQ"

    def test_empty(self):
        assert extract_video_id("") is None

    def test_playlist_is_not_a_video(self):
        assert extract_video_id("https://youtube.com/playlist?list=PLxyz") is None


class TestFindYoutubeLink:
    """Tests for find_youtube_link()."""

    def test_finds_link_in_prose(self):
        text = "lol watch this https://www.youtube.com/watch?v=dQw4w9WgXcQ so good"
        assert find_youtube_link(text) == "https://www.youtube.com/watch?v=dQw4w9WgXcQ"

    def test_returns_first_link(self):
        text = "https://youtu.be/AAAAAAAAAAA and https://youtu.be/BBBBBBBBBBB"
        assert find_youtube_link(text) == "https://youtu.be/AAAAAAAAAAA"

    def test_requires_scheme(self):
        assert find_youtube_link("youtu.be/dQw4w9WgXcQ") is None

    def test_http_and_shorts(self):
        text = "see http://youtube.com/shorts/dQw4w9WgXcQ"
        assert find_youtube_link(text) == "http://youtube.com/shorts/dQw4w9WgXcQ"

    def test_drops_query_suffix(self):
        text = "https://youtu.be/dQw4w9WgXcQ?si=abc"
        assert find_youtube_link(text) == "https://youtu.be/dQw4w9WgXcQ"

    def test_no_link(self):
        assert find_youtube_link("nothing to see here") is None
        assert find_youtube_link("") is None

    def test_non_youtube_link(self):
        assert find_youtube_link("https://vimeo.com/123456") is None

    def test_is_youtube_link(self):
        assert is_youtube_link("https://youtu.be/dQw4w9WgXcQ")
        assert not is_youtube_link("https://example.com")


class TestYouTubeURL:
    """Tests for the YouTubeURL Pydantic model."""

    def test_parse(self):
        v = YouTubeURL.parse("  https://youtu.be/dQw4w9WgXcQ  ")
        assert v.video_id == "dQw4w9WgXcQ"
        assert v.url == "https://youtu.be/dQw4w9WgXcQ"
        assert str(v) == "dQw4w9WgXcQ"

    def test_canonical_url(self):
        v = YouTubeURL.parse("https://youtube.com/shorts/dQw4w9WgXcQ")
        assert v.canonical_url == "https://www.youtube.com/watch?v=dQw4w9WgXcQ"

    def test_parse_rejects_non_youtube(self):
        with pytest.raises(ValueError):
            YouTubeURL.parse("https://example.com/video")

    def test_parse_rejects_empty(self):
        with pytest.raises(ValueError):
            YouTubeURL.parse("   ")

    def test_try_parse(self):
        assert YouTubeURL.try_parse("https://example.com") is None
        assert YouTubeURL.try_parse("https://youtu.be/dQw4w9WgXcQ") is not None

    def test_try_parse_missing(self):
        assert YouTubeURL.try_parse(None) is None
        assert YouTubeURL.try_parse("") is None

    def test_video_id_comes_from_url(self):
        v = YouTubeURL(url="https://www.youtube.com/embed/dQw4w9WgXcQ")
        assert v.video_id == "dQw4w9WgXcQ"

    def test_try_parse_found_link(self):
        v = YouTubeURL.try_parse(find_youtube_link("see https://youtu.be/AAAAAAAAAAA"))
        assert v is not None
        assert v.video_id == "AAAAAAAAAAA"
