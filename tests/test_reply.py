"""Tests for reply formatting."""

from adfontem.models.video_details import VideoDetails
from adfontem.operations.reply import (
    REPLY_FOOTER,
    REPLY_HEADER,
    format_length_comparison,
    format_reply,
)

LINK_A = "https://youtu.be/AAAAAAAAAAA"
LINK_B = "https://www.youtube.com/watch?v=BBBBBBBBBBB"


def _video(video_id, title="Title", channel="Channel", duration=""):
    return VideoDetails(
        video_id=video_id, title=title, channel_title=channel, duration=duration
    )


REACTION = _video("RRRRRRRRRRR", "Reacting to things", "Reactor", "PT25M10S")


class TestFormatLengthComparison:
    def test_both_known(self):
        original = _video("AAAAAAAAAAA", duration="PT3M20S")
        assert format_length_comparison(REACTION, original) == "⏱️ 25m 10s → 3m 20s"

    def test_hours_drop_seconds(self):
        reaction = _video("RRRRRRRRRRR", duration="PT1H2M3S")
        original = _video("AAAAAAAAAAA", duration="PT45S")
        assert format_length_comparison(reaction, original) == "⏱️ 1h 2m → 45s"

    def test_unknown_duration(self):
        original = _video("AAAAAAAAAAA")
        assert format_length_comparison(REACTION, original) is None


class TestFormatReply:
    """Tests for format_reply()."""

    def test_single_link_with_details(self):
        original = _video("AAAAAAAAAAA", "The Original", "Creator", "PT3M20S")
        reply = format_reply(REACTION, [LINK_A], {LINK_A: original})
        assert reply == (
            f"{REPLY_HEADER}\n"
            '**Original Video:** "The Original"\n'
            "**Channel:** Creator\n"
            f"**Link:** {LINK_A}\n"
            "⏱️ 25m 10s → 3m 20s\n"
            f"\n{REPLY_FOOTER}"
        )

    def test_single_link_without_details(self):
        reply = format_reply(REACTION, [LINK_A], {LINK_A: None})
        assert reply == f"{REPLY_HEADER}\n**Link:** {LINK_A}\n\n{REPLY_FOOTER}"

    def test_missing_details_entry(self):
        reply = format_reply(REACTION, [LINK_A], {})
        assert f"**Link:** {LINK_A}" in reply

    def test_no_comparison_without_durations(self):
        original = _video("AAAAAAAAAAA", "The Original", "Creator")
        reply = format_reply(REACTION, [LINK_A], {LINK_A: original})
        assert "⏱️" not in reply

    def test_multiple_links_are_numbered(self):
        original = _video("AAAAAAAAAAA", "First", "Creator A", "PT10M")
        reply = format_reply(
            REACTION, [LINK_A, LINK_B], {LINK_A: original, LINK_B: None}
        )
        assert reply == (
            f"{REPLY_HEADER}\n"
            '\n**Original Video 1:** "First"\n'
            "**Channel:** Creator A\n"
            f"**Link:** {LINK_A}\n"
            "⏱️ 25m 10s → 10m\n"
            f"\n**Original Content 2:** {LINK_B}\n"
            f"\n{REPLY_FOOTER}"
        )

    def test_order_follows_links(self):
        reply = format_reply(REACTION, [LINK_B, LINK_A], {})
        assert reply.index(LINK_B) < reply.index(LINK_A)
