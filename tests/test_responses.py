"""Tests for parsing LLM replies into links."""

from adfontem.extraction.responses import (
    parse_bracketed_links,
    parse_line_links,
    parse_llm_links,
)

C = "https://youtu.be/CCCCCCCCCCC"
D = "https://youtu.be/DDDDDDDDDDD"
E = "https://youtu.be/EEEEEEEEEEE"


class TestBracketedGrammar:
    """Tests for the [link, link] grammar."""

    def test_quoted_list(self):
        reply = f'["{C}", "{D}"]'
        assert parse_llm_links(reply) == [C, D]

    def test_single_quotes_and_whitespace(self):
        reply = f"  [ '{C}' ,'{D}' ]  \n"
        assert parse_bracketed_links(reply) == [C, D]

    def test_unquoted(self):
        assert parse_bracketed_links(f"[{C}, {D}]") == [C, D]

    def test_duplicates_removed(self):
        assert parse_bracketed_links(f'["{C}", "{C}"]') == [C]

    def test_invalid_items_skipped(self):
        reply = f'["not a link", "{D}", "https://example.com/x"]'
        assert parse_bracketed_links(reply) == [D]

    def test_not_bracketed(self):
        assert parse_bracketed_links(f"{C}") == []

    def test_empty_list(self):
        assert parse_llm_links("[]") == []


class TestLineGrammar:
    """Tests for the one-link-per-line grammar."""

    def test_conversational_reply(self):
        reply = f"check this out\n{E}\nnothing else"
        assert parse_llm_links(reply) == [E]

    def test_link_inside_sentence(self):
        reply = f"The original video is {C}.\nAnd also {D}"
        assert parse_line_links(reply) == [C, D]

    def test_duplicates_removed(self):
        assert parse_line_links(f"{C}\n{C}\n") == [C]

    def test_first_link_per_line_only(self):
        assert parse_line_links(f"{C} {D}") == [C]


class TestGrammarOrder:
    """The line grammar only runs when the bracketed grammar finds nothing."""

    def test_bracketed_item_with_surrounding_text(self):
        reply = f"[see {C} for details]"
        assert parse_bracketed_links(reply) == [C]

    def test_bracketed_without_links_falls_back_to_lines(self):
        assert parse_llm_links("[none found]") == []

    def test_bracketed_result_wins(self):
        reply = f'["{C}"]'
        assert parse_llm_links(reply) == [C]

    def test_multiline_bracketed_list(self):
        reply = f'[\n  "{C}",\n  "{D}"\n]'
        assert parse_llm_links(reply) == [C, D]

    def test_nothing_found(self):
        assert parse_llm_links("I could not find any links.") == []

    def test_empty_and_none(self):
        assert parse_llm_links("") == []
        assert parse_llm_links(None) == []
