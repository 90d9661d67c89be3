"""
adfontem.extraction - Original-content link extraction.

The regex patterns and the LLM reply parser live here; the mode-switching
finder is in adfontem.extraction.finder.
"""

from adfontem.extraction.patterns import (
    extract_original_content_link,
    extract_original_content_links,
)
from adfontem.extraction.responses import parse_llm_links

__all__ = [
    "extract_original_content_link",
    "extract_original_content_links",
    "parse_llm_links",
]
