"""
adfontem.extraction.finder - Pick and run the link extractors.

Three modes, decided per call from the config:

- LLM only (OLLAMA_ENABLED and OLLAMA_ONLY): skip regex, ask the model.
- Regex then LLM (OLLAMA_ENABLED): regex first; the model only runs when
  regex found nothing, and its result replaces the empty one.
- Regex only: the model is never called.

Regex results, when there are any, always win over model results.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from adfontem.config.loader import AdFontemConfig, ExtractionMode, get_config
from adfontem.extraction.patterns import extract_original_content_links
from adfontem.providers.base import LinkExtractor
from adfontem.providers.ollama import OllamaProvider

logger = logging.getLogger(__name__)


class OriginalContentFinder:
    """Finds original-content links in a video description.

    Holds no state between calls; safe to share across concurrent
    message handlers.

    Args:
        config: Resolved configuration (only the Ollama flags are read).
        llm_extractor: Extractor used in the LLM modes. Defaults to an
            OllamaProvider built from config.
    """

    def __init__(
        self,
        config: AdFontemConfig,
        llm_extractor: LinkExtractor | None = None,
    ):
        self._config = config
        self._llm = llm_extractor or OllamaProvider.from_config(config)

    @property
    def mode(self) -> ExtractionMode:
        return self._config.extraction_mode

    async def find_links(self, description: str) -> list[str]:
        """Find all original-content links in a description.

        Args:
            description: The video description

        Returns:
            Distinct candidate links, primary first. Empty if none found.
        """
        mode = self.mode

        if mode is ExtractionMode.LLM_ONLY:
            logger.debug("OLLAMA_ONLY mode enabled, skipping regex patterns")
            return await self._llm.extract_links(description)

        regex_links = extract_original_content_links(description)
        if regex_links:
            return regex_links

        if mode is ExtractionMode.REGEX_THEN_LLM:
            return await self._llm.extract_links(description)

        logger.debug("No original content links found and Ollama is disabled")
        return []

    async def find_link(self, description: str) -> str | None:
        """Return the first link find_links() would return."""
        links = await self.find_links(description)
        return links[0] if links else None


@lru_cache(maxsize=8)
def _shared_finder(config: AdFontemConfig) -> OriginalContentFinder:
    """One finder, and so one Ollama client, per distinct config."""
    return OriginalContentFinder(config)


async def find_original_content_links(
    description: str,
    config: AdFontemConfig | None = None,
) -> list[str]:
    """Find all original-content links using the given (or process) config.

    Calls with equal configs share one OriginalContentFinder.
    """
    finder = _shared_finder(config or get_config())
    return await finder.find_links(description)


async def find_original_content_link(
    description: str,
    config: AdFontemConfig | None = None,
) -> str | None:
    """Find the primary original-content link, or None."""
    finder = _shared_finder(config or get_config())
    return await finder.find_link(description)
