"""
adfontem.providers.ollama.client - OllamaProvider implementation.

Asks a local Ollama server to pick the original-content links out of a
video description. Used when the regex patterns find nothing, or instead
of them in LLM-only mode. Best-effort: every failure yields no links.

Example:
    >>> provider = OllamaProvider(model="llama3.2", prompt="List the source URLs.")
    >>> links = await provider.extract_links(description)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx
from ollama import ResponseError

from adfontem.config.defaults import DEFAULT_OLLAMA_URL
from adfontem.exceptions import ExtractionError
from adfontem.extraction.responses import parse_llm_links
from adfontem.providers.base import LinkExtractor, Provider

if TYPE_CHECKING:
    from adfontem.config.loader import AdFontemConfig

logger = logging.getLogger(__name__)


class OllamaProvider(Provider, LinkExtractor):
    """Ollama-backed link extractor.

    Sends one non-streaming ``/api/generate`` request per description with
    ``keep_alive=0`` so the model is unloaded right after answering.

    Args:
        model: Ollama model name (e.g., "llama3.2").
        prompt: Instruction placed before the description in every request.
        host: Ollama server URL. Defaults to http://localhost:11434.
        timeout: Request timeout in seconds. None waits indefinitely.
        enabled: When False, extract_links() returns [] without a request.
    """

    def __init__(
        self,
        model: str,
        prompt: str,
        host: str = DEFAULT_OLLAMA_URL,
        timeout: float | None = None,
        enabled: bool = True,
    ):
        self._model = model
        self._prompt = prompt
        self._host = host
        self._timeout = timeout
        self._enabled = enabled
        self._client: Any = None

    @classmethod
    def from_config(cls, config: AdFontemConfig) -> OllamaProvider:
        return cls(
            model=config.ollama_model,
            prompt=config.ollama_prompt,
            host=config.ollama_url,
            timeout=config.ollama_timeout,
            enabled=config.ollama_enabled,
        )

    @property
    def name(self) -> str:
        return "ollama"

    def is_available(self) -> bool:
        """Enabled and configured with a model and a prompt.

        Does NOT ping the server; an unreachable server shows up as an
        empty result from extract_links().
        """
        return self._enabled and bool(self._model) and bool(self._prompt)

    def _get_client(self) -> Any:
        """Lazy-load the async Ollama client."""
        if self._client is None:
            from ollama import AsyncClient

            self._client = AsyncClient(host=self._host, timeout=self._timeout)
        return self._client

    def build_prompt(self, description: str) -> str:
        """Combine the configured instruction with the description."""
        return f"{self._prompt} Text: '{description}'"

    async def generate(self, prompt: str) -> str:
        """Send one generate request and return the reply text.

        Raises:
            ResponseError: If the server answered with an error status.
            httpx.HTTPError: On transport errors and timeouts.
            ExtractionError: If the reply has no text.
        """
        client = self._get_client()
        response = await client.generate(
            model=self._model,
            prompt=prompt,
            stream=False,
            keep_alive=0,
        )
        text = response["response"]
        if not isinstance(text, str):
            raise ExtractionError(f"Ollama reply has no text: {text!r}")
        return text

    async def extract_links(self, description: str) -> list[str]:
        """Ask the model for original-content links in a description.

        Returns:
            Distinct YouTube links from the reply, or [] on any failure.
        """
        if not self._enabled:
            logger.debug("Ollama is disabled in configuration, skipping LLM extraction")
            return []

        logger.info("Trying advanced extraction with local LLM...")

        try:
            text = await self.generate(self.build_prompt(description))
            logger.debug(f"Ollama raw response: {text}")
            return parse_llm_links(text)
        except ResponseError as e:
            logger.warning(f"Ollama server not available or error: {e.status_code}")
        except (httpx.HTTPError, ConnectionError) as e:
            logger.warning(f"Ollama request failed: {e}")
        except Exception as e:
            logger.warning(f"Ollama extraction failed: {e}")
        return []

    async def extract_link(self, description: str) -> str | None:
        """Return the first link extract_links() would find."""
        links = await self.extract_links(description)
        return links[0] if links else None
