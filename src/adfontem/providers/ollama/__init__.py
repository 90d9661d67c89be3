"""
adfontem.providers.ollama - Ollama local LLM provider.

Extracts original-content links from descriptions via a local Ollama
server. Fully offline, no API keys required.

Example:
    >>> from adfontem.providers.ollama import OllamaProvider
    >>> provider = OllamaProvider.from_config(config)
    >>> links = await provider.extract_links(description)
"""

from adfontem.providers.ollama.client import OllamaProvider

__all__ = ["OllamaProvider"]
