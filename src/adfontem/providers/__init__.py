"""
adfontem.providers - External models used for link extraction.
"""

from adfontem.providers.base import LinkExtractor, Provider
from adfontem.providers.ollama import OllamaProvider

__all__ = ["LinkExtractor", "OllamaProvider", "Provider"]
