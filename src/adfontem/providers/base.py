"""
adfontem.providers.base - Abstract base class and protocol for providers.

Providers wrap an external model that can read a video description and
point out the links it credits as original content.

Classes:
    Provider: Abstract base class for all providers.

Protocols:
    LinkExtractor: Anything that turns a description into candidate links.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable


class Provider(ABC):
    """Abstract base class for all providers.

    Example:
        >>> class MyProvider(Provider):
        ...     @property
        ...     def name(self) -> str:
        ...         return "my-provider"
        ...     def is_available(self) -> bool:
        ...         return True
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider identifier used in logs (e.g., "ollama")."""
        ...

    @abstractmethod
    def is_available(self) -> bool:
        """Check if provider is configured and ready.

        Returns:
            True if the provider can be used, False otherwise.
        """
        ...


@runtime_checkable
class LinkExtractor(Protocol):
    """Protocol for description-to-links extractors.

    Implementations must not raise: any failure is reported as an
    empty list.

    Example:
        >>> extractor: LinkExtractor = OllamaProvider.from_config(config)
        >>> links = await extractor.extract_links(details.description)
    """

    async def extract_links(self, description: str) -> list[str]:
        """Find links the description credits as original content.

        Args:
            description: Free-text video description.

        Returns:
            Distinct candidate URLs, best first. Empty on any failure.
        """
        ...
