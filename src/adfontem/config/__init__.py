"""
Configuration for adfontem.

Contains the immutable runtime config, its loader, and default settings.
"""

from adfontem.config.defaults import DEFAULT_OLLAMA_URL, YOUTUBE_API_URL
from adfontem.config.loader import (
    AdFontemConfig,
    ConfigSource,
    ConfigValidationResult,
    ExtractionMode,
    clear_config_cache,
    get_config,
    load_config,
)

__all__ = [
    "DEFAULT_OLLAMA_URL",
    "YOUTUBE_API_URL",
    "AdFontemConfig",
    "ConfigSource",
    "ConfigValidationResult",
    "ExtractionMode",
    "clear_config_cache",
    "get_config",
    "load_config",
]
