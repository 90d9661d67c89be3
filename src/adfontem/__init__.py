"""
adfontem - Find the original videos behind reposts and reactions.

Watches chat messages for YouTube links and looks for the videos a
reposting creator credits in their description:
1. Regex patterns for labeled credits ("Original: ...", "Credit: ...")
2. Optional local LLM (Ollama) when the patterns find nothing
3. Reply with the original's title, channel, link and length
"""

# Config
from adfontem.config.loader import (
    AdFontemConfig,
    ConfigSource,
    ExtractionMode,
    get_config,
    load_config,
)

# Exceptions
from adfontem.exceptions import (
    AdFontemError,
    ConfigError,
    ExtractionError,
    MetadataError,
)

# Extraction
from adfontem.extraction.finder import (
    OriginalContentFinder,
    find_original_content_link,
    find_original_content_links,
)
from adfontem.extraction.patterns import (
    extract_original_content_link,
    extract_original_content_links,
)
from adfontem.extraction.responses import parse_llm_links

# Models
from adfontem.models.video_details import VideoDetails
from adfontem.operations.processor import process_message
from adfontem.operations.reply import format_reply
from adfontem.providers.ollama import OllamaProvider

# URL utilities
from adfontem.urls import YouTubeURL, extract_video_id, find_youtube_link
from adfontem.utils.formatting import format_duration, parse_duration
from adfontem.youtube.metadata import YouTubeMetadataClient

__version__ = "1.0.0"

__all__ = [
    # Extraction
    "OriginalContentFinder",
    "find_original_content_links",
    "find_original_content_link",
    "extract_original_content_links",
    "extract_original_content_link",
    "parse_llm_links",
    "OllamaProvider",
    # Operations
    "process_message",
    "format_reply",
    "YouTubeMetadataClient",
    # Models
    "VideoDetails",
    "YouTubeURL",
    # Config
    "AdFontemConfig",
    "ConfigSource",
    "ExtractionMode",
    "get_config",
    "load_config",
    # URL and duration utilities
    "extract_video_id",
    "find_youtube_link",
    "parse_duration",
    "format_duration",
    # Exceptions
    "AdFontemError",
    "ConfigError",
    "ExtractionError",
    "MetadataError",
]
