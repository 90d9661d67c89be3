"""
Default configuration values for adfontem.

Note: Values are resolved by config/loader.py, which layers environment
variables over project and user YAML config.
"""

# Local Ollama server
DEFAULT_OLLAMA_URL = "http://localhost:11434"

# YouTube Data API v3 endpoint used for video metadata
YOUTUBE_API_URL = "https://www.googleapis.com/youtube/v3/videos"

# Timeout for YouTube metadata requests (seconds)
METADATA_TIMEOUT = 30

# Visible characters at the end of obfuscated secrets in logs
SECRET_VISIBLE_CHARS = 4

# Environment variable for each config field
ENV_VARS: dict[str, str] = {
    "youtube_api_key": "YOUTUBE_API_KEY",
    "debug": "DEBUG",
    "ollama_enabled": "OLLAMA_ENABLED",
    "ollama_only": "OLLAMA_ONLY",
    "ollama_url": "OLLAMA_URL",
    "ollama_model": "OLLAMA_MODEL",
    "ollama_prompt": "OLLAMA_PROMPT",
    "ollama_timeout": "OLLAMA_TIMEOUT",
}
