"""
Unified configuration loader with priority resolution.

Root directory (ADFONTEM_ROOT):
- macOS/Linux: ~/.adfontem
- Windows: %APPDATA%\\adfontem
- Override: ADFONTEM_ROOT environment variable

Priority for every setting (highest to lowest):
1. Environment variable (YOUTUBE_API_KEY, OLLAMA_ENABLED, ...)
2. Project config (.adfontem/config.yaml)
3. User config ({root_dir}/config.yaml)
4. Default

YAML structure:
    youtube_api_key: ${YOUTUBE_API_KEY}
    debug: false
    ollama:
      enabled: true
      only: false
      url: http://localhost:11434
      model: llama3.2
      prompt: "List every URL this text credits as the original video."
      timeout: 60

The resolved AdFontemConfig is immutable and is passed explicitly to the
components that need it.
"""

import logging
import os
import re
import sys
from dataclasses import dataclass, field, fields
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from adfontem.config.defaults import DEFAULT_OLLAMA_URL, ENV_VARS, SECRET_VISIBLE_CHARS
from adfontem.exceptions import ConfigError

logger = logging.getLogger(__name__)

# Pattern for ${ENV_VAR} interpolation
ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")

_BOOL_FIELDS = frozenset({"debug", "ollama_enabled", "ollama_only"})
_SECRET_FIELDS = frozenset({"youtube_api_key"})


class ConfigSource(Enum):
    """Source of the configuration value."""

    ENV = "env"
    PROJECT = "project"
    USER = "user"
    DEFAULT = "default"


class ExtractionMode(Enum):
    """Which link extractors run, derived from the Ollama flags."""

    LLM_ONLY = "llm_only"
    REGEX_THEN_LLM = "regex_then_llm"
    REGEX_ONLY = "regex_only"


@dataclass
class ConfigValidationResult:
    """Result of validating a resolved config.

    Attributes:
        errors: Fatal issues that prevent correct operation.
        warnings: Non-fatal issues that may cause unexpected behavior.
    """

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True if no errors were found."""
        return len(self.errors) == 0


@dataclass(frozen=True)
class AdFontemConfig:
    """Resolved adfontem configuration."""

    youtube_api_key: str = ""
    debug: bool = False
    ollama_enabled: bool = False
    ollama_only: bool = False
    ollama_url: str = DEFAULT_OLLAMA_URL
    ollama_model: str = ""
    ollama_prompt: str = ""
    # None means the Ollama request never times out
    ollama_timeout: float | None = None
    source: ConfigSource = ConfigSource.DEFAULT

    @property
    def extraction_mode(self) -> ExtractionMode:
        """Decide which extractors run.

        OLLAMA_ONLY without OLLAMA_ENABLED falls through to plain regex.
        """
        if not self.ollama_enabled:
            return ExtractionMode.REGEX_ONLY
        if self.ollama_only:
            return ExtractionMode.LLM_ONLY
        return ExtractionMode.REGEX_THEN_LLM

    def validate(self) -> ConfigValidationResult:
        """Check that required values are present.

        Returns:
            ConfigValidationResult with errors and warnings.
        """
        result = ConfigValidationResult()

        if not self.youtube_api_key:
            result.errors.append("YOUTUBE_API_KEY environment variable not set")

        if self.ollama_enabled:
            for name in ("ollama_model", "ollama_prompt", "ollama_url"):
                if not getattr(self, name):
                    result.errors.append(
                        f"{ENV_VARS[name]} environment variable not set or empty, "
                        "but Ollama is enabled"
                    )
        elif self.ollama_only:
            result.warnings.append(
                "OLLAMA_ONLY is set but OLLAMA_ENABLED is not; "
                "falling back to regex extraction"
            )

        return result

    def sanitized(self) -> dict[str, Any]:
        """Config as a dict with secrets obfuscated, for logging."""
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name in _SECRET_FIELDS and value:
                value = _obfuscate(value)
            elif isinstance(value, Enum):
                value = value.value
            result[f.name] = value
        return result

    def __repr__(self) -> str:
        return (
            f"AdFontemConfig(mode={self.extraction_mode.value!r}, "
            f"ollama_url={self.ollama_url!r}, ollama_model={self.ollama_model!r}, "
            f"source={self.source.value!r})"
        )


def _obfuscate(value: str) -> str:
    """Hide all but the last few characters of a secret."""
    hidden = max(len(value) - SECRET_VISIBLE_CHARS, 0)
    return "*" * hidden + value[hidden:]


def _interpolate_env_vars(value: Any) -> Any:
    """Replace ${ENV_VAR} patterns with environment variable values.

    Recursively processes strings, dicts, and lists. Missing env vars
    produce a warning and are replaced with empty string.
    """
    if isinstance(value, str):

        def _replace_match(match: re.Match) -> str:
            var_name = match.group(1)
            env_value = os.environ.get(var_name)
            if env_value is None:
                logger.warning(
                    "Environment variable %s not set (referenced in config)",
                    var_name,
                )
                return ""
            return env_value

        return ENV_VAR_PATTERN.sub(_replace_match, value)
    elif isinstance(value, dict):
        return {k: _interpolate_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_interpolate_env_vars(v) for v in value]
    return value


def _load_yaml_config(config_path: Path) -> dict[str, Any] | None:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Parsed config dict, or None if file doesn't exist or fails to parse.
    """
    if not config_path.exists():
        return None

    try:
        with open(config_path) as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}")
        return None

    if config is None:
        return {}
    if not isinstance(config, dict):
        logger.warning(f"Config file {config_path} is not a valid YAML dict")
        return None
    return config


def _flatten_yaml_config(config: dict[str, Any] | None) -> dict[str, Any]:
    """Map a parsed YAML config onto AdFontemConfig field names.

    Top-level keys use field names directly; the ``ollama`` section uses
    short keys (enabled, only, url, model, prompt, timeout).
    """
    if not config:
        return {}

    config = _interpolate_env_vars(config)
    values: dict[str, Any] = {}

    for key in ("youtube_api_key", "debug"):
        if key in config:
            values[key] = config[key]

    ollama = config.get("ollama")
    if isinstance(ollama, dict):
        for key, value in ollama.items():
            name = f"ollama_{key}"
            if name in ENV_VARS:
                values[name] = value
            else:
                logger.warning(f"Unknown ollama config key: {key!r}")
    elif ollama is not None:
        logger.warning("Config 'ollama' section must be a mapping, ignoring it")

    return values


def _read_env() -> dict[str, str]:
    """Collect config values set in the environment."""
    values = {}
    for name, env_var in ENV_VARS.items():
        raw = os.environ.get(env_var)
        if raw is not None:
            values[name] = raw
    return values


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


def _coerce_timeout(value: Any) -> float | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-numeric OLLAMA_TIMEOUT: {value!r}")
        return None
    if timeout <= 0:
        logger.warning(f"Ignoring non-positive OLLAMA_TIMEOUT: {value!r}")
        return None
    return timeout


def _coerce(name: str, value: Any) -> Any:
    """Convert a raw env/YAML value to the field's type."""
    if name in _BOOL_FIELDS:
        return _coerce_bool(value)
    if name == "ollama_timeout":
        return _coerce_timeout(value)
    if value is None:
        return ""
    return str(value).strip()


def _find_project_config() -> Path | None:
    """Find project-level config by walking up from cwd.

    Returns:
        Path to .adfontem/config.yaml if found, None otherwise.
    """
    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        config_path = parent / ".adfontem" / "config.yaml"
        if config_path.exists():
            return config_path
    return None


def _get_root_dir() -> Path:
    """Get the adfontem root directory.

    Priority:
    1. ADFONTEM_ROOT environment variable
    2. Platform-specific default:
       - Windows: %APPDATA%\\adfontem
       - macOS/Linux: ~/.adfontem
    """
    env_root = os.environ.get("ADFONTEM_ROOT")
    if env_root:
        return Path(env_root).expanduser().resolve()

    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / "adfontem"
        return Path.home() / "AppData" / "Roaming" / "adfontem"
    return Path.home() / ".adfontem"


def _get_user_config_path() -> Path:
    """Get the user-level config path ({root_dir}/config.yaml)."""
    return _get_root_dir() / "config.yaml"


def _resolve_config() -> AdFontemConfig:
    """Resolve configuration from all sources in priority order.

    Each layer overrides the ones below it key by key. The reported source
    is the highest-priority layer that supplied any value.
    """
    layers: list[tuple[ConfigSource, dict[str, Any]]] = [
        (ConfigSource.USER, _flatten_yaml_config(_load_yaml_config(_get_user_config_path()))),
    ]

    project_config_path = _find_project_config()
    if project_config_path:
        layers.append(
            (
                ConfigSource.PROJECT,
                _flatten_yaml_config(_load_yaml_config(project_config_path)),
            )
        )

    layers.append((ConfigSource.ENV, _read_env()))

    values: dict[str, Any] = {}
    source = ConfigSource.DEFAULT
    for layer_source, layer_values in layers:
        if layer_values:
            source = layer_source
        for name, raw in layer_values.items():
            values[name] = _coerce(name, raw)

    config = AdFontemConfig(**values, source=source)
    logger.debug(f"Resolved config from {source.value}: {config.sanitized()}")
    return config


def load_config(strict: bool = False) -> AdFontemConfig:
    """Resolve configuration and report problems.

    Args:
        strict: Raise ConfigError instead of logging when validation fails.

    Returns:
        The resolved AdFontemConfig.

    Raises:
        ConfigError: If strict and the config has errors.
    """
    config = _resolve_config()
    result = config.validate()

    for warning in result.warnings:
        logger.warning(warning)

    if not result.is_valid:
        if strict:
            raise ConfigError("Invalid configuration", errors=result.errors)
        for error in result.errors:
            logger.error(error)

    return config


@lru_cache(maxsize=1)
def get_config() -> AdFontemConfig:
    """Get resolved adfontem configuration.

    Results are cached - configuration is resolved once per process.
    To force re-resolution (e.g., after env change), use clear_config_cache().
    """
    return load_config()


def clear_config_cache() -> None:
    """Clear the cached configuration."""
    get_config.cache_clear()
