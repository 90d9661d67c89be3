"""Pytest configuration for adfontem tests."""

import pytest

from adfontem.config.defaults import ENV_VARS
from adfontem.config.loader import AdFontemConfig, clear_config_cache


def pytest_addoption(parser):
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run integration tests against a real Ollama server / YouTube API",
    )


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--run-integration"):
        skip = pytest.mark.skip(reason="needs --run-integration flag")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip)


class FakeExtractor:
    """LinkExtractor stand-in that records calls and returns canned links."""

    def __init__(self, links=None):
        self.links = list(links or [])
        self.calls: list[str] = []

    async def extract_links(self, description: str) -> list[str]:
        self.calls.append(description)
        return list(self.links)


@pytest.fixture
def make_extractor():
    """Build a FakeExtractor returning the given links."""

    def _make(links=None):
        return FakeExtractor(links)

    return _make


@pytest.fixture
def make_config():
    """Build an AdFontemConfig with sensible test defaults."""

    def _make(**overrides):
        values = {
            "youtube_api_key": "test-api-key-1234",
            "ollama_model": "llama3.2",
            "ollama_prompt": "List the original video URLs.",
        }
        values.update(overrides)
        return AdFontemConfig(**values)

    return _make


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every adfontem env var and reset the cached config."""
    for env_var in ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.delenv("ADFONTEM_ROOT", raising=False)
    clear_config_cache()
    yield monkeypatch
    clear_config_cache()
