"""Shared test fixtures."""

import random
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import yaml

from airwise.config.schema import AppConfig, CredentialsConfig, EndpointsConfig
from airwise.llm.client import GeminiClient

TEST_ENDPOINTS = EndpointsConfig(
    waqi_base_url="https://test-waqi.example.com",
    openweathermap_base_url="https://test-owm.example.com",
    youtube_base_url="https://test-youtube.example.com/v3",
    google_news_base_url="https://test-news.example.com",
    reddit_auth_url="https://test-reddit.example.com/api/v1/access_token",
    reddit_api_base_url="https://test-oauth-reddit.example.com",
)


@pytest.fixture
def configured() -> AppConfig:
    """Config with every credential set and test endpoints."""
    return AppConfig(
        credentials=CredentialsConfig(
            aqicn_api_key="waqi-key",
            openweathermap_api_key="owm-key",
            youtube_api_key="yt-key",
            reddit_client_id="rid",
            reddit_client_secret="rsecret",
            reddit_username="ruser",
            reddit_password="rpass",
            gemini_api_key="gemini-key",
        ),
        endpoints=TEST_ENDPOINTS,
        ops={"random_seed": 42},
    )


@pytest.fixture
def unconfigured() -> AppConfig:
    """Config with no credentials at all."""
    return AppConfig(endpoints=TEST_ENDPOINTS, ops={"random_seed": 42})


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def llm() -> MagicMock:
    """A configured GeminiClient double; set ``generate`` per test."""
    mock = MagicMock(spec=GeminiClient)
    mock.is_configured.return_value = True
    return mock


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "forecast": {"days": 4},
        "fallback": {"city_label": "Test Town", "latitude": 1.5, "longitude": 2.5},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
