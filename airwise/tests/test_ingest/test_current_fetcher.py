"""Tests for the current-conditions fetcher and its mock fallback."""

import asyncio
import json
import random
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import httpx

from airwise.ingest.current_fetcher import CurrentConditionsFetcher
from airwise.ingest.errors import ProviderError
from airwise.ingest.waqi_client import WaqiClient

FIXTURE_DIR = Path(__file__).parent.parent / "fixtures"


def _load(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)["data"]


def _client(feed=None, error: Exception | None = None, configured: bool = True) -> MagicMock:
    mock = MagicMock(spec=WaqiClient)
    mock.is_configured.return_value = configured
    mock.get_feed = AsyncMock(return_value=feed, side_effect=error)
    return mock


class TestCurrentConditionsFetcher:
    def test_fetch_success(self, rng: random.Random):
        fetcher = CurrentConditionsFetcher(_client(_load("waqi_feed_delhi.json")), rng)
        reading = asyncio.run(fetcher.fetch(28.6, 77.2))

        assert reading is not None
        assert reading.aqi == 153
        by_name = {p.name: p for p in reading.pollutants}
        assert set(by_name) == {"PM2.5", "PM10", "O₃", "NO₂"}
        assert by_name["O₃"].value == 12.4
        assert by_name["PM2.5"].unit == "µg/m³"

    def test_weather_keys_dropped(self, rng: random.Random):
        fetcher = CurrentConditionsFetcher(_client(_load("waqi_feed_delhi.json")), rng)
        reading = asyncio.run(fetcher.fetch(28.6, 77.2))
        assert len(reading.pollutants) == 4

    def test_no_reading_returns_none(self, rng: random.Random):
        fetcher = CurrentConditionsFetcher(_client(_load("waqi_feed_no_reading.json")), rng)
        assert asyncio.run(fetcher.fetch(0.0, 0.0)) is None

    def test_unconfigured_uses_mock(self, rng: random.Random):
        client = _client(configured=False)
        fetcher = CurrentConditionsFetcher(client, rng)
        reading = asyncio.run(fetcher.fetch(1.0, 2.0))

        assert 1 <= reading.aqi <= 250
        assert [p.name for p in reading.pollutants] == ["PM2.5", "O₃"]
        assert reading.pollutants[0].value == round(reading.aqi / 2, 2)
        assert reading.pollutants[1].value == round(reading.aqi / 4, 2)
        client.get_feed.assert_not_called()

    def test_provider_error_uses_mock(self, rng: random.Random):
        fetcher = CurrentConditionsFetcher(_client(error=ProviderError("down", 503)), rng)
        reading = asyncio.run(fetcher.fetch(1.0, 2.0))
        assert reading is not None
        assert 1 <= reading.aqi <= 250

    def test_network_error_uses_mock(self, rng: random.Random):
        fetcher = CurrentConditionsFetcher(_client(error=httpx.ConnectError("refused")), rng)
        reading = asyncio.run(fetcher.fetch(1.0, 2.0))
        assert reading is not None

    def test_malformed_payload_uses_mock(self, rng: random.Random):
        fetcher = CurrentConditionsFetcher(_client({"aqi": "not-a-number"}), rng)
        reading = asyncio.run(fetcher.fetch(1.0, 2.0))
        assert 1 <= reading.aqi <= 250

    def test_mock_is_reproducible_with_seed(self):
        a = CurrentConditionsFetcher(_client(configured=False), random.Random(5))
        b = CurrentConditionsFetcher(_client(configured=False), random.Random(5))
        assert asyncio.run(a.fetch(0, 0)) == asyncio.run(b.fetch(0, 0))
