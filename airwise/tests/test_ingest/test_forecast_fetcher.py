"""Tests for daily forecast aggregation and the mock fallback."""

import asyncio
import json
import random
from datetime import date
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
import respx

from airwise.ingest.errors import ProviderError
from airwise.ingest.forecast_fetcher import (
    ForecastFetcher,
    aggregate_daily,
    owm_level_to_aqi,
)
from airwise.ingest.owm_client import OpenWeatherClient

FIXTURE_DIR = Path(__file__).parent.parent / "fixtures"
TODAY = date(2026, 2, 10)


def _samples() -> list[dict]:
    with open(FIXTURE_DIR / "owm_forecast.json") as f:
        return json.load(f)["list"]


def _client(samples=None, error: Exception | None = None, configured: bool = True) -> MagicMock:
    mock = MagicMock(spec=OpenWeatherClient)
    mock.is_configured.return_value = configured
    mock.get_air_pollution_forecast = AsyncMock(return_value=samples, side_effect=error)
    return mock


class TestOwmLevelToAqi:
    def test_known_levels(self):
        assert [owm_level_to_aqi(i) for i in range(1, 6)] == [25, 75, 125, 175, 250]

    def test_unknown_level(self):
        assert owm_level_to_aqi(9) == 0


class TestAggregateDaily:
    def test_groups_and_sorts_by_date(self):
        days = aggregate_daily(_samples())
        assert [d.date for d in days] == ["Wed, Feb 11", "Thu, Feb 12", "Fri, Feb 13"]

    def test_averages_aqi(self):
        days = aggregate_daily(_samples())
        # (75 + 125) / 2, (25 + 75 + 75) / 3, 250
        assert [d.aqi for d in days] == [100, 58, 250]

    def test_averages_pollutants(self):
        first, second, third = aggregate_daily(_samples())
        by_name = {p.name: p.value for p in first.pollutants}
        assert by_name == {"PM2.5": 15.0, "PM10": 25.0, "CO": 250.0}
        assert {p.name: p.value for p in second.pollutants} == {"PM2.5": 6.0}
        assert third.pollutants[0].value == 80.12

    def test_unmapped_components_dropped(self):
        names = {p.name for d in aggregate_daily(_samples()) for p in d.pollutants}
        assert "nh3" not in names
        assert "NH₃" not in names

    def test_empty(self):
        assert aggregate_daily([]) == []


class TestForecastFetcher:
    def test_fetch_success(self, rng: random.Random):
        fetcher = ForecastFetcher(_client(_samples()), rng)
        days = asyncio.run(fetcher.fetch(28.6, 77.2, today=TODAY))
        assert len(days) == 3
        assert days[0].aqi == 100

    def test_truncates_to_days(self, rng: random.Random):
        fetcher = ForecastFetcher(_client(_samples()), rng, days=2)
        days = asyncio.run(fetcher.fetch(28.6, 77.2, today=TODAY))
        assert [d.date for d in days] == ["Wed, Feb 11", "Thu, Feb 12"]

    def test_unconfigured_uses_mock(self, rng: random.Random):
        client = _client(configured=False)
        fetcher = ForecastFetcher(client, rng)
        days = asyncio.run(fetcher.fetch(1.0, 2.0, today=TODAY))

        assert [d.date for d in days] == [
            "Wed, Feb 11", "Thu, Feb 12", "Fri, Feb 13", "Sat, Feb 14", "Sun, Feb 15",
        ]
        for d in days:
            assert d.aqi >= 0
            assert len(d.pollutants) == 1
            assert d.pollutants[0].name == "PM2.5"
        client.get_air_pollution_forecast.assert_not_called()

    def test_mock_jitter_stays_near_baseline(self, rng: random.Random):
        fetcher = ForecastFetcher(_client(configured=False), rng)
        days = asyncio.run(fetcher.fetch(1.0, 2.0, today=TODAY))
        aqis = [d.aqi for d in days]
        assert max(aqis) - min(aqis) <= 40
        assert all(30 <= a <= 219 for a in aqis)

    def test_error_uses_mock(self, rng: random.Random):
        fetcher = ForecastFetcher(_client(error=ProviderError("down", 500)), rng)
        days = asyncio.run(fetcher.fetch(1.0, 2.0, today=TODAY))
        assert len(days) == 5

    def test_malformed_sample_uses_mock(self, rng: random.Random):
        fetcher = ForecastFetcher(_client([{"dt": 1770768000}]), rng)
        days = asyncio.run(fetcher.fetch(1.0, 2.0, today=TODAY))
        assert len(days) == 5


class TestOpenWeatherClient:
    @respx.mock
    def test_request(self):
        route = respx.get("https://test-owm.example.com/data/2.5/air_pollution/forecast").mock(
            return_value=httpx.Response(200, json={"list": _samples()})
        )
        client = OpenWeatherClient("owm-key", base_url="https://test-owm.example.com")
        samples = asyncio.run(client.get_air_pollution_forecast(28.6, 77.2))

        assert len(samples) == 6
        params = route.calls[0].request.url.params
        assert params["appid"] == "owm-key"
        assert params["lat"] == "28.6"

    @respx.mock
    def test_http_error(self):
        respx.get("https://test-owm.example.com/data/2.5/air_pollution/forecast").mock(
            return_value=httpx.Response(401)
        )
        client = OpenWeatherClient("bad", base_url="https://test-owm.example.com")
        with pytest.raises(ProviderError) as exc:
            asyncio.run(client.get_air_pollution_forecast(1.0, 2.0))
        assert exc.value.status_code == 401
