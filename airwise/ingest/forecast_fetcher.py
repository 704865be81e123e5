"""Forecast fetcher: aggregates hourly OpenWeatherMap samples into daily AQI."""

import logging
import random
from collections import defaultdict
from datetime import UTC, date, datetime

import httpx

from airwise.ingest.errors import ProviderError
from airwise.ingest.mock_data import mock_forecast
from airwise.ingest.owm_client import OpenWeatherClient
from airwise.ingest.pollutants import POLLUTANT_TABLE, UNIT_BY_NAME
from airwise.models.air_quality import DailyForecast, Pollutant
from airwise.models.common import format_day, round_half_up, utc_today

logger = logging.getLogger(__name__)

# OpenWeatherMap qualitative level (1-5) -> representative AQI
OWM_LEVEL_TO_AQI: dict[int, int] = {
    1: 25,   # Good
    2: 75,   # Fair
    3: 125,  # Moderate
    4: 175,  # Poor
    5: 250,  # Very Poor
}


def owm_level_to_aqi(level: int) -> int:
    return OWM_LEVEL_TO_AQI.get(level, 0)


class ForecastFetcher:
    def __init__(self, client: OpenWeatherClient, rng: random.Random, days: int = 5):
        self.client = client
        self.rng = rng
        self.days = days

    def is_configured(self) -> bool:
        return self.client.is_configured()

    async def fetch(
        self, lat: float, lon: float, today: date | None = None
    ) -> list[DailyForecast]:
        """Fetch up to ``days`` daily forecasts, oldest first. Never raises."""
        if today is None:
            today = utc_today()

        if not self.is_configured():
            logger.warning("OpenWeatherMap API key not set, using mock forecast")
            return mock_forecast(self.rng, self.days, today)

        try:
            samples = await self.client.get_air_pollution_forecast(lat, lon)
            return aggregate_daily(samples)[: self.days]
        except (ProviderError, httpx.HTTPError, KeyError, TypeError, ValueError) as e:
            logger.warning(
                "Forecast unavailable for (%.4f, %.4f), using mock data: %s",
                lat, lon, e,
            )
            return mock_forecast(self.rng, self.days, today)


def aggregate_daily(samples: list[dict]) -> list[DailyForecast]:
    """Group samples by UTC calendar date and average AQI and pollutants."""
    aqis: dict[date, list[int]] = defaultdict(list)
    pollutants: dict[date, dict[str, list[float]]] = defaultdict(lambda: defaultdict(list))

    for item in samples:
        day = datetime.fromtimestamp(item["dt"], UTC).date()
        aqis[day].append(owm_level_to_aqi(item["main"]["aqi"]))
        for key, value in (item.get("components") or {}).items():
            entry = POLLUTANT_TABLE.get(key)
            if entry is not None:
                pollutants[day][entry[0]].append(float(value))

    forecast = []
    for day in sorted(aqis):
        levels = aqis[day]
        averaged = [
            Pollutant(
                name=name,
                value=round(sum(values) / len(values), 2),
                unit=UNIT_BY_NAME[name],
            )
            for name, values in pollutants[day].items()
        ]
        forecast.append(
            DailyForecast(
                date=format_day(day),
                aqi=round_half_up(sum(levels) / len(levels)),
                pollutants=averaged,
            )
        )
    return forecast
