"""Snapshot aggregator: current conditions + forecast for one location."""

import asyncio
import logging
import random
from datetime import date

from airwise.config.schema import AppConfig
from airwise.ingest.current_fetcher import CurrentConditionsFetcher
from airwise.ingest.forecast_fetcher import ForecastFetcher
from airwise.ingest.mock_data import mock_weather
from airwise.ingest.owm_client import OpenWeatherClient
from airwise.ingest.waqi_client import WaqiClient
from airwise.models.air_quality import AirQualitySnapshot, CurrentConditions
from airwise.models.common import format_day, utc_today

logger = logging.getLogger(__name__)


class SnapshotAggregator:
    def __init__(
        self,
        current: CurrentConditionsFetcher,
        forecast: ForecastFetcher,
        rng: random.Random,
        days: int = 5,
    ):
        self.current = current
        self.forecast = forecast
        self.rng = rng
        self.days = days

    @classmethod
    def from_config(cls, config: AppConfig, rng: random.Random) -> "SnapshotAggregator":
        timeout = config.ops.request_timeout_seconds
        waqi = WaqiClient(
            config.credential("aqicn_api_key"),
            base_url=config.endpoints.waqi_base_url,
            timeout=timeout,
        )
        owm = OpenWeatherClient(
            config.credential("openweathermap_api_key"),
            base_url=config.endpoints.openweathermap_base_url,
            timeout=timeout,
        )
        return cls(
            CurrentConditionsFetcher(waqi, rng),
            ForecastFetcher(owm, rng, days=config.forecast.days),
            rng,
            days=config.forecast.days,
        )

    async def fetch(
        self, lat: float, lon: float, today: date | None = None
    ) -> AirQualitySnapshot:
        """Fetch both sources concurrently and combine them.

        Today's entry is dropped from the forecast so only future days remain.
        Weather is synthesized since the weather endpoint is a separate
        subscription.
        """
        if today is None:
            today = utc_today()

        reading, forecast = await asyncio.gather(
            self.current.fetch(lat, lon),
            self.forecast.fetch(lat, lon, today=today),
        )

        today_label = format_day(today)
        upcoming = [d for d in forecast if d.date != today_label][: self.days]

        if reading is None:
            return AirQualitySnapshot(current=None, forecast=upcoming)

        weather = mock_weather(self.rng)
        logger.info(
            "Snapshot (%.4f, %.4f): AQI %d, %d forecast days",
            lat, lon, reading.aqi, len(upcoming),
        )
        return AirQualitySnapshot(
            current=CurrentConditions.from_reading(reading, weather),
            forecast=upcoming,
        )
