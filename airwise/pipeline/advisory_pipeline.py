"""Advisory pipeline: geocode, snapshot, advisory + simulated forecast."""

import asyncio
import logging
import random

from airwise.config.defaults import FALLBACK_ADVISORY, NO_CURRENT_DATA_ERROR
from airwise.config.schema import AppConfig
from airwise.ingest.snapshot import SnapshotAggregator
from airwise.llm.client import GeminiClient
from airwise.llm.flows import AdvisoryPromptInput, generate_health_advisory, geocode_city
from airwise.models.air_quality import (
    AdvisoryResult,
    CurrentConditions,
    DailyForecast,
    Location,
    Pollutant,
    UserInfo,
)
from airwise.models.requests import HealthAdvisoryRequest
from airwise.prediction.simulator import simulate_forecast

logger = logging.getLogger(__name__)


class NoCurrentDataError(Exception):
    """Raised when the provider has no current reading for the location."""

    def __init__(self, message: str = NO_CURRENT_DATA_ERROR):
        super().__init__(message)


def format_pollutants(pollutants: list[Pollutant]) -> str:
    return ", ".join(f"{p.name}: {p.value} {p.unit}" for p in pollutants)


class AdvisoryPipeline:
    def __init__(
        self,
        config: AppConfig,
        llm: GeminiClient,
        snapshots: SnapshotAggregator,
        rng: random.Random,
    ):
        self.config = config
        self.llm = llm
        self.snapshots = snapshots
        self.rng = rng

    async def run(self, request: HealthAdvisoryRequest) -> AdvisoryResult:
        """Produce an advisory for a validated request.

        Raises NoCurrentDataError when no current reading exists. Geocoding,
        advisory and forecast failures degrade to fixed defaults.
        """
        lat, lon = await self._geocode(request.location)

        snapshot = await self.snapshots.fetch(lat, lon)
        if snapshot.current is None:
            raise NoCurrentDataError()

        advisory, model_forecast = await asyncio.gather(
            self._advisory(request, snapshot.current),
            self._model_forecast(snapshot.current, snapshot.forecast),
        )

        return AdvisoryResult(
            current=snapshot.current,
            forecast=snapshot.forecast,
            model_forecast=model_forecast,
            advisory=advisory,
            location=Location(city=request.location, lat=lat, lon=lon),
            user=UserInfo(name=request.name),
        )

    async def _geocode(self, city: str) -> tuple[float, float]:
        try:
            coords = await geocode_city(self.llm, city)
            return coords.latitude, coords.longitude
        except Exception:
            fallback = self.config.fallback
            logger.exception(
                "Failed to geocode %r, defaulting to %s", city, fallback.city_label
            )
            return fallback.latitude, fallback.longitude

    async def _advisory(
        self, request: HealthAdvisoryRequest, current: CurrentConditions
    ) -> str:
        prompt_input = AdvisoryPromptInput(
            name=request.name,
            age=request.age,
            location=request.location,
            health_conditions=request.health_conditions or "None",
            language_preference=request.language_preference.value,
            aqi=current.aqi,
            aqi_category=current.aqi_category,
            pollutants=format_pollutants(current.pollutants),
            health_report=request.health_report,
        )
        try:
            result = await generate_health_advisory(self.llm, prompt_input)
            return result.health_advisory
        except Exception:
            logger.exception("Failed to generate health advisory")
            return FALLBACK_ADVISORY

    async def _model_forecast(
        self, current: CurrentConditions, history: list[DailyForecast]
    ) -> list[DailyForecast]:
        try:
            return simulate_forecast(
                current.aqi,
                current.weather,
                self.config.forecast.days,
                history,
                self.rng,
            )
        except Exception:
            logger.exception("Failed to simulate AQI forecast")
            return []
