"""Current-conditions fetcher: WAQI reading with degrade-to-mock fallback."""

import logging
import random

import httpx

from airwise.ingest.errors import ProviderError
from airwise.ingest.mock_data import mock_current_reading
from airwise.ingest.pollutants import map_pollutants
from airwise.ingest.waqi_client import WaqiClient
from airwise.models.air_quality import CurrentReading

logger = logging.getLogger(__name__)


class CurrentConditionsFetcher:
    def __init__(self, client: WaqiClient, rng: random.Random):
        self.client = client
        self.rng = rng

    def is_configured(self) -> bool:
        return self.client.is_configured()

    async def fetch(self, lat: float, lon: float) -> CurrentReading | None:
        """Fetch the current AQI reading for a coordinate.

        Never raises. Returns None only when the provider answered but has no
        reading for the location; any other failure yields mock data.
        """
        if not self.is_configured():
            logger.warning("WAQI API key not set, using mock current conditions")
            return mock_current_reading(self.rng)

        try:
            data = await self.client.get_feed(lat, lon)
            return _parse_feed(data)
        except (ProviderError, httpx.HTTPError, KeyError, TypeError, ValueError) as e:
            logger.warning(
                "Current conditions unavailable for (%.4f, %.4f), using mock data: %s",
                lat, lon, e,
            )
            return mock_current_reading(self.rng)


def _parse_feed(data: dict) -> CurrentReading | None:
    aqi = data.get("aqi")
    # WAQI reports "-" for stations without a current reading
    if aqi is None or aqi == "-":
        logger.warning("WAQI returned no current reading")
        return None

    iaqi = data.get("iaqi") or {}
    values = {key: float(entry["v"]) for key, entry in iaqi.items() if "v" in entry}
    return CurrentReading(aqi=int(aqi), pollutants=map_pollutants(values))
