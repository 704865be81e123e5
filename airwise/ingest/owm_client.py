"""OpenWeatherMap air pollution forecast client."""

import httpx

from airwise.ingest.errors import ProviderError

OWM_BASE_URL = "https://api.openweathermap.org"


class OpenWeatherClient:
    def __init__(
        self,
        api_key: str | None,
        base_url: str = OWM_BASE_URL,
        timeout: float = 30.0,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout

    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def get_air_pollution_forecast(self, lat: float, lon: float) -> list[dict]:
        """Fetch hourly air pollution samples for the coming days."""
        url = f"{self.base_url}/data/2.5/air_pollution/forecast"
        params = {"lat": lat, "lon": lon, "appid": self.api_key}
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.get(url, params=params)
        if resp.status_code >= 400:
            raise ProviderError(
                f"OpenWeatherMap HTTP {resp.status_code}: {resp.reason_phrase}",
                resp.status_code,
            )
        data = resp.json()
        return data.get("list", []) if isinstance(data, dict) else []
