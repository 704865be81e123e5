"""World Air Quality Index (aqicn.org) API client for current conditions."""

import httpx

from airwise.ingest.errors import ProviderError

WAQI_BASE_URL = "https://api.waqi.info"


class WaqiClient:
    def __init__(
        self,
        api_key: str | None,
        base_url: str = WAQI_BASE_URL,
        timeout: float = 30.0,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout

    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def get_feed(self, lat: float, lon: float) -> dict:
        """Fetch the geo feed nearest to a coordinate.

        Returns the provider's ``data`` object. Raises ProviderError when the
        response is not 2xx or the payload status is not ``ok``.
        """
        url = f"{self.base_url}/feed/geo:{lat};{lon}/"
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.get(url, params={"token": self.api_key})
        if resp.status_code >= 400:
            raise ProviderError(
                f"WAQI HTTP {resp.status_code}: {resp.reason_phrase}",
                resp.status_code,
            )
        payload = resp.json()
        if payload.get("status") != "ok":
            raise ProviderError(f"WAQI API error: {payload.get('data')}")
        return payload.get("data") or {}
