"""Health checker: per-source credentials and upstream reachability."""

import asyncio

import httpx

from airwise.config.schema import AppConfig
from airwise.models.reporting import HealthStatus, SourceStatus

PROBE_TIMEOUT = 10.0


class HealthChecker:
    def __init__(self, config: AppConfig):
        self.config = config

    def _sources(self) -> list[tuple[str, bool, str]]:
        c = self.config
        e = c.endpoints
        reddit = all(
            c.credential(k)
            for k in ("reddit_client_id", "reddit_client_secret", "reddit_username", "reddit_password")
        )
        return [
            ("waqi", c.credential("aqicn_api_key") is not None, e.waqi_base_url),
            ("openweathermap", c.credential("openweathermap_api_key") is not None, e.openweathermap_base_url),
            ("youtube", c.credential("youtube_api_key") is not None, e.youtube_base_url),
            ("google_news", not c.demo_mode, e.google_news_base_url),
            ("reddit", reddit, e.reddit_api_base_url),
            ("gemini", c.credential("gemini_api_key") is not None, ""),
        ]

    async def check(self, probe: bool = True) -> HealthStatus:
        """Report which sources are usable; optionally probe their endpoints."""
        sources = self._sources()
        if probe:
            reachable = await asyncio.gather(
                *(self._probe(url) if configured and url else _skipped() for _, configured, url in sources)
            )
        else:
            reachable = [None] * len(sources)

        return HealthStatus(
            demo_mode=self.config.demo_mode,
            sources=[
                SourceStatus(name=name, configured=configured, reachable=ok)
                for (name, configured, _), ok in zip(sources, reachable)
            ],
        )

    async def _probe(self, url: str) -> bool:
        try:
            async with httpx.AsyncClient(timeout=PROBE_TIMEOUT) as client:
                resp = await client.get(url)
            return resp.status_code < 500
        except httpx.HTTPError:
            return False


async def _skipped() -> None:
    return None
