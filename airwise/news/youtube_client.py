"""YouTube Data API search client for air quality videos."""

import logging

import httpx

from airwise.models.news import NewsItem, NewsSource

logger = logging.getLogger(__name__)

YOUTUBE_BASE_URL = "https://www.googleapis.com/youtube/v3"
WATCH_URL = "https://www.youtube.com/watch?v="


class YouTubeClient:
    def __init__(
        self,
        api_key: str | None,
        base_url: str = YOUTUBE_BASE_URL,
        timeout: float = 30.0,
        max_results: int = 5,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.max_results = max_results

    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def fetch(self, city: str) -> list[NewsItem]:
        """Search videos about a city's air quality. Never raises."""
        if not self.is_configured():
            logger.warning("YouTube API key not set, skipping YouTube news")
            return []

        params = {
            "part": "snippet",
            "q": f"air quality news {city}",
            "type": "video",
            "maxResults": self.max_results,
            "key": self.api_key,
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(f"{self.base_url}/search", params=params)
            resp.raise_for_status()
            return [_to_item(item) for item in resp.json().get("items", [])]
        except (httpx.HTTPError, KeyError, TypeError, ValueError) as e:
            logger.warning("YouTube search failed for %s: %s", city, e)
            return []


def _to_item(item: dict) -> NewsItem:
    snippet = item["snippet"]
    return NewsItem(
        title=snippet.get("title", ""),
        snippet=snippet.get("description", ""),
        link=f"{WATCH_URL}{item['id']['videoId']}",
        source=NewsSource.YOUTUBE,
    )
