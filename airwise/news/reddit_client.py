"""Reddit search client using the OAuth password grant."""

import logging

import httpx

from airwise.models.news import NewsItem, NewsSource

logger = logging.getLogger(__name__)

REDDIT_AUTH_URL = "https://www.reddit.com/api/v1/access_token"
REDDIT_API_BASE = "https://oauth.reddit.com"
REDDIT_WEB_BASE = "https://www.reddit.com"


class RedditClient:
    def __init__(
        self,
        client_id: str | None,
        client_secret: str | None,
        username: str | None,
        password: str | None,
        user_agent: str = "airwise/0.1.0",
        auth_url: str = REDDIT_AUTH_URL,
        api_base_url: str = REDDIT_API_BASE,
        timeout: float = 30.0,
        max_results: int = 5,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.username = username
        self.password = password
        self.user_agent = user_agent
        self.auth_url = auth_url
        self.api_base_url = api_base_url
        self.timeout = timeout
        self.max_results = max_results

    def is_configured(self) -> bool:
        return all((self.client_id, self.client_secret, self.username, self.password))

    async def get_access_token(self, client: httpx.AsyncClient) -> str | None:
        resp = await client.post(
            self.auth_url,
            auth=(self.client_id, self.client_secret),
            data={
                "grant_type": "password",
                "username": self.username,
                "password": self.password,
            },
            headers={"User-Agent": self.user_agent},
        )
        resp.raise_for_status()
        return resp.json().get("access_token")

    async def fetch(self, city: str) -> list[NewsItem]:
        """Search r/news for a city's air quality. Never raises."""
        if not self.is_configured():
            logger.warning("Reddit credentials not set, skipping Reddit news")
            return []

        params = {
            "q": f"air quality {city}",
            "restrict_sr": "on",
            "sort": "new",
            "limit": self.max_results,
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                token = await self.get_access_token(client)
                if not token:
                    logger.warning("Reddit token exchange returned no token, skipping")
                    return []
                resp = await client.get(
                    f"{self.api_base_url}/r/news/search",
                    params=params,
                    headers={
                        "Authorization": f"Bearer {token}",
                        "User-Agent": self.user_agent,
                    },
                )
            resp.raise_for_status()
            children = resp.json()["data"]["children"]
            return [_to_item(post["data"]) for post in children]
        except (httpx.HTTPError, KeyError, TypeError, ValueError) as e:
            logger.warning("Reddit search failed for %s: %s", city, e)
            return []


def _to_item(post: dict) -> NewsItem:
    title = post["title"]
    return NewsItem(
        title=title,
        snippet=post.get("selftext") or title,
        link=f"{REDDIT_WEB_BASE}{post['permalink']}",
        source=NewsSource.REDDIT,
    )
