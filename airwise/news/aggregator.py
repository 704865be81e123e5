"""News aggregator: YouTube, Google News and Reddit, fetched concurrently."""

import asyncio
import logging

from airwise.config.schema import AppConfig
from airwise.llm.client import GeminiClient
from airwise.models.news import NewsItem
from airwise.news.google_news import GoogleNewsScraper
from airwise.news.reddit_client import RedditClient
from airwise.news.youtube_client import YouTubeClient

logger = logging.getLogger(__name__)


class NewsAggregator:
    def __init__(
        self,
        youtube: YouTubeClient,
        google_news: GoogleNewsScraper,
        reddit: RedditClient,
    ):
        self.youtube = youtube
        self.google_news = google_news
        self.reddit = reddit

    @classmethod
    def from_config(cls, config: AppConfig, llm: GeminiClient | None = None) -> "NewsAggregator":
        timeout = config.ops.request_timeout_seconds
        endpoints = config.endpoints
        max_results = config.news.max_results
        return cls(
            YouTubeClient(
                config.credential("youtube_api_key"),
                base_url=endpoints.youtube_base_url,
                timeout=timeout,
                max_results=max_results,
            ),
            GoogleNewsScraper(
                llm=llm,
                base_url=endpoints.google_news_base_url,
                timeout=timeout,
                max_results=max_results,
                title_max_chars=config.news.title_max_chars,
                enabled=not config.demo_mode,
            ),
            RedditClient(
                config.credential("reddit_client_id"),
                config.credential("reddit_client_secret"),
                config.credential("reddit_username"),
                config.credential("reddit_password"),
                user_agent=config.credentials.reddit_user_agent,
                auth_url=endpoints.reddit_auth_url,
                api_base_url=endpoints.reddit_api_base_url,
                timeout=timeout,
                max_results=max_results,
            ),
        )

    async def fetch(self, city: str) -> list[NewsItem]:
        """Concatenate YouTube, Google News and Reddit results in that order."""
        youtube, google, reddit = await asyncio.gather(
            self.youtube.fetch(city),
            self.google_news.fetch(city),
            self.reddit.fetch(city),
        )
        logger.info(
            "News for %s: %d YouTube, %d Google News, %d Reddit",
            city, len(youtube), len(google), len(reddit),
        )
        return [*youtube, *google, *reddit]
