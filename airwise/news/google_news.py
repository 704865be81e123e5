"""Google News search page scraper."""

import logging

import httpx
from bs4 import BeautifulSoup

from airwise.llm.client import GeminiClient, LlmError
from airwise.llm.flows import generate_news_title
from airwise.models.news import NewsItem, NewsSource

logger = logging.getLogger(__name__)

GOOGLE_NEWS_BASE_URL = "https://news.google.com"
BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)


class GoogleNewsScraper:
    def __init__(
        self,
        llm: GeminiClient | None = None,
        base_url: str = GOOGLE_NEWS_BASE_URL,
        timeout: float = 30.0,
        max_results: int = 5,
        title_max_chars: int = 50,
        enabled: bool = True,
    ):
        self.llm = llm
        self.base_url = base_url
        self.timeout = timeout
        self.max_results = max_results
        self.title_max_chars = title_max_chars
        self.enabled = enabled

    def is_configured(self) -> bool:
        return self.enabled

    async def fetch(self, city: str) -> list[NewsItem]:
        """Scrape the news search page for a city. Never raises."""
        if not self.is_configured():
            logger.warning("Google News scraping disabled, skipping")
            return []

        params = {"q": f"air quality {city}", "hl": "en-US", "gl": "US", "ceid": "US:en"}
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(
                    f"{self.base_url}/search",
                    params=params,
                    headers={"User-Agent": BROWSER_USER_AGENT},
                )
            resp.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Google News fetch failed for %s: %s", city, e)
            return []

        items = []
        for title, snippet, href in parse_articles(resp.text, self.max_results):
            if not title:
                title = await self._title_from_snippet(snippet)
            items.append(
                NewsItem(
                    title=title,
                    snippet=snippet or title,
                    link=self._absolute_link(href),
                    source=NewsSource.GOOGLE_NEWS,
                )
            )
        return items

    async def _title_from_snippet(self, snippet: str) -> str:
        if self.llm is not None and self.llm.is_configured():
            try:
                result = await generate_news_title(self.llm, snippet)
                title = result.title.strip()
                if title:
                    return title
                logger.warning("News title generation returned a blank title, truncating snippet")
            except LlmError as e:
                logger.warning("News title generation failed, truncating snippet: %s", e)
        return snippet[: self.title_max_chars]

    def _absolute_link(self, href: str) -> str:
        if href.startswith("http"):
            return href
        if href.startswith("."):
            href = href[1:]
        return f"{self.base_url}{href}"


def parse_articles(html: str, limit: int) -> list[tuple[str, str, str]]:
    """Extract (title, snippet, href) from the first ``limit`` articles.

    Articles without a link, or with neither a title nor a snippet, are
    skipped.
    """
    soup = BeautifulSoup(html, "html.parser")
    results = []
    for article in soup.find_all("article")[:limit]:
        heading = article.find("h3")
        span = article.find("span")
        anchor = article.find("a", href=True)
        title = heading.get_text(strip=True) if heading else ""
        snippet = span.get_text(strip=True) if span else ""
        if anchor is None or not (title or snippet):
            continue
        results.append((title, snippet, anchor["href"]))
    return results
