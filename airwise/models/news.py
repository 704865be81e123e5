"""News feed models."""

from dataclasses import dataclass
from enum import StrEnum


class NewsSource(StrEnum):
    YOUTUBE = "YouTube"
    GOOGLE_NEWS = "Google News"
    REDDIT = "Reddit"


@dataclass(frozen=True)
class NewsItem:
    title: str
    snippet: str
    link: str
    source: NewsSource


@dataclass(frozen=True)
class NewsDigest:
    news_items: list[NewsItem]
    summary: str
