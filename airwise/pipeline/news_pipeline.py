"""News pipeline: aggregated items plus an LLM summary."""

import logging

from airwise.config.defaults import FALLBACK_NEWS_SUMMARY, NO_NEWS_SUMMARY
from airwise.llm.client import GeminiClient, LlmError
from airwise.llm.flows import summarize_news
from airwise.models.news import NewsDigest
from airwise.news.aggregator import NewsAggregator

logger = logging.getLogger(__name__)


class NewsPipeline:
    def __init__(self, llm: GeminiClient, aggregator: NewsAggregator):
        self.llm = llm
        self.aggregator = aggregator

    async def run(self, city: str) -> NewsDigest:
        items = await self.aggregator.fetch(city)
        if not items:
            return NewsDigest(news_items=[], summary=NO_NEWS_SUMMARY)

        try:
            result = await summarize_news(self.llm, items, city)
            summary = result.summary
        except LlmError as e:
            logger.error("News summarization failed: %s", e)
            summary = FALLBACK_NEWS_SUMMARY
        return NewsDigest(news_items=items, summary=summary)
