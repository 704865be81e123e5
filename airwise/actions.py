"""Public actions: validated input in, ``ActionResult`` out, never raising."""

import logging
import random
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from airwise.config.defaults import (
    FALLBACK_CHAT_RESPONSE,
    FALLBACK_TIPS,
    HEALTH_REPORT_ERROR,
    NETWORK_FAILURE_ERROR,
    NEWS_UNAVAILABLE_SUMMARY,
    REVERSE_GEOCODE_ERROR,
    UNEXPECTED_ERROR,
)
from airwise.config.loader import make_rng
from airwise.config.schema import AppConfig
from airwise.ingest.snapshot import SnapshotAggregator
from airwise.llm import flows
from airwise.llm.client import GeminiClient, LlmError
from airwise.models.air_quality import AdvisoryResult
from airwise.models.common import ActionResult
from airwise.models.news import NewsDigest
from airwise.models.requests import (
    ChatRequest,
    HealthAdvisoryRequest,
    HealthReportRequest,
    NewsRequest,
    ReverseGeocodeRequest,
    TipsRequest,
    format_validation_error,
)
from airwise.news.aggregator import NewsAggregator
from airwise.pipeline.advisory_pipeline import AdvisoryPipeline, NoCurrentDataError
from airwise.pipeline.news_pipeline import NewsPipeline

logger = logging.getLogger(__name__)


def _validate(model: type[BaseModel], data: Mapping[str, Any]) -> tuple[Any, str | None]:
    try:
        return model.model_validate(dict(data)), None
    except ValidationError as e:
        return None, format_validation_error(e)


def _is_network_failure(exc: BaseException) -> bool:
    return isinstance(exc, httpx.TransportError) or "fetch failed" in str(exc)


class Actions:
    """Entry points consumed by the HTTP API and the CLI."""

    def __init__(
        self,
        config: AppConfig,
        llm: GeminiClient | None = None,
        snapshots: SnapshotAggregator | None = None,
        news: NewsAggregator | None = None,
        rng: random.Random | None = None,
    ):
        self.config = config
        self.rng = rng or make_rng(config)
        self.llm = llm or GeminiClient(
            config.credential("gemini_api_key"),
            model=config.llm.model,
            temperature=config.llm.temperature,
        )
        self.snapshots = snapshots or SnapshotAggregator.from_config(config, self.rng)
        self.news = news or NewsAggregator.from_config(config, self.llm)
        self.advisory_pipeline = AdvisoryPipeline(config, self.llm, self.snapshots, self.rng)
        self.news_pipeline = NewsPipeline(self.llm, self.news)

    async def get_health_advisory(self, data: Mapping[str, Any]) -> ActionResult[AdvisoryResult]:
        request, error = _validate(HealthAdvisoryRequest, data)
        if error:
            return ActionResult(None, error)

        try:
            result = await self.advisory_pipeline.run(request)
            return ActionResult(result)
        except NoCurrentDataError as e:
            return ActionResult(None, str(e))
        except Exception as e:
            logger.exception("Health advisory failed for %s", request.location)
            if _is_network_failure(e):
                return ActionResult(None, NETWORK_FAILURE_ERROR)
            return ActionResult(None, str(e) or UNEXPECTED_ERROR)

    async def chat(self, data: Mapping[str, Any]) -> ActionResult[dict]:
        request, error = _validate(ChatRequest, data)
        if error:
            return ActionResult(None, error)

        history = [(turn.role, turn.text) for turn in request.history]
        try:
            reply = await flows.chat(self.llm, request.message, history)
            return ActionResult({"response": reply.response})
        except LlmError as e:
            logger.error("Chat assistant error: %s", e)
            return ActionResult({"response": FALLBACK_CHAT_RESPONSE})

    async def get_pollution_reduction_tips(self, data: Mapping[str, Any]) -> ActionResult[dict]:
        request, error = _validate(TipsRequest, data)
        if error:
            return ActionResult(None, error)

        try:
            result = await flows.generate_pollution_reduction_tips(
                self.llm, request.location, request.aqi, request.pollutants
            )
            return ActionResult({"tips": result.tips})
        except LlmError as e:
            logger.error("Pollution tips error: %s", e)
            return ActionResult({"tips": FALLBACK_TIPS})

    async def get_news(self, data: Mapping[str, Any]) -> ActionResult[NewsDigest]:
        request, error = _validate(NewsRequest, data)
        if error:
            return ActionResult(None, error)

        try:
            return ActionResult(await self.news_pipeline.run(request.city))
        except Exception:
            logger.exception("News action failed for %s", request.city)
            return ActionResult(NewsDigest(news_items=[], summary=NEWS_UNAVAILABLE_SUMMARY))

    async def reverse_geocode(self, data: Mapping[str, Any]) -> ActionResult[dict]:
        request, error = _validate(ReverseGeocodeRequest, data)
        if error:
            return ActionResult(None, error)

        try:
            result = await flows.reverse_geocode(self.llm, request.latitude, request.longitude)
            return ActionResult({"city": result.city})
        except LlmError as e:
            # The form still works when the city is typed manually
            logger.error("Reverse geocoding failed: %s", e)
            return ActionResult(None, REVERSE_GEOCODE_ERROR)

    async def extract_health_report(self, data: Mapping[str, Any]) -> ActionResult[dict]:
        request, error = _validate(HealthReportRequest, data)
        if error:
            return ActionResult(None, error)

        try:
            result = await flows.extract_text_from_health_report(
                self.llm, request.report_data_uri
            )
            return ActionResult({"extracted_text": result.extracted_text})
        except ValueError as e:
            return ActionResult(None, str(e))
        except LlmError as e:
            logger.error("Health report extraction failed: %s", e)
            return ActionResult(None, HEALTH_REPORT_ERROR)
