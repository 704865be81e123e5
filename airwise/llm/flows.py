"""Gemini-backed capabilities: geocoding, advisories, news, tips, chat."""

import base64
import binascii
import re

from pydantic import BaseModel, Field

from airwise.config.defaults import NO_NEWS_SUMMARY
from airwise.llm import prompts
from airwise.llm.client import GeminiClient, Media
from airwise.models.news import NewsItem

DATA_URI_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<payload>.+)$", re.DOTALL)


class Coordinates(BaseModel):
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)


class CityName(BaseModel):
    city: str = Field(min_length=1)


class HealthAdvisoryText(BaseModel):
    health_advisory: str = Field(min_length=1)


class NewsTitle(BaseModel):
    title: str = Field(min_length=1)


class NewsSummary(BaseModel):
    summary: str


class PollutionTips(BaseModel):
    tips: str


class ChatReply(BaseModel):
    response: str


class ExtractedText(BaseModel):
    extracted_text: str


class AdvisoryPromptInput(BaseModel):
    name: str
    age: int
    location: str
    health_conditions: str = "None"
    language_preference: str = "en"
    aqi: int
    aqi_category: str
    pollutants: str
    health_report: str | None = None


async def geocode_city(llm: GeminiClient, city: str) -> Coordinates:
    return await llm.generate(prompts.GEOCODE_CITY.format(city=city), Coordinates)


async def reverse_geocode(llm: GeminiClient, latitude: float, longitude: float) -> CityName:
    prompt = prompts.REVERSE_GEOCODE.format(latitude=latitude, longitude=longitude)
    return await llm.generate(prompt, CityName)


async def generate_health_advisory(
    llm: GeminiClient, data: AdvisoryPromptInput
) -> HealthAdvisoryText:
    report = ""
    if data.health_report:
        report = prompts.HEALTH_REPORT_SECTION.format(health_report=data.health_report)
    prompt = prompts.HEALTH_ADVISORY.format(
        **data.model_dump(exclude={"health_report"}),
        health_report_section=report,
    )
    return await llm.generate(prompt, HealthAdvisoryText)


async def generate_news_title(llm: GeminiClient, snippet: str) -> NewsTitle:
    return await llm.generate(prompts.NEWS_TITLE.format(snippet=snippet), NewsTitle)


async def summarize_news(
    llm: GeminiClient, items: list[NewsItem], location: str
) -> NewsSummary:
    if not items:
        return NewsSummary(summary=NO_NEWS_SUMMARY)
    lines = "\n".join(
        prompts.NEWS_ITEM_LINE.format(source=i.source, title=i.title, snippet=i.snippet)
        for i in items
    )
    prompt = prompts.SUMMARIZE_NEWS.format(location=location, items=lines)
    return await llm.generate(prompt, NewsSummary)


async def generate_pollution_reduction_tips(
    llm: GeminiClient, location: str, aqi: float, pollutants: str
) -> PollutionTips:
    prompt = prompts.POLLUTION_TIPS.format(location=location, aqi=aqi, pollutants=pollutants)
    return await llm.generate(prompt, PollutionTips)


async def chat(
    llm: GeminiClient, message: str, history: list[tuple[str, str]] | None = None
) -> ChatReply:
    """Answer a message; ``history`` is (role, text) pairs, role 'user' or 'bot'."""
    turns = "".join(
        f"{'User' if role == 'user' else 'Assistant'}: {text}\n"
        for role, text in history or []
    )
    return await llm.generate(prompts.CHAT.format(history=turns, message=message), ChatReply)


def parse_data_uri(uri: str) -> Media:
    """Decode a ``data:<mime>;base64,<payload>`` URI. Raises ValueError."""
    match = DATA_URI_RE.match(uri.strip())
    if match is None:
        raise ValueError("Expected a base64 data URI with a MIME type")
    try:
        data = base64.b64decode(match.group("payload"), validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 payload: {e}") from e
    return Media(data=data, mime_type=match.group("mime"))


async def extract_text_from_health_report(llm: GeminiClient, report_data_uri: str) -> ExtractedText:
    media = parse_data_uri(report_data_uri)
    return await llm.generate(prompts.EXTRACT_HEALTH_REPORT, ExtractedText, media=media)
