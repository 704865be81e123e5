"""Validated request schemas for the public actions."""

from collections.abc import Mapping, Sequence
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, ValidationError


class Language(StrEnum):
    ENGLISH = "en"
    TAMIL = "ta"
    HINDI = "hi"
    BENGALI = "bn"
    TELUGU = "te"
    MARATHI = "mr"


class HealthAdvisoryRequest(BaseModel):
    model_config = {"extra": "forbid"}

    name: str = Field(min_length=2)
    age: int = Field(ge=0, le=120)
    location: str = Field(min_length=2)
    health_conditions: str | None = None
    language_preference: Language = Language.ENGLISH
    health_report: str | None = None


class ChatTurn(BaseModel):
    model_config = {"extra": "forbid"}

    role: str = Field(pattern="^(user|bot)$")
    text: str


class ChatRequest(BaseModel):
    model_config = {"extra": "forbid"}

    message: str
    history: list[ChatTurn] = []


class TipsRequest(BaseModel):
    model_config = {"extra": "forbid"}

    location: str
    aqi: float
    pollutants: str


class NewsRequest(BaseModel):
    model_config = {"extra": "forbid"}

    city: str


class ReverseGeocodeRequest(BaseModel):
    model_config = {"extra": "forbid"}

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)


class HealthReportRequest(BaseModel):
    model_config = {"extra": "forbid"}

    report_data_uri: str = Field(min_length=1)


def format_validation_error(exc: ValidationError) -> str:
    """Flatten pydantic errors into 'field: message' pairs."""
    return format_error_list(exc.errors())


def format_error_list(errors: Sequence[Mapping[str, Any]]) -> str:
    parts = []
    for err in errors:
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return ", ".join(parts)
