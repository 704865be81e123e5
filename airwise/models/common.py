"""Common types and helpers shared across models."""

import math
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ActionResult(Generic[T]):
    """Envelope returned by every public action. Never raised past."""

    data: T | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_today() -> date:
    return utc_now().date()


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def format_day(d: date) -> str:
    """Human-readable day label, e.g. 'Mon, Jan 1'."""
    return f"{d:%a, %b} {d.day}"
