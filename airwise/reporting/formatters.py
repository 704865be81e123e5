"""Output formatters for advisories, news digests and health status."""

import dataclasses
import json
from typing import Any

from airwise.models.air_quality import AdvisoryResult, DailyForecast, aqi_category
from airwise.models.news import NewsDigest
from airwise.models.reporting import HealthStatus


def _forecast_lines(days: list[DailyForecast]) -> list[str]:
    return [f"  {d.date}: AQI {d.aqi} ({aqi_category(d.aqi)})" for d in days]


def format_advisory_text(r: AdvisoryResult) -> str:
    """Plain text advisory for the terminal."""
    c = r.current
    lines = [
        f"=== Air Quality Advisory for {r.user.name} | {r.location.city} "
        f"({r.location.lat:.4f}, {r.location.lon:.4f}) ===",
        f"AQI: {c.aqi} ({c.aqi_category})",
        f"Weather: {c.weather.temp:.0f}°C, {c.weather.humidity:.0f}% humidity, "
        f"{c.weather.wind:.0f} km/h wind",
    ]
    if c.pollutants:
        lines.append(
            "Pollutants: "
            + ", ".join(f"{p.name} {p.value} {p.unit}" for p in c.pollutants)
        )
    if r.forecast:
        lines.append("Forecast:")
        lines.extend(_forecast_lines(r.forecast))
    if r.model_forecast:
        lines.append("Model projection (simulated):")
        lines.extend(_forecast_lines(r.model_forecast))
    lines.append("")
    lines.append(r.advisory)
    return "\n".join(lines)


def format_news_text(d: NewsDigest) -> str:
    lines = [d.summary]
    if d.news_items:
        lines.append("")
    for item in d.news_items:
        lines.append(f"[{item.source}] {item.title}")
        lines.append(f"  {item.link}")
    return "\n".join(lines)


def format_health_text(s: HealthStatus) -> str:
    lines = [f"Demo mode: {s.demo_mode}"]
    for src in s.sources:
        if src.reachable is None:
            reach = "-"
        else:
            reach = "OK" if src.reachable else "FAIL"
        configured = "configured" if src.configured else "not configured (degraded)"
        lines.append(f"{src.name}: {configured}, reachable: {reach}")
    return "\n".join(lines)


def to_jsonable(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    return obj


def to_json(obj: Any) -> str:
    """JSON for programmatic consumption."""
    return json.dumps(to_jsonable(obj), indent=2, ensure_ascii=False)
