"""Operational health models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceStatus:
    name: str
    configured: bool
    reachable: bool | None  # None when the probe was skipped


@dataclass(frozen=True)
class HealthStatus:
    demo_mode: bool
    sources: list[SourceStatus]

    @property
    def degraded_sources(self) -> list[str]:
        return [s.name for s in self.sources if not s.configured or s.reachable is False]
