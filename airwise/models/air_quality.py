"""Air quality data models: pollutants, forecasts, snapshots, advisories."""

from dataclasses import dataclass, field

GOOD = "Good"
MODERATE = "Moderate"
UNHEALTHY_SENSITIVE = "Unhealthy for Sensitive Groups"
UNHEALTHY = "Unhealthy"
VERY_UNHEALTHY = "Very Unhealthy"
HAZARDOUS = "Hazardous"

# (inclusive upper bound, category)
AQI_BANDS: list[tuple[int, str]] = [
    (50, GOOD),
    (100, MODERATE),
    (150, UNHEALTHY_SENSITIVE),
    (200, UNHEALTHY),
    (300, VERY_UNHEALTHY),
]


def aqi_category(aqi: float) -> str:
    for upper, category in AQI_BANDS:
        if aqi <= upper:
            return category
    return HAZARDOUS


@dataclass(frozen=True)
class Pollutant:
    name: str
    value: float
    unit: str


@dataclass(frozen=True)
class Weather:
    temp: float  # degrees C
    humidity: float  # percent, 0-100
    wind: float  # km/h


@dataclass(frozen=True)
class DailyForecast:
    date: str  # e.g. "Mon, Jan 1"
    aqi: int
    pollutants: list[Pollutant] = field(default_factory=list)


@dataclass(frozen=True)
class CurrentReading:
    """Raw current-conditions reading before weather and category are attached."""

    aqi: int
    pollutants: list[Pollutant]


@dataclass(frozen=True)
class CurrentConditions:
    aqi: int
    aqi_category: str
    pollutants: list[Pollutant]
    weather: Weather

    @classmethod
    def from_reading(cls, reading: CurrentReading, weather: Weather) -> "CurrentConditions":
        return cls(
            aqi=reading.aqi,
            aqi_category=aqi_category(reading.aqi),
            pollutants=reading.pollutants,
            weather=weather,
        )


@dataclass(frozen=True)
class AirQualitySnapshot:
    current: CurrentConditions | None
    forecast: list[DailyForecast]


@dataclass(frozen=True)
class Location:
    city: str
    lat: float
    lon: float


@dataclass(frozen=True)
class UserInfo:
    name: str


@dataclass(frozen=True)
class AdvisoryResult:
    current: CurrentConditions
    forecast: list[DailyForecast]
    model_forecast: list[DailyForecast]
    advisory: str
    location: Location
    user: UserInfo
