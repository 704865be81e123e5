"""Synthetic stand-in data used when a provider is unconfigured or failing."""

import random
from datetime import date, timedelta

from airwise.ingest.pollutants import MICROGRAMS
from airwise.models.air_quality import CurrentReading, DailyForecast, Pollutant, Weather
from airwise.models.common import format_day, round_half_up


def mock_current_reading(rng: random.Random) -> CurrentReading:
    aqi = rng.randint(1, 250)
    return CurrentReading(
        aqi=aqi,
        pollutants=[
            Pollutant(name="PM2.5", value=round(aqi / 2, 2), unit=MICROGRAMS),
            Pollutant(name="O₃", value=round(aqi / 4, 2), unit=MICROGRAMS),
        ],
    )


def mock_forecast(rng: random.Random, days: int, today: date) -> list[DailyForecast]:
    """Jitter a random baseline by up to +-20 per day, starting tomorrow."""
    base = rng.randint(50, 199)
    forecast = []
    for i in range(1, days + 1):
        aqi = max(0, round_half_up(base + (rng.random() - 0.5) * 40))
        forecast.append(
            DailyForecast(
                date=format_day(today + timedelta(days=i)),
                aqi=aqi,
                pollutants=[
                    Pollutant(name="PM2.5", value=round(aqi / 2, 2), unit=MICROGRAMS)
                ],
            )
        )
    return forecast


def mock_weather(rng: random.Random) -> Weather:
    return Weather(
        temp=rng.randint(15, 34),
        humidity=rng.randint(40, 89),
        wind=rng.randint(5, 19),
    )
