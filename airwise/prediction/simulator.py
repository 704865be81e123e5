"""Simulated multi-day AQI projection.

Placeholder for a real predictive model. Each day extrapolates the trend of
the supplied history, nudges it by a weather term and a random perturbation,
and feeds the result into the next day. Pass a seeded ``random.Random`` for
reproducible output.
"""

import random
from datetime import date, timedelta

from airwise.models.air_quality import DailyForecast, Weather
from airwise.models.common import format_day, round_half_up, utc_today

MIN_AQI = 10
PERTURBATION_RANGE = 20.0  # uniform in [-10, 10)


def linear_trend(history: list[DailyForecast]) -> float:
    if len(history) < 2:
        return 0.0
    return (history[-1].aqi - history[0].aqi) / len(history)


def weather_adjustment(weather: Weather) -> float:
    """Wind disperses pollutants; humidity and heat are treated as sinks."""
    return (weather.wind / 10) - (weather.humidity / 100) - (weather.temp / 20)


def simulate_forecast(
    current_aqi: int,
    weather: Weather,
    days: int,
    history: list[DailyForecast],
    rng: random.Random,
    today: date | None = None,
) -> list[DailyForecast]:
    """Project AQI for ``days`` days after ``today``.

    Args:
        current_aqi: Starting AQI for the autoregression.
        weather: Current weather; held constant across the horizon.
        days: Number of days to project.
        history: Observed or official daily forecasts, oldest first.
        rng: Random source for the per-day perturbation.
        today: Reference date (defaults to UTC today).

    Returns:
        One DailyForecast per day with an integer AQI >= MIN_AQI and no
        pollutant breakdown.
    """
    if today is None:
        today = utc_today()

    trend = linear_trend(history)
    adjustment = weather_adjustment(weather)

    predictions = []
    previous = float(current_aqi)
    for i in range(1, days + 1):
        perturbation = (rng.random() - 0.5) * PERTURBATION_RANGE
        predicted = max(MIN_AQI, round_half_up(previous + trend + adjustment + perturbation))
        previous = predicted
        predictions.append(
            DailyForecast(date=format_day(today + timedelta(days=i)), aqi=predicted)
        )
    return predictions
