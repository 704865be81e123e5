"""Canonical pollutant names and units for provider-specific keys."""

from airwise.models.air_quality import Pollutant

MICROGRAMS = "µg/m³"

# provider key -> (display name, unit)
POLLUTANT_TABLE: dict[str, tuple[str, str]] = {
    "pm25": ("PM2.5", MICROGRAMS),
    "pm2_5": ("PM2.5", MICROGRAMS),
    "pm10": ("PM10", MICROGRAMS),
    "o3": ("O₃", MICROGRAMS),
    "no2": ("NO₂", MICROGRAMS),
    "so2": ("SO₂", MICROGRAMS),
    "co": ("CO", MICROGRAMS),
}

UNIT_BY_NAME: dict[str, str] = {name: unit for name, unit in POLLUTANT_TABLE.values()}


def map_pollutant(key: str, value: float) -> Pollutant | None:
    """Map a provider key to a Pollutant. Unknown keys map to None."""
    entry = POLLUTANT_TABLE.get(key)
    if entry is None:
        return None
    name, unit = entry
    return Pollutant(name=name, value=value, unit=unit)


def map_pollutants(values: dict[str, float]) -> list[Pollutant]:
    mapped = (map_pollutant(k, v) for k, v in values.items())
    return [p for p in mapped if p is not None]
