from __future__ import annotations

from typing import Any, Final

from src.api.weather_utils import as_int
from src.models import UNKNOWN_CONDITION

# WMO-koodi → säätilan nimi
_CONDITION_BY_WMO: Final[dict[int, str]] = {
    0: "Clear",
    1: "Clouds",
    2: "Clouds",
    3: "Clouds",
    45: "Fog",
    48: "Mist",
    51: "Drizzle",
    53: "Drizzle",
    55: "Drizzle",
    56: "Drizzle",
    57: "Drizzle",
    61: "Rain",
    63: "Rain",
    65: "Rain",
    80: "Rain",
    81: "Rain",
    82: "Rain",
    66: "Freezing Rain",
    67: "Freezing Rain",
    71: "Snow",
    73: "Snow",
    75: "Snow",
    77: "Snow",
    85: "Snow",
    86: "Snow",
    95: "Thunderstorm",
    96: "Thunderstorm",
    99: "Thunderstorm",
}


def normalize_condition(raw: str) -> str:
    """'RAIN' → 'Rain', 'Freezing Rain' → 'Freezing rain'. Idempotentti."""
    lowered = raw.lower()
    return lowered[:1].upper() + lowered[1:]


def map_weather_code(code: Any) -> str:
    """
    WMO-sääkoodi → normalisoitu säätila.

    Totaalinen: tuntematon koodi, None tai ei-kokonaisluku → "Unknown".
    """
    wmo = as_int(code)
    raw = _CONDITION_BY_WMO.get(wmo, UNKNOWN_CONDITION) if wmo is not None else UNKNOWN_CONDITION
    return normalize_condition(raw)
