from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any

import requests

from src.api.http_client import http_get_json
from src.api.weather_utils import as_float, as_int
from src.api.wmo_condition import map_weather_code
from src.config import HTTP_TIMEOUT_S, OPEN_METEO_URL
from src.models import Coordinate, Reading

logger = logging.getLogger("weatherwidget")


class FetchError(Exception):
    """Nykysään haku epäonnistui. Kaikki alaluokat ovat uudelleenyritettäviä."""


class FetchTransportError(FetchError):
    """Verkko ei vastannut (yhteys, DNS, aikakatkaisu)."""


class FetchHttpError(FetchError):
    """Palvelin vastasi muulla kuin 2xx-tilalla."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class FetchMalformedError(FetchError):
    """Vastauksesta puuttuu current_weather tai sen kentät."""


def build_params(coord: Coordinate) -> dict[str, Any]:
    return {
        "latitude": coord.latitude,
        "longitude": coord.longitude,
        "current_weather": "true",
    }


def parse_current_weather(payload: Any) -> Reading:
    """
    Parsii Open-Meteon vastauksen Reading-olioksi.

    weathercode ja temperature ovat pakollisia. Eksplisiittinen
    "temperature": null tulkitaan puuttuvaksi arvoksi (NaN).
    """
    if not isinstance(payload, Mapping):
        raise FetchMalformedError("response body is not a JSON object")

    current = payload.get("current_weather")
    if not isinstance(current, Mapping):
        raise FetchMalformedError("current_weather object missing")

    code = as_int(current.get("weathercode"))
    if code is None:
        raise FetchMalformedError(f"weathercode missing or invalid: {current.get('weathercode')!r}")

    if "temperature" not in current:
        raise FetchMalformedError("temperature missing")

    raw_temp = current["temperature"]
    if raw_temp is None:
        temp = math.nan
    else:
        temp = as_float(raw_temp)
        if temp is None or not math.isfinite(temp):
            raise FetchMalformedError(f"temperature not numeric: {raw_temp!r}")

    return Reading(condition=map_weather_code(code), temperature_c=temp)


def fetch_current_weather(coord: Coordinate, timeout: float = HTTP_TIMEOUT_S) -> Reading:
    """
    Hakee nykysään annetulle koordinaatille (yksi estävä GET).

    Ainoat poikkeukset, jotka pääsevät ulos, ovat FetchError-alaluokkia.
    Uudelleenyritys on kutsujan (ajastimen) vastuulla.
    """
    try:
        payload = http_get_json(OPEN_METEO_URL, params=build_params(coord), timeout=timeout)
    except requests.JSONDecodeError as e:
        raise FetchMalformedError(f"response is not JSON: {e}") from e
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        raise FetchHttpError(f"HTTP {status}", status_code=status) from e
    except requests.RequestException as e:
        raise FetchTransportError(str(e)) from e

    reading = parse_current_weather(payload)
    logger.debug("Open-Meteo current_weather: %s", payload["current_weather"])
    return reading
