# config.py
"""Configuration settings for the weather widget."""

import os
from pathlib import Path

from src.paths import data_path

HTTP_TIMEOUT_S: float = float(os.environ.get("WEATHER_HTTP_TIMEOUT_S", "8.0"))
HTTP_USER_AGENT: str = "WeatherWidget/1.0"

DEV: bool = os.environ.get("DEV", "0") == "1"

# ------------------- WEATHER PROVIDER -------------------

OPEN_METEO_URL: str = "https://api.open-meteo.com/v1/forecast"
"""Open-Meteo endpoint; queried with current_weather=true."""

# ------------------- GEOLOCATION -------------------

DEFAULT_LAT: float = 10.0159
DEFAULT_LON: float = 76.3419
"""Fallback coordinates (Kochi) used until a location has been stored."""

# ------------------- PERSISTED STATE -------------------

STATE_FILE: Path = Path(
    os.environ.get("WEATHER_WIDGET_STATE_FILE", str(data_path("weather_widget_prefs.json")))
)
"""Flat JSON key/value file: lat, lon, theme, last_condition, last_temp."""

# ------------------- CHANGE DETECTION -------------------

TEMP_CHANGE_THRESHOLD_C: float = 1.0
"""Temperature delta (°C) that counts as a significant change. Tune if needed."""

# ------------------- SURFACES -------------------

WIDE_LAYOUT_MIN_WIDTH: int = 300
"""Reported surface width at or above which the wide (labelled) layout is used."""

# ------------------- SCHEDULING -------------------

POLL_SCHEDULE_NAME: str = "weather_poll"
POLL_INTERVAL_S: int = int(os.environ.get("WEATHER_POLL_INTERVAL_S", "900"))
"""Recurring refresh interval (seconds), 15 min by default."""

RETRY_BASE_DELAY_S: float = 30.0
RETRY_MAX_ATTEMPTS: int = 3
"""Backoff for retryable cycles: RETRY_BASE_DELAY_S * 2**attempt, at most RETRY_MAX_ATTEMPTS retries."""

PAGE_REFRESH_MS: int = 60_000
