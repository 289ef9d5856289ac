from .weather_change import is_significant as is_significant
from .weather_fetch import (
    FetchError as FetchError,
    FetchHttpError as FetchHttpError,
    FetchMalformedError as FetchMalformedError,
    FetchTransportError as FetchTransportError,
    fetch_current_weather as fetch_current_weather,
)
from .wmo_condition import (
    map_weather_code as map_weather_code,
    normalize_condition as normalize_condition,
)
