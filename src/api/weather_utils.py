from __future__ import annotations

import math
from typing import Any


def _cast_to_int(value: Any) -> int | None:
    """Muunna arvo int-tyypiksi vain, jos se on kokonaisluku. Muuten None."""
    if isinstance(value, bool):
        return None

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return int(value)
        return None

    if isinstance(value, str):
        s = value.strip()
        try:
            return int(s)
        except ValueError:
            return None

    return None


def _cast_to_float(value: Any) -> float | None:
    """Muunna annettu arvo float-tyypiksi, tai palauta None jos muunnos epäonnistuu."""
    if isinstance(value, bool):
        return None

    if isinstance(value, str):
        value = value.strip().replace(",", ".")

    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None


def safe_cast(value: Any, type_: type) -> Any | None:
    """
    Turvallinen muunnos annetuksi tyypiksi (int, float, str).

    - None → None
    - int hyväksyy vain kokonaislukuarvot (esim. 61 tai 61.0), ei 61.5
    - palauttaa None, jos muunnos ei onnistu
    """
    if value is None:
        return None

    if type_ is int:
        return _cast_to_int(value)
    if type_ is float:
        return _cast_to_float(value)
    if type_ is str:
        return str(value)

    try:
        return type_(value)
    except (TypeError, ValueError):
        return None


def as_int(x: Any) -> int | None:
    return safe_cast(x, int)


def as_float(x: Any) -> float | None:
    return safe_cast(x, float)
