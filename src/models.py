# src/models.py
"""Sääwidgetin tietomalli: koordinaatti, lukema, tallennettu havainto, teema ja render-ohje."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum

UNKNOWN_CONDITION = "Unknown"


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class Reading:
    """Yksi haettu nykysää. temperature_c voi olla NaN (ei arvoa)."""

    condition: str
    temperature_c: float


@dataclass(frozen=True)
class PersistedObservation:
    """Viimeisin *merkittävä* lukema. Ennen ensimmäistä sykliä ("Unknown", NaN)."""

    last_condition: str
    last_temperature_c: float

    @classmethod
    def undefined(cls) -> PersistedObservation:
        return cls(last_condition=UNKNOWN_CONDITION, last_temperature_c=math.nan)

    @classmethod
    def from_reading(cls, reading: Reading) -> PersistedObservation:
        return cls(last_condition=reading.condition, last_temperature_c=reading.temperature_c)

    @property
    def has_temperature(self) -> bool:
        return not math.isnan(self.last_temperature_c)


class Theme(StrEnum):
    """Ikonisetin variantti. MALAYALAM on oletus ja ainoa taatusti täydellinen setti."""

    MALAYALAM = "malayalam"
    BLACK_WHITE = "black_white"
    TRANSPARENT = "transparent"

    @classmethod
    def parse(cls, value: object) -> Theme:
        try:
            return cls(str(value))
        except ValueError:
            return cls.MALAYALAM


@dataclass(frozen=True)
class SurfaceDescriptor:
    surface_id: str
    reported_width: int


class LayoutVariant(StrEnum):
    COMPACT = "compact"
    WIDE = "wide"


@dataclass(frozen=True)
class RenderInstruction:
    """Yhden pinnan piirto-ohje. icon_id None = ikonia ei löytynyt."""

    layout: LayoutVariant
    icon_id: str | None
    label: str | None = None


class CycleResult(StrEnum):
    SUCCESS = "success"
    RETRYABLE = "retryable"
    FATAL = "fatal"  # vain tilan tallennusvirhe; ei uudelleenyritystä
