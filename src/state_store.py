# src/state_store.py
"""
Pysyvä avain/arvo-tila: lat, lon, theme, last_condition, last_temp.

Havainto (säätila + lämpötila) kirjoitetaan aina yhdellä atomisella
kirjoituksella, joten tiedostossa ei koskaan ole puoliksi päivitettyä tilaa.
"""

from __future__ import annotations

import json
import logging
import math
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol

from src.api.weather_utils import as_float
from src.config import DEFAULT_LAT, DEFAULT_LON, STATE_FILE
from src.models import UNKNOWN_CONDITION, Coordinate, PersistedObservation, Theme
from src.utils import report_error

logger = logging.getLogger("weatherwidget")

KEY_LAT = "lat"
KEY_LON = "lon"
KEY_THEME = "theme"
KEY_LAST_CONDITION = "last_condition"
KEY_LAST_TEMP = "last_temp"


class StateStoreError(RuntimeError):
    """Tilan kirjoitus epäonnistui (levy, oikeudet)."""


class StateStore(Protocol):
    def lock(self) -> threading.RLock: ...

    def read_coordinate(self) -> Coordinate: ...

    def read_theme(self) -> Theme: ...

    def read_observation(self) -> PersistedObservation: ...

    def write_coordinate(self, coord: Coordinate) -> None: ...

    def write_theme(self, theme: Theme) -> None: ...

    def write_observation(self, obs: PersistedObservation) -> None: ...


def _temp_to_json(temp_c: float) -> float | None:
    return None if math.isnan(temp_c) else float(temp_c)


def _coordinate_from(data: Mapping[str, Any]) -> Coordinate:
    lat = as_float(data.get(KEY_LAT))
    lon = as_float(data.get(KEY_LON))
    if lat is None or lon is None:
        return Coordinate(DEFAULT_LAT, DEFAULT_LON)
    return Coordinate(lat, lon)


def _observation_from(data: Mapping[str, Any]) -> PersistedObservation:
    condition = data.get(KEY_LAST_CONDITION)
    temp = as_float(data.get(KEY_LAST_TEMP))
    if not isinstance(condition, str) or not condition:
        condition = UNKNOWN_CONDITION
    return PersistedObservation(
        last_condition=condition,
        last_temperature_c=math.nan if temp is None else temp,
    )


class _BaseStateStore(ABC):
    """Yhteinen luku/kirjoituslogiikka; alaluokat toteuttavat _load ja _save."""

    def __init__(self) -> None:
        self._lock = threading.RLock()

    @abstractmethod
    def _load(self) -> dict[str, Any]: ...

    @abstractmethod
    def _save(self, data: dict[str, Any]) -> None: ...

    def lock(self) -> threading.RLock:
        """Kriittinen alue luku-muokkaus-kirjoitukselle (kaksi päällekkäistä sykliä)."""
        return self._lock

    def _update(self, changes: Mapping[str, Any]) -> None:
        with self._lock:
            data = self._load()
            data.update(changes)
            self._save(data)

    def read_coordinate(self) -> Coordinate:
        with self._lock:
            return _coordinate_from(self._load())

    def read_theme(self) -> Theme:
        with self._lock:
            return Theme.parse(self._load().get(KEY_THEME))

    def read_observation(self) -> PersistedObservation:
        with self._lock:
            return _observation_from(self._load())

    def write_coordinate(self, coord: Coordinate) -> None:
        self._update({KEY_LAT: coord.latitude, KEY_LON: coord.longitude})

    def write_theme(self, theme: Theme) -> None:
        self._update({KEY_THEME: theme.value})

    def write_observation(self, obs: PersistedObservation) -> None:
        # molemmat kentät yhdessä tai ei kumpaakaan
        self._update(
            {
                KEY_LAST_CONDITION: obs.last_condition,
                KEY_LAST_TEMP: _temp_to_json(obs.last_temperature_c),
            }
        )

    def snapshot(self) -> dict[str, Any]:
        with self._lock:
            return dict(self._load())


class InMemoryStateStore(_BaseStateStore):
    """Testeihin ja upotuksiin. writes laskee onnistuneet kirjoitukset."""

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        super().__init__()
        self._data: dict[str, Any] = dict(initial or {})
        self.writes = 0

    def _load(self) -> dict[str, Any]:
        return dict(self._data)

    def _save(self, data: dict[str, Any]) -> None:
        self._data = dict(data)
        self.writes += 1


class JsonFileStateStore(_BaseStateStore):
    """Tila JSON-tiedostossa. Kirjoitus: temp-tiedosto + fsync + os.replace."""

    def __init__(self, path: Path | str = STATE_FILE) -> None:
        super().__init__()
        self.path = Path(path)

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            report_error(f"state_store: read {self.path}", e)
            return {}
        if not isinstance(data, dict):
            logger.warning("State file %s is not a JSON object, using defaults", self.path)
            return {}
        return data

    def _save(self, data: dict[str, Any]) -> None:
        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as e:
            raise StateStoreError(f"could not write {self.path}: {e}") from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass
