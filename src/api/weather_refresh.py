"""
Yksi päivityssykli: haku → tunnistus → muutoksen arviointi → tallennus → piirto.

Ajastin (tai asetussivu) kutsuu RefreshCycle.run(). Sykli ei yritä itse
uudelleen; RETRYABLE kertoo ajastimelle, että kannattaa yrittää myöhemmin.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from src.api.weather_change import is_significant
from src.api.weather_fetch import FetchError, fetch_current_weather
from src.models import (
    Coordinate,
    CycleResult,
    PersistedObservation,
    Reading,
    SurfaceDescriptor,
    Theme,
)
from src.state_store import StateStore, StateStoreError
from src.surface_host import RenderSink
from src.viewmodels.weather_widget import render_surface
from src.weather_icons import IconRegistry

logger = logging.getLogger("weatherwidget")

Fetcher = Callable[[Coordinate], Reading]
SurfaceSource = Callable[[], Iterable[SurfaceDescriptor]]


class RefreshCycle:
    def __init__(
        self,
        store: StateStore,
        sink: RenderSink,
        surfaces: SurfaceSource,
        registry: IconRegistry,
        fetcher: Fetcher = fetch_current_weather,
    ) -> None:
        self.store = store
        self.sink = sink
        self.surfaces = surfaces
        self.registry = registry
        self.fetcher = fetcher

    def run(self) -> CycleResult:
        logger.info("Refresh cycle started")

        coord = self.store.read_coordinate()

        try:
            reading = self.fetcher(coord)
        except FetchError as e:
            logger.warning("Weather fetch failed (%s): %s", type(e).__name__, e)
            return CycleResult.RETRYABLE

        logger.info("Fetched: %s, %s", reading.condition, reading.temperature_c)

        # luku → vertailu → kirjoitus → piirto yhtenä kriittisenä alueena,
        # teema luetaan vasta lukon sisällä
        with self.store.lock():
            previous = self.store.read_observation()
            if not is_significant(previous, reading):
                logger.info("No significant change, not updating widgets")
                return CycleResult.SUCCESS

            try:
                self.store.write_observation(PersistedObservation.from_reading(reading))
            except StateStoreError as e:
                logger.error("Could not persist observation: %s", e)
                return CycleResult.FATAL

            # tila on jo tallennettu; yksittäisen pinnan virhe ei peru sitä
            self._render_all(reading.condition, self.store.read_theme())

        logger.info("Widgets updated")
        return CycleResult.SUCCESS

    def render_surface_from_state(self, surface: SurfaceDescriptor) -> None:
        """Piirtää yhden pinnan tallennetusta tilasta (koonmuutos, uusi pinta)."""
        with self.store.lock():
            observation = self.store.read_observation()
            theme = self.store.read_theme()
            self._render_one(observation.last_condition, theme, surface)

    def render_all_from_state(self) -> int:
        """Piirtää kaikki pinnat tallennetusta tilasta (esim. teema vaihtui)."""
        with self.store.lock():
            observation = self.store.read_observation()
            theme = self.store.read_theme()
            return self._render_all(observation.last_condition, theme)

    def _render_all(self, condition: str, theme: Theme) -> int:
        rendered = 0
        for surface in self.surfaces():
            if self._render_one(condition, theme, surface):
                rendered += 1
        return rendered

    def _render_one(self, condition: str, theme: Theme, surface: SurfaceDescriptor) -> bool:
        try:
            instruction = render_surface(condition, theme, surface, self.registry)
            self.sink.update_surface(surface.surface_id, instruction)
        except Exception:
            logger.exception("Rendering surface %s failed", surface.surface_id)
            return False
        return True
