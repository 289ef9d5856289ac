# src/widget_app.py
"""Kokoaa sovelluksen: tila, widget-host, ikonit, sykli ja ajastin."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.api.weather_fetch import fetch_current_weather
from src.api.weather_refresh import Fetcher, RefreshCycle
from src.config import POLL_INTERVAL_S, POLL_SCHEDULE_NAME
from src.models import Coordinate, SurfaceDescriptor, Theme
from src.scheduler import RefreshScheduler
from src.state_store import JsonFileStateStore, StateStore
from src.surface_host import SurfaceHost
from src.weather_icons import AssetIconRegistry, IconRegistry

logger = logging.getLogger("weatherwidget")

DEFAULT_SURFACES: tuple[SurfaceDescriptor, ...] = (
    SurfaceDescriptor("widget_2x1", 180),
    SurfaceDescriptor("widget_5x1", 320),
)


@dataclass
class WidgetApp:
    store: StateStore
    host: SurfaceHost
    registry: IconRegistry
    scheduler: RefreshScheduler
    cycle: RefreshCycle = field(init=False)
    fetcher: Fetcher = fetch_current_weather

    def __post_init__(self) -> None:
        self.cycle = RefreshCycle(
            store=self.store,
            sink=self.host,
            surfaces=self.host.surfaces,
            registry=self.registry,
            fetcher=self.fetcher,
        )
        self.host.on_surface_added(self._on_surface_added)
        self.host.on_surface_resized(self.cycle.render_surface_from_state)

    def _on_surface_added(self, surface: SurfaceDescriptor) -> None:
        # näytä heti viimeisin tila, ja hae tuore sää perään
        self.cycle.render_surface_from_state(surface)
        self.scheduler.trigger_now(self.cycle.run)

    def start(self, interval_s: float = POLL_INTERVAL_S) -> bool:
        return self.scheduler.schedule_periodic(POLL_SCHEDULE_NAME, interval_s, self.cycle.run)

    def apply_theme(self, theme: Theme) -> None:
        with self.store.lock():
            self.store.write_theme(theme)
            self.cycle.render_all_from_state()
        self.scheduler.trigger_now(self.cycle.run)
        logger.info("Theme applied: %s", theme.value)

    def apply_location(self, coord: Coordinate) -> None:
        self.store.write_coordinate(coord)
        self.scheduler.trigger_now(self.cycle.run)
        logger.info("Location updated: %s, %s", coord.latitude, coord.longitude)

    def stop(self) -> None:
        self.scheduler.stop()


def build_app(
    store: StateStore | None = None,
    registry: IconRegistry | None = None,
    scheduler: RefreshScheduler | None = None,
    fetcher: Fetcher = fetch_current_weather,
) -> WidgetApp:
    return WidgetApp(
        store=store if store is not None else JsonFileStateStore(),
        host=SurfaceHost(),
        registry=registry if registry is not None else AssetIconRegistry(),
        scheduler=scheduler if scheduler is not None else RefreshScheduler(),
        fetcher=fetcher,
    )
