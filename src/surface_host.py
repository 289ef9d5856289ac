# src/surface_host.py
"""Widget-host: rekisteröidyt pinnat ja viimeisin piirto-ohje kullekin."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Protocol

from src.models import RenderInstruction, SurfaceDescriptor

logger = logging.getLogger("weatherwidget")

SurfaceListener = Callable[[SurfaceDescriptor], None]


class RenderSink(Protocol):
    def update_surface(self, surface_id: str, instruction: RenderInstruction) -> None: ...


class SurfaceHost:
    """
    Muistinvarainen widget-host.

    Toimii render sinkinä (update_surface) ja kertoo kuuntelijoille, kun
    pinta lisätään tai sen koko muuttuu.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._surfaces: dict[str, SurfaceDescriptor] = {}
        self._instructions: dict[str, RenderInstruction] = {}
        self._on_added: list[SurfaceListener] = []
        self._on_resized: list[SurfaceListener] = []

    # --- rekisteri -------------------------------------------------------------

    def surfaces(self) -> list[SurfaceDescriptor]:
        with self._lock:
            return list(self._surfaces.values())

    def add_surface(self, surface: SurfaceDescriptor) -> None:
        with self._lock:
            is_new = surface.surface_id not in self._surfaces
            self._surfaces[surface.surface_id] = surface
        if is_new:
            logger.info("Surface %s added (width %s)", surface.surface_id, surface.reported_width)
            self._notify(self._on_added, surface)
        else:
            self._notify(self._on_resized, surface)

    def resize_surface(self, surface_id: str, reported_width: int) -> SurfaceDescriptor:
        with self._lock:
            if surface_id not in self._surfaces:
                raise KeyError(surface_id)
            surface = SurfaceDescriptor(surface_id, reported_width)
            self._surfaces[surface_id] = surface
        self._notify(self._on_resized, surface)
        return surface

    def remove_surface(self, surface_id: str) -> None:
        with self._lock:
            self._surfaces.pop(surface_id, None)
            self._instructions.pop(surface_id, None)

    # --- render sink -----------------------------------------------------------

    def update_surface(self, surface_id: str, instruction: RenderInstruction) -> None:
        with self._lock:
            if surface_id not in self._surfaces:
                logger.warning("Update for unknown surface %s ignored", surface_id)
                return
            self._instructions[surface_id] = instruction

    def instruction_for(self, surface_id: str) -> RenderInstruction | None:
        with self._lock:
            return self._instructions.get(surface_id)

    # --- kuuntelijat -----------------------------------------------------------

    def on_surface_added(self, listener: SurfaceListener) -> None:
        self._on_added.append(listener)

    def on_surface_resized(self, listener: SurfaceListener) -> None:
        self._on_resized.append(listener)

    def _notify(self, listeners: list[SurfaceListener], surface: SurfaceDescriptor) -> None:
        for listener in list(listeners):
            try:
                listener(surface)
            except Exception:
                logger.exception("Surface listener failed for %s", surface.surface_id)
