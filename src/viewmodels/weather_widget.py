from __future__ import annotations

import math

from src.config import WIDE_LAYOUT_MIN_WIDTH
from src.models import LayoutVariant, RenderInstruction, SurfaceDescriptor, Theme
from src.weather_icons import IconRegistry, resolve_icon


def layout_for_width(reported_width: int, wide_min_width: int = WIDE_LAYOUT_MIN_WIDTH) -> LayoutVariant:
    return LayoutVariant.WIDE if reported_width >= wide_min_width else LayoutVariant.COMPACT


def render_surface(
    condition: str,
    theme: Theme,
    surface: SurfaceDescriptor,
    registry: IconRegistry,
    wide_min_width: int = WIDE_LAYOUT_MIN_WIDTH,
) -> RenderInstruction:
    """
    Rakentaa yhden pinnan piirto-ohjeen.

    Leveä pinta saa ikonin ja säätilan tekstinä, kapea pelkän ikonin.
    Puhdas funktio: samat syötteet → sama ohje (widget-host voi kutsua
    tätä useasti, esim. jokaisesta koonmuutoksesta).
    """
    layout = layout_for_width(surface.reported_width, wide_min_width)
    icon_id = resolve_icon(condition, theme, registry)
    label = condition if layout is LayoutVariant.WIDE else None
    return RenderInstruction(layout=layout, icon_id=icon_id, label=label)


def format_temperature(temp_c: float) -> str:
    """15.6 → '16°C'. NaN ja ±inf → ''."""
    if not math.isfinite(temp_c):
        return ""
    return f"{round(temp_c)}°C"
