# src/ui/card_settings.py
from __future__ import annotations

import streamlit as st

from src.models import Coordinate, Theme
from src.ui.common import section_title
from src.viewmodels.weather_widget import format_temperature
from src.widget_app import WidgetApp

THEME_LABELS: dict[Theme, str] = {
    Theme.MALAYALAM: "Malayalam",
    Theme.BLACK_WHITE: "Black & white",
    Theme.TRANSPARENT: "Transparent",
}


def observation_text(app: WidgetApp) -> str:
    obs = app.store.read_observation()
    temp = format_temperature(obs.last_temperature_c)
    return f"{obs.last_condition}, {temp}" if temp else obs.last_condition


def card_settings(app: WidgetApp) -> None:
    """Teeman valinta, sijainnin syöttö ja pintojen leveydet."""
    section_title("⚙️ Widget settings", mb=4)
    st.caption(f"Last observation: {observation_text(app)}")

    themes = list(Theme)
    current = app.store.read_theme()
    chosen = st.radio(
        "Theme",
        themes,
        index=themes.index(current),
        format_func=lambda t: THEME_LABELS[t],
        horizontal=True,
    )
    if st.button("Apply theme"):
        app.apply_theme(chosen)
        st.toast(f"Applied: {chosen.value}")

    coord = app.store.read_coordinate()
    col1, col2 = st.columns(2, gap="small")
    with col1:
        lat = st.number_input(
            "Latitude", value=coord.latitude, min_value=-90.0, max_value=90.0, format="%.4f"
        )
    with col2:
        lon = st.number_input(
            "Longitude", value=coord.longitude, min_value=-180.0, max_value=180.0, format="%.4f"
        )
    if st.button("Save location"):
        app.apply_location(Coordinate(float(lat), float(lon)))
        st.toast(f"Location updated: {lat}, {lon}")

    for surface in app.host.surfaces():
        width = st.slider(
            f"{surface.surface_id} width",
            min_value=100,
            max_value=500,
            value=surface.reported_width,
            step=10,
            key=f"width_{surface.surface_id}",
        )
        if width != surface.reported_width:
            app.host.resize_surface(surface.surface_id, width)
