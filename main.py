# main.py
"""Main entry point for the weather widget host (Streamlit)."""

import sys
import traceback

import streamlit as st

from src.config import PAGE_REFRESH_MS
from src.logger_config import setup_logging
from src.paths import ensure_dirs
from src.ui import card_settings, card_widget
from src.ui.common import load_css, section_title
from src.widget_app import DEFAULT_SURFACES, WidgetApp, build_app

ensure_dirs()

logger = setup_logging()


def st_autorefresh(interval: int | None = None) -> None:
    """Reload the page periodically so new render instructions show up."""
    if interval:
        st.markdown(
            f"<script>setTimeout(() => window.location.reload(), {int(interval)});</script>",
            unsafe_allow_html=True,
        )


@st.cache_resource
def get_app() -> WidgetApp:
    """Process-wide app: one store, one host, one scheduler."""
    app = build_app()
    for surface in DEFAULT_SURFACES:
        app.host.add_surface(surface)
    app.start()
    return app


def main() -> None:
    try:
        st.set_page_config(page_title="Weather widget", layout="wide", page_icon="🌦️")
        load_css("style.css")
        st_autorefresh(interval=PAGE_REFRESH_MS)

        app = get_app()

        section_title("🌦️ Widgets", mb=4)
        for surface in app.host.surfaces():
            card_widget(surface, app.host.instruction_for(surface.surface_id))

        card_settings(app)

    except KeyboardInterrupt:
        logger.info("Weather widget shutdown requested")
        sys.exit(0)
    except Exception as e:
        logger.error("Unhandled error: %s", e)
        logger.error(traceback.format_exc())
        sys.exit(1)


if __name__ == "__main__":
    main()
