# src/ui/card_widget.py
from __future__ import annotations

import html

from streamlit.components.v1 import html as st_html

from src.models import LayoutVariant, RenderInstruction, SurfaceDescriptor
from src.ui.common import card
from src.weather_icons import render_icon_html

_WIDGET_HEIGHT_PX = 96


def widget_html(instruction: RenderInstruction, width: int) -> str:
    """Yhden widgetin HTML: kapea = pelkkä ikoni, leveä = ikoni + säätila."""
    icon_size = 48 if instruction.layout is LayoutVariant.COMPACT else 64
    icon_html = render_icon_html(instruction.icon_id, size=icon_size, alt=instruction.label or "")
    label_html = ""
    if instruction.label:
        label_html = f'<div class="title">{html.escape(instruction.label)}</div>'

    return f"""
        <!doctype html>
        <html><head><meta charset="utf-8">
        <style>
          html,body {{margin:0;padding:0;background:transparent;color:#e7eaee;
                     font-family:ui-sans-serif,system-ui,-apple-system,Segoe UI,Roboto,Ubuntu;}}
          .widget {{display:flex;align-items:center;gap:12px;width:{int(width)}px;
                   height:{_WIDGET_HEIGHT_PX - 16}px;padding:0 12px;box-sizing:border-box;
                   background:rgba(255,255,255,0.06);border-radius:14px;}}
          .widget.compact {{justify-content:center;}}
          .title {{font-size:1.2rem;}}
        </style></head><body>
          <div class="widget {instruction.layout.value}">{icon_html}{label_html}</div>
        </body></html>
    """


def card_widget(surface: SurfaceDescriptor, instruction: RenderInstruction | None) -> None:
    """Piirtää yhden pinnan viimeisimmän ohjeen mukaan."""
    if instruction is None:
        card(
            surface.surface_id,
            "<span class='hint'>Odotetaan ensimmäistä päivitystä…</span>",
            height_dvh=8,
        )
        return
    st_html(widget_html(instruction, surface.reported_width), height=_WIDGET_HEIGHT_PX, scrolling=False)
