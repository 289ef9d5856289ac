from __future__ import annotations

import importlib

from src.models import LayoutVariant, RenderInstruction, SurfaceDescriptor

card_widget_module = importlib.import_module("src.ui.card_widget")


def test_widget_html_wide_has_label(monkeypatch):
    monkeypatch.setattr(
        card_widget_module, "render_icon_html", lambda icon_id, size=48, alt="": f"<icon {icon_id}>"
    )
    instr = RenderInstruction(LayoutVariant.WIDE, "ml/rain", "Rain")

    html = card_widget_module.widget_html(instr, 320)

    assert "<icon ml/rain>" in html
    assert '<div class="title">Rain</div>' in html
    assert "width:320px" in html
    assert 'class="widget wide"' in html


def test_widget_html_compact_is_icon_only(monkeypatch):
    monkeypatch.setattr(
        card_widget_module, "render_icon_html", lambda icon_id, size=48, alt="": f"<icon {size}>"
    )
    instr = RenderInstruction(LayoutVariant.COMPACT, "ml/rain", None)

    html = card_widget_module.widget_html(instr, 180)

    assert "<icon 48>" in html
    assert 'class="title"' not in html
    assert 'class="widget compact"' in html


def test_widget_html_escapes_label():
    instr = RenderInstruction(LayoutVariant.WIDE, None, "<b>Rain</b>")
    html = card_widget_module.widget_html(instr, 320)
    assert "&lt;b&gt;Rain&lt;/b&gt;" in html


def test_card_widget_renders_html(monkeypatch):
    rendered: dict = {}

    def fake_html(html: str, height: int, scrolling: bool) -> None:
        rendered.update(html=html, height=height, scrolling=scrolling)

    monkeypatch.setattr(card_widget_module, "st_html", fake_html)
    instr = RenderInstruction(LayoutVariant.WIDE, None, "Clear")

    card_widget_module.card_widget(SurfaceDescriptor("w", 320), instr)

    assert "Clear" in rendered["html"]
    assert rendered["scrolling"] is False


def test_card_widget_without_instruction_shows_placeholder_card(monkeypatch):
    cards: list[tuple[str, str]] = []
    monkeypatch.setattr(card_widget_module, "card", lambda title, body, **kw: cards.append((title, body)))
    monkeypatch.setattr(
        card_widget_module, "st_html", lambda *a, **k: (_ for _ in ()).throw(AssertionError())
    )

    card_widget_module.card_widget(SurfaceDescriptor("w", 320), None)

    assert cards and cards[0][0] == "w"
