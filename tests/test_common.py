# tests/test_common.py

import src.ui.common as common


def _capture_markdown(monkeypatch) -> dict:
    called: dict = {}

    def fake_markdown(html, unsafe_allow_html=False):
        called["html"] = html
        called["unsafe"] = unsafe_allow_html

    monkeypatch.setattr(common.st, "markdown", fake_markdown)
    return called


def test_load_css_reads_and_marksdown(monkeypatch, tmp_path):
    css_file = tmp_path / "style.css"
    css_file.write_text(".widget { color: red; }", encoding="utf-8")
    monkeypatch.setattr(common, "asset_path", lambda name: css_file)
    called = _capture_markdown(monkeypatch)

    common.load_css("style.css")

    assert "color: red" in called["html"]
    assert called["unsafe"] is True


def test_load_css_missing_file_does_nothing(monkeypatch, tmp_path):
    monkeypatch.setattr(common, "asset_path", lambda name: tmp_path / "not-there.css")
    called = _capture_markdown(monkeypatch)

    common.load_css("not-there.css")

    assert called == {}


def test_section_title_renders_html(monkeypatch):
    called = _capture_markdown(monkeypatch)

    common.section_title("Widgets", mt=5, mb=3)

    assert "Widgets" in called["html"]
    assert "margin:5px 0 3px 0" in called["html"]


def test_card_renders_structure(monkeypatch):
    called = _capture_markdown(monkeypatch)

    common.card("widget_2x1", "<p>Body</p>", height_dvh=8)

    html = called["html"]
    assert '<section class="card"' in html
    assert "widget_2x1" in html
    assert "<p>Body</p>" in html
    assert "min-height:8dvh" in html
