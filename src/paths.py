"""
paths.py – keskitetyt polut sääwidgetille.

Näin voit aina kirjoittaa:
    from src.paths import ASSETS, DATA, asset_path, data_path

…ja saat oikean polun riippumatta siitä, ajetaanko sovellus
projektin juuresta (streamlit run main.py) vai jostain muualta.
"""

from __future__ import annotations

from pathlib import Path

_THIS_FILE = Path(__file__).resolve()

# src/paths.py -> src -> projektin juuri
ROOT_DIR = _THIS_FILE.parent.parent

SRC = ROOT_DIR / "src"
ASSETS = ROOT_DIR / "assets"
ICONS = ASSETS / "icons"
DATA = ROOT_DIR / "data"
LOGS = ROOT_DIR / "logs"


def asset_path(*parts: str) -> Path:
    """Palauttaa polun assets-kansioon."""
    return ASSETS.joinpath(*parts)


def data_path(*parts: str) -> Path:
    """Palauttaa polun data-kansioon."""
    return DATA.joinpath(*parts)


def ensure_dirs() -> None:
    """Varmistaa, että logs/ ja data/ ovat olemassa."""
    LOGS.mkdir(parents=True, exist_ok=True)
    DATA.mkdir(parents=True, exist_ok=True)
