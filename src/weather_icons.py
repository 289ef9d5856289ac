# weather_icons.py
from __future__ import annotations

import base64
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Final, Protocol

from src.models import Theme
from src.paths import ICONS, ROOT_DIR

# säätila (pienillä) → ikonin perusnimi
_BASE_BY_CONDITION: Final[dict[str, str]] = {
    "clear": "weather_clear",
    "clouds": "weather_clouds",
    "rain": "weather_rain",
    "snow": "weather_snow",
    "thunderstorm": "weather_thunder",
    "drizzle": "weather_drizzle",
    "fog": "weather_fog",
    "mist": "weather_mist",
}
_UNKNOWN_BASE: Final[str] = "weather_unknown"

_SUFFIX_BY_THEME: Final[dict[Theme, str]] = {
    Theme.BLACK_WHITE: "_bw",
    Theme.TRANSPARENT: "_tr",
}
# oletusteeman setti on ainoa, jonka oletetaan olevan täydellinen
DEFAULT_SUFFIX: Final[str] = "_ml"

ICON_EXTENSIONS: Final[tuple[str, ...]] = (".svg", ".png")

SEARCH_DIRS = [
    ICONS,
    ROOT_DIR / "icons",
    Path.cwd() / "assets" / "icons",
    Path(__file__).parent / "icons",
]

# Poistetaan duplikaatit säilyttäen järjestys
_seen: set[str] = set()
SEARCH_DIRS = [p for p in SEARCH_DIRS if not (str(p) in _seen or _seen.add(str(p)))]


class IconRegistry(Protocol):
    def lookup(self, name: str) -> str | None:
        """Nimi → ikonin tunniste, tai None jos ikonia ei ole."""
        ...


class DictIconRegistry:
    """Muistinvarainen rekisteri: {"weather_rain_ml": "<id>", ...}."""

    def __init__(self, icons: Mapping[str, str] | Iterable[str]) -> None:
        if isinstance(icons, Mapping):
            self._icons = dict(icons)
        else:
            self._icons = {name: name for name in icons}

    def lookup(self, name: str) -> str | None:
        return self._icons.get(name)


class AssetIconRegistry:
    """Etsii <nimi>.svg / <nimi>.png useista hakemistoista. Palauttaa tiedoston polun."""

    def __init__(self, search_dirs: Iterable[Path] | None = None) -> None:
        self._search_dirs = list(search_dirs) if search_dirs is not None else None
        self._cache: dict[str, Path] = {}

    @property
    def search_dirs(self) -> list[Path]:
        return self._search_dirs if self._search_dirs is not None else SEARCH_DIRS

    def lookup(self, name: str) -> str | None:
        # 1) cache
        p = self._cache.get(name)
        if p and p.exists():
            return str(p)
        # 2) etsi hakemistoista
        for root in self.search_dirs:
            for ext in ICON_EXTENSIONS:
                p = root / f"{name}{ext}"
                if p.exists():
                    self._cache[name] = p
                    return str(p)
        return None

    def clear_cache(self) -> None:
        self._cache.clear()


def base_icon_name(condition: str) -> str:
    return _BASE_BY_CONDITION.get(condition.strip().lower(), _UNKNOWN_BASE)


def theme_suffix(theme: Theme) -> str:
    return _SUFFIX_BY_THEME.get(theme, DEFAULT_SUFFIX)


def resolve_icon(condition: str, theme: Theme, registry: IconRegistry) -> str | None:
    """
    Säätila + teema → ikonin tunniste.

    1) teeman oma variantti (esim. weather_rain_bw)
    2) oletusteeman variantti samalle säätilalle (weather_rain_ml)
    3) None – kutsuja piirtää placeholderin, ei kaadu
    """
    base = base_icon_name(condition)
    icon_id = registry.lookup(base + theme_suffix(theme))
    if icon_id is not None:
        return icon_id
    return registry.lookup(base + DEFAULT_SUFFIX)


def icon_data_uri(icon_id: str) -> str:
    path = Path(icon_id)
    b64 = base64.b64encode(path.read_bytes()).decode("ascii")
    mime = "image/svg+xml" if path.suffix.lower() == ".svg" else "image/png"
    return f"data:{mime};base64,{b64}"


def _placeholder_html(size: int, title: str = "") -> str:
    title_attr = f' title="{title}"' if title else ""
    return (
        f"<span{title_attr} "
        f'style="display:inline-block;width:{size}px;height:{size}px;'
        f"background:#eee;border-radius:8px;text-align:center;line-height:{size}px;"
        f'color:#888;">?</span>'
    )


def render_icon_html(icon_id: str | None, size: int = 48, alt: str = "") -> str:
    """
    icon_id = resolve_icon():n palauttama polku tai None. Palauttaa <img>-HTML:n.
    """
    if icon_id is None:
        return _placeholder_html(size, "no icon")
    try:
        uri = icon_data_uri(icon_id)
    except OSError:
        return _placeholder_html(size, f"not found: {Path(icon_id).name}")
    return (
        f'<img src="{uri}" width="{size}" height="{size}" alt="{alt}" '
        f'style="vertical-align:middle;" />'
    )
