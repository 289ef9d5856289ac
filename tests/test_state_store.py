# tests/test_state_store.py
from __future__ import annotations

import json
import math

import pytest

import src.state_store as ss
from src.config import DEFAULT_LAT, DEFAULT_LON
from src.models import Coordinate, PersistedObservation, Theme


@pytest.fixture(autouse=True)
def _quiet_report_error(monkeypatch):
    monkeypatch.setattr(ss, "report_error", lambda ctx, e: None)


def test_defaults_when_file_missing(tmp_path):
    store = ss.JsonFileStateStore(tmp_path / "prefs.json")

    assert store.read_coordinate() == Coordinate(DEFAULT_LAT, DEFAULT_LON)
    assert store.read_theme() is Theme.MALAYALAM
    obs = store.read_observation()
    assert obs.last_condition == "Unknown"
    assert math.isnan(obs.last_temperature_c)
    assert not obs.has_temperature


def test_observation_written_as_one_record(tmp_path):
    path = tmp_path / "prefs.json"
    store = ss.JsonFileStateStore(path)

    store.write_observation(PersistedObservation("Rain", 15.6))

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert raw == {"last_condition": "Rain", "last_temp": 15.6}
    assert store.read_observation() == PersistedObservation("Rain", 15.6)


def test_unset_temperature_is_stored_as_null(tmp_path):
    path = tmp_path / "prefs.json"
    store = ss.JsonFileStateStore(path)

    store.write_observation(PersistedObservation("Clear", math.nan))

    assert json.loads(path.read_text(encoding="utf-8"))["last_temp"] is None
    assert math.isnan(store.read_observation().last_temperature_c)


def test_writes_keep_other_keys(tmp_path):
    store = ss.JsonFileStateStore(tmp_path / "prefs.json")
    store.write_coordinate(Coordinate(60.17, 24.94))
    store.write_theme(Theme.TRANSPARENT)
    store.write_observation(PersistedObservation("Snow", -3.0))

    assert store.read_coordinate() == Coordinate(60.17, 24.94)
    assert store.read_theme() is Theme.TRANSPARENT
    assert store.snapshot() == {
        "lat": 60.17,
        "lon": 24.94,
        "theme": "transparent",
        "last_condition": "Snow",
        "last_temp": -3.0,
    }


def test_state_survives_new_instance(tmp_path):
    path = tmp_path / "prefs.json"
    ss.JsonFileStateStore(path).write_theme(Theme.BLACK_WHITE)

    assert ss.JsonFileStateStore(path).read_theme() is Theme.BLACK_WHITE


def test_unknown_theme_value_falls_back_to_default(tmp_path):
    path = tmp_path / "prefs.json"
    path.write_text(json.dumps({"theme": "neon"}), encoding="utf-8")

    assert ss.JsonFileStateStore(path).read_theme() is Theme.MALAYALAM


def test_corrupt_file_reads_as_defaults(tmp_path):
    path = tmp_path / "prefs.json"
    path.write_text("{not json", encoding="utf-8")
    store = ss.JsonFileStateStore(path)

    assert store.read_observation().last_condition == "Unknown"
    assert store.read_coordinate() == Coordinate(DEFAULT_LAT, DEFAULT_LON)


def test_non_object_file_reads_as_defaults(tmp_path):
    path = tmp_path / "prefs.json"
    path.write_text("[1, 2]", encoding="utf-8")

    assert ss.JsonFileStateStore(path).read_theme() is Theme.MALAYALAM


def test_write_failure_raises_state_store_error_and_keeps_file(tmp_path, monkeypatch):
    path = tmp_path / "prefs.json"
    store = ss.JsonFileStateStore(path)
    store.write_observation(PersistedObservation("Clear", 20.0))

    def broken_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(ss.os, "replace", broken_replace)

    with pytest.raises(ss.StateStoreError):
        store.write_observation(PersistedObservation("Rain", 10.0))

    # vanha havainto säilyy ehjänä, eikä temp-tiedostoja jää
    assert store.read_observation() == PersistedObservation("Clear", 20.0)
    assert [p.name for p in tmp_path.iterdir()] == ["prefs.json"]


def test_in_memory_store_counts_writes():
    store = ss.InMemoryStateStore({"last_condition": "Clear", "last_temp": 20.0})

    assert store.read_observation() == PersistedObservation("Clear", 20.0)
    assert store.writes == 0

    store.write_observation(PersistedObservation("Clouds", 19.0))
    assert store.writes == 1
    assert store.read_observation() == PersistedObservation("Clouds", 19.0)


def test_lock_is_reentrant():
    store = ss.InMemoryStateStore()
    with store.lock():
        with store.lock():
            store.write_theme(Theme.BLACK_WHITE)
    assert store.read_theme() is Theme.BLACK_WHITE


def test_base_store_requires_load_and_save():
    with pytest.raises(TypeError):
        ss._BaseStateStore()  # type: ignore[abstract]
