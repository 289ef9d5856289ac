# tests/test_weather_utils.py
from __future__ import annotations

import math

import src.api.weather_utils as wu


def test_as_int_accepts_only_whole_numbers():
    assert wu.as_int(61) == 61
    assert wu.as_int(61.0) == 61
    assert wu.as_int("95") == 95
    # ei pyöristetä: 61.5 ei ole sääkoodi
    assert wu.as_int(61.5) is None
    assert wu.as_int("abc") is None
    assert wu.as_int(None) is None
    assert wu.as_int(True) is None
    assert wu.as_int(math.nan) is None


def test_as_float_variants():
    assert wu.as_float(10) == 10.0
    assert wu.as_float("10.5") == 10.5
    assert wu.as_float("12,5") == 12.5
    assert wu.as_float("warm") is None
    assert wu.as_float(None) is None
    assert wu.as_float(False) is None


def test_safe_cast_str_and_other():
    assert wu.safe_cast(12, str) == "12"
    assert wu.safe_cast("x", list) == ["x"]
    assert wu.safe_cast(None, str) is None
