# tests/test_cache.py
"""
Tests for single-slot identity memoization of the geometry functions.
"""

from __future__ import annotations

from speedometer.core.arcs import arcs_for
from speedometer.core.cache import memoize_one
from speedometer.core.labels import label_slots
from speedometer.core.scale import build_tick_data
from speedometer.core.types import GaugeConfig


def test_same_config_object_returns_same_result_object() -> None:
    config = GaugeConfig(segments=6)
    assert build_tick_data(config) is build_tick_data(config)
    assert arcs_for(config) is arcs_for(config)
    assert label_slots(config) is label_slots(config)


def test_equal_but_distinct_config_recomputes() -> None:
    first = arcs_for(GaugeConfig(segments=6))
    second = arcs_for(GaugeConfig(segments=6))
    assert first == second
    assert first is not second


def test_memoize_one_keeps_a_single_slot() -> None:
    calls = []

    @memoize_one
    def double(x: object) -> list:
        calls.append(x)
        return [x, x]

    a, b = object(), object()
    ra = double(a)
    assert double(a) is ra
    double(b)
    assert double(a) is not ra
    assert calls == [a, b, a]
    info = double.cache_info()
    assert (info.hits, info.misses) == (1, 3)


def test_memoize_one_distinguishes_keyword_arguments() -> None:
    calls = []

    @memoize_one
    def pair(x: object, y: object = None) -> tuple:
        calls.append((x, y))
        return (x, y)

    a = object()
    pair(a)
    pair(a, y=a)
    pair(a, y=a)
    assert len(calls) == 2


def test_cache_clear_forces_recompute() -> None:
    calls = []

    @memoize_one
    def ident(x: object) -> object:
        calls.append(x)
        return x

    a = object()
    ident(a)
    ident.cache_clear()
    ident(a)
    assert len(calls) == 2
    assert ident.cache_info().misses == 1
