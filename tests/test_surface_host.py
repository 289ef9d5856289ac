# tests/test_surface_host.py
from __future__ import annotations

import pytest

from src.models import LayoutVariant, RenderInstruction, SurfaceDescriptor
from src.surface_host import SurfaceHost

INSTR = RenderInstruction(LayoutVariant.COMPACT, "ml/rain", None)


def test_add_and_list_surfaces():
    host = SurfaceHost()
    host.add_surface(SurfaceDescriptor("a", 180))
    host.add_surface(SurfaceDescriptor("b", 320))

    assert [s.surface_id for s in host.surfaces()] == ["a", "b"]


def test_update_surface_keeps_latest_instruction():
    host = SurfaceHost()
    host.add_surface(SurfaceDescriptor("a", 180))

    host.update_surface("a", INSTR)

    assert host.instruction_for("a") == INSTR
    assert host.instruction_for("missing") is None


def test_update_for_unknown_surface_is_ignored():
    host = SurfaceHost()
    host.update_surface("ghost", INSTR)
    assert host.instruction_for("ghost") is None


def test_listeners_fire_on_add_and_resize():
    host = SurfaceHost()
    added: list[SurfaceDescriptor] = []
    resized: list[SurfaceDescriptor] = []
    host.on_surface_added(added.append)
    host.on_surface_resized(resized.append)

    host.add_surface(SurfaceDescriptor("a", 180))
    host.resize_surface("a", 320)
    # sama id uudelleen = koonmuutos, ei uusi pinta
    host.add_surface(SurfaceDescriptor("a", 200))

    assert added == [SurfaceDescriptor("a", 180)]
    assert resized == [SurfaceDescriptor("a", 320), SurfaceDescriptor("a", 200)]
    assert host.surfaces() == [SurfaceDescriptor("a", 200)]


def test_failing_listener_does_not_break_host():
    host = SurfaceHost()

    def boom(surface):
        raise RuntimeError("listener failed")

    host.on_surface_added(boom)
    host.add_surface(SurfaceDescriptor("a", 180))

    assert host.surfaces() == [SurfaceDescriptor("a", 180)]


def test_resize_unknown_surface_raises():
    with pytest.raises(KeyError):
        SurfaceHost().resize_surface("nope", 300)


def test_remove_surface_drops_instruction():
    host = SurfaceHost()
    host.add_surface(SurfaceDescriptor("a", 180))
    host.update_surface("a", INSTR)

    host.remove_surface("a")

    assert host.surfaces() == []
    assert host.instruction_for("a") is None
