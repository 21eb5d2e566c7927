import logging

import pytest

import constants
from tearcloth.tunables import Tunables, slider_defaults


def test_defaults_follow_slider_table():
    t = Tunables.defaults()
    assert t.drag_force == constants.SLIDERS['drag_force'][2]
    assert t.max_drag_force == constants.SLIDERS['drag_force'][3]
    assert t.gravity == 250.0
    assert t.friction == 0.98
    assert t.min_focus_area == constants.MIN_FOCUS_AREA
    assert t.max_focus_area == constants.MAX_FOCUS_AREA


def test_from_shared_reads_every_frame_values():
    shared = slider_defaults()
    shared['gravity'] = 400
    shared['tear_distance'] = "22.5"

    t = Tunables.from_shared(shared)
    assert t.gravity == 400.0
    assert t.tear_distance == 22.5


def test_from_shared_falls_back(caplog):
    fallback = Tunables.defaults()._replace(elasticity=12.0)
    with caplog.at_level(logging.WARNING, logger="tearcloth.tunables"):
        t = Tunables.from_shared({'gravity': 'heavy', 'friction': None}, fallback)

    assert t.gravity == fallback.gravity
    assert t.friction == fallback.friction
    assert t.elasticity == 12.0
    assert "gravity" in caplog.text


def test_snapshot_is_immutable():
    t = Tunables.defaults()
    with pytest.raises(AttributeError):
        t.gravity = 0.0


@pytest.mark.parametrize("requested,expected", [(10, 30.0), (50, 50), (500, 120.0)])
def test_focus_radius_clamp(requested, expected):
    assert Tunables.defaults().focus_radius(requested) == expected
