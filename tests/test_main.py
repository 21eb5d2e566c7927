import pytest

pytest.importorskip("pygame")

import main  # noqa: E402
import pygame  # noqa: E402

from constants import BACKGROUND, CLOTH_COLOR, FOCUS_COLOR, PIN_COLOR  # noqa: E402
from tearcloth.cloth import Cloth  # noqa: E402


def test_cloth_anchor_centers_horizontally():
    assert main.cloth_anchor(1024, 640, 1000) == (12, 128)


def test_resize_offset():
    assert main.resize_offset((1024, 640), (1224, 740)) == (100.0, 25.0)


def test_make_cloth_covers_window_width():
    cloth = main.make_cloth(1024, 640)
    assert cloth.width == 1024
    assert cloth.height == int(640 * 0.33)
    assert not cloth.initialized


def test_parse_args_defaults():
    args = main.parse_args([])
    assert args.cpuprofile == ""
    assert not args.no_gui
    assert args.log_level == "WARNING"


def drawn(cloth):
    screen = pygame.Surface((40, 40))
    screen.fill(BACKGROUND)
    main.draw_cloth(screen, cloth)
    return screen


def test_draw_cloth_lines_and_pins():
    cloth = Cloth(12, 6, 6)
    cloth.init(10, 20)

    screen = drawn(cloth)
    assert tuple(screen.get_at((13, 20)))[:3] == CLOTH_COLOR
    assert tuple(screen.get_at((10, 24)))[:3] == CLOTH_COLOR
    assert tuple(screen.get_at((10, 20)))[:3] == PIN_COLOR
    assert tuple(screen.get_at((30, 35)))[:3] == BACKGROUND


def test_draw_cloth_focused_lines_and_torn_gaps():
    cloth = Cloth(12, 6, 6)
    cloth.init(10, 20)
    for c in cloth.constraints:
        c.selected = True
    cloth.particles[4].active = False

    screen = drawn(cloth)
    assert tuple(screen.get_at((13, 20)))[:3] == FOCUS_COLOR
    # particle 4 sits at (16, 26); its links are gone
    assert tuple(screen.get_at((13, 26)))[:3] == BACKGROUND
    assert tuple(screen.get_at((16, 23)))[:3] == BACKGROUND
