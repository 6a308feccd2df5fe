from __future__ import annotations

import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
pygame = pytest.importorskip("pygame")

from mars_rover.grid import Grid
from mars_rover.heading import Heading
from mars_rover.render import GridRenderer, RenderConfig
from mars_rover.rover import Pose


def test_render_config_from_dict() -> None:
    cfg = RenderConfig.from_dict({"window_width": 300, "fps": 10})
    assert cfg.window_width == 300
    assert cfg.window_height == 640
    assert cfg.fps == 10
    assert cfg.show_trail


def test_cell_rect_flips_y() -> None:
    grid = Grid.with_obstacles(4, 2, [(1, 1), (8, 8)])
    renderer = GridRenderer(grid, RenderConfig(window_width=400, window_height=200, fps=60))
    try:
        assert renderer.cell_rect(0, 0) == pygame.Rect(0, 100, 100, 100)
        assert renderer.cell_rect(3, 1) == pygame.Rect(300, 0, 100, 100)

        poses = [Pose(0, 0, Heading.NORTH), Pose(0, 1, Heading.NORTH), Pose(0, 1, Heading.EAST)]
        renderer.play(poses, [False, False, True], status="done")
        assert renderer.trail == [(0, 0), (0, 1)]
    finally:
        renderer.close()
