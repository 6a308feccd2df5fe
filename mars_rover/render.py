from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple

import pygame

from .grid import Grid
from .rover import Pose


THEME = {
    "bg": (18, 22, 32),
    "grid": (28, 34, 48),
    "cell": (24, 29, 42),
    "obstacle_fill": (45, 52, 70),
    "obstacle_edge": (65, 75, 98),
    "obstacle_highlight": (85, 95, 120),
    "rover_fill": (100, 220, 255),
    "rover_outline": (40, 140, 200),
    "rover_blocked": (255, 90, 90),
    "trail_start": (60, 160, 200),
    "trail_end": (100, 220, 255),
    "hud_bg": (28, 34, 48),
    "hud_border": (55, 65, 88),
    "hud_text": (200, 220, 255),
}


@dataclass
class RenderConfig:
    window_width: int = 640
    window_height: int = 640
    fps: int = 4
    show_trail: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RenderConfig":
        return cls(
            window_width=int(data.get("window_width", cls.window_width)),
            window_height=int(data.get("window_height", cls.window_height)),
            fps=int(data.get("fps", cls.fps)),
            show_trail=bool(data.get("show_trail", cls.show_trail)),
        )


class GridRenderer:
    """Top-down view of the grid, its obstacles and the rover.

    Coordinates:
    - Cell (0, 0) is drawn at the bottom-left of the window.
    - Y axis is flipped so that grid +y is up while screen y increases downward.
    """

    def __init__(self, grid: Grid, config: RenderConfig) -> None:
        pygame.init()
        pygame.display.set_caption("Mars Rover")
        self.screen = pygame.display.set_mode((config.window_width, config.window_height))
        self.clock = pygame.time.Clock()

        self.grid = grid
        self.cfg = config
        self.trail: List[Tuple[int, int]] = []

        # Pixels per cell
        self.cell_w = config.window_width / grid.width
        self.cell_h = config.window_height / grid.height

    # ------------------------------------------------------------------
    # Coordinate transforms
    # ------------------------------------------------------------------
    def cell_rect(self, x: int, y: int) -> pygame.Rect:
        """Screen rectangle covering grid cell (x, y)."""
        left = int(x * self.cell_w)
        top = int(self.cfg.window_height - (y + 1) * self.cell_h)
        return pygame.Rect(left, top, int(self.cell_w), int(self.cell_h))

    def cell_center(self, x: int, y: int) -> Tuple[int, int]:
        return self.cell_rect(x, y).center

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def _draw_grid(self) -> None:
        for x in range(self.grid.width):
            for y in range(self.grid.height):
                rect = self.cell_rect(x, y)
                pygame.draw.rect(self.screen, THEME["cell"], rect)
                pygame.draw.rect(self.screen, THEME["grid"], rect, 1)

    def _draw_obstacles(self) -> None:
        for x, y in self.grid.obstacles:
            if not self.grid.is_inside(x, y):
                continue
            rect = self.cell_rect(x, y).inflate(-4, -4)
            pygame.draw.rect(self.screen, THEME["obstacle_fill"], rect)
            pygame.draw.rect(self.screen, THEME["obstacle_edge"], rect, 2)
            pygame.draw.line(self.screen, THEME["obstacle_highlight"], rect.topleft, rect.topright, 1)
            pygame.draw.line(self.screen, THEME["obstacle_highlight"], rect.topleft, rect.bottomleft, 1)

    def _draw_trail(self) -> None:
        if len(self.trail) < 2:
            return
        pts = [self.cell_center(x, y) for x, y in self.trail]
        n = len(pts) - 1
        start, end = THEME["trail_start"], THEME["trail_end"]
        for i in range(n):
            t = (i + 1) / n
            color = (
                int(start[0] + t * (end[0] - start[0])),
                int(start[1] + t * (end[1] - start[1])),
                int(start[2] + t * (end[2] - start[2])),
            )
            pygame.draw.line(self.screen, color, pts[i], pts[i + 1], 2 if i == n - 1 else 1)

    def _draw_rover(self, pose: Pose, blocked: bool) -> None:
        rect = self.cell_rect(pose.x, pose.y)
        cx, cy = rect.center
        half_w = rect.width * 0.35
        half_h = rect.height * 0.35
        dx, dy = pose.heading.forward_offset()
        # Triangle pointing along the heading; screen y is flipped
        tip = (cx + dx * half_w, cy - dy * half_h)
        left = (cx - dx * half_w - dy * half_w, cy + dy * half_h - dx * half_h)
        right = (cx - dx * half_w + dy * half_w, cy + dy * half_h + dx * half_h)
        fill = THEME["rover_blocked"] if blocked else THEME["rover_fill"]
        pygame.draw.polygon(self.screen, fill, [tip, left, right])
        pygame.draw.polygon(self.screen, THEME["rover_outline"], [tip, left, right], 2)

    def _draw_hud(self, text: str) -> None:
        pad = 10
        font = pygame.font.SysFont("monospace", 13)
        surf = font.render(f"  {text}  ", True, THEME["hud_text"])
        panel = surf.get_rect(topleft=(pad, pad)).inflate(pad, pad)
        pygame.draw.rect(self.screen, THEME["hud_bg"], panel)
        pygame.draw.rect(self.screen, THEME["hud_border"], panel, 1)
        self.screen.blit(surf, (panel.x + 4, panel.y + 4))

    def draw(self, pose: Pose, status: str = "", blocked: bool = False) -> None:
        """Render one frame."""
        self.screen.fill(THEME["bg"])
        self._draw_grid()
        self._draw_obstacles()

        if self.cfg.show_trail:
            if not self.trail or self.trail[-1] != (pose.x, pose.y):
                self.trail.append((pose.x, pose.y))
            self._draw_trail()

        self._draw_rover(pose, blocked)
        if status:
            self._draw_hud(status)
        pygame.display.flip()

    def play(self, poses: Sequence[Pose], blocked: Sequence[bool], status: str = "") -> None:
        """Draw each pose in turn at the configured frame rate.

        Stops early when the window is closed.
        """
        for i, pose in enumerate(poses):
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
            last = i == len(poses) - 1
            self.draw(pose, status=status if last else f"step {i}", blocked=blocked[i])
            self.clock.tick(self.cfg.fps)

    def close(self) -> None:
        pygame.quit()
