from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict

from .grid import Grid
from .heading import Heading


@dataclass(frozen=True)
class Pose:
    """Position and heading of the rover on the grid.

    Attributes
    ----------
    x : int
        Column of the occupied cell.
    y : int
        Row of the occupied cell.
    heading : Heading
        Direction the rover faces.
    """

    x: int
    y: int
    heading: Heading

    def moved(self, grid: Grid) -> "Pose":
        """Pose after one step forward, or ``self`` if the target cell is not valid."""
        dx, dy = self.heading.forward_offset()
        nx, ny = self.x + dx, self.y + dy
        if not grid.is_valid(nx, ny):
            return self
        return replace(self, x=nx, y=ny)

    def turned_left(self) -> "Pose":
        return replace(self, heading=self.heading.rotate_left())

    def turned_right(self) -> "Pose":
        return replace(self, heading=self.heading.rotate_right())

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y, "heading": self.heading.code}


@dataclass(frozen=True)
class StatusReport:
    """Final status of a rover: where it is and whether an obstacle is under it."""

    x: int
    y: int
    heading: Heading
    obstacle_detected: bool

    def message(self) -> str:
        obstacle_msg = "Obstacle detected." if self.obstacle_detected else "No Obstacles detected."
        return f"Rover is at ({self.x}, {self.y}) facing {self.heading.label}. {obstacle_msg}"

    def final_position(self) -> str:
        return f"Final Position: ({self.x}, {self.y}, {self.heading.code})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "heading": self.heading.code,
            "obstacle_detected": self.obstacle_detected,
        }


class Rover:
    """Grid rover driven by discrete move/turn commands.

    The current pose lives in ``state`` and is only ever replaced as a whole, the
    same way a command sequence is folded over poses in :mod:`mars_rover.commands`.
    The starting pose is taken as given: it may lie outside the grid or on an
    obstacle.
    """

    def __init__(self, pose: Pose) -> None:
        self.state = pose

    # ------------------------------------------------------------------
    # State manipulation
    # ------------------------------------------------------------------
    def reset(self, pose: Pose) -> None:
        self.state = pose

    def get_state(self) -> Pose:
        """Return the current pose (immutable, safe to keep)."""
        return self.state

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def apply_move(self, grid: Grid) -> bool:
        """Step one cell forward if the target cell is valid.

        A blocked or off-grid move leaves the pose untouched. Returns whether the
        rover actually moved.
        """
        before = self.state
        self.state = before.moved(grid)
        return self.state != before

    def apply_turn_left(self) -> None:
        self.state = self.state.turned_left()

    def apply_turn_right(self) -> None:
        self.state = self.state.turned_right()

    # ------------------------------------------------------------------
    # Utility
    # ------------------------------------------------------------------
    def status_report(self, grid: Grid) -> StatusReport:
        """Report the current pose and whether the current cell holds an obstacle."""
        s = self.state
        return StatusReport(
            x=s.x,
            y=s.y,
            heading=s.heading,
            obstacle_detected=grid.has_obstacle(s.x, s.y),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize current rover state to a dict for logging/telemetry."""
        return self.state.to_dict()
