from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Iterable

from .grid import Grid
from .rover import Pose, Rover


class Command(str, Enum):
    """Single rover instruction, valued by its one-character code."""

    MOVE = "M"
    TURN_LEFT = "L"
    TURN_RIGHT = "R"


_TRANSITIONS: Dict[Command, Callable[[Pose, Grid], Pose]] = {
    Command.MOVE: lambda pose, grid: pose.moved(grid),
    Command.TURN_LEFT: lambda pose, grid: pose.turned_left(),
    Command.TURN_RIGHT: lambda pose, grid: pose.turned_right(),
}


def apply_command(pose: Pose, command: Command, grid: Grid) -> Pose:
    """Pose that results from applying ``command`` to ``pose`` on ``grid``."""
    return _TRANSITIONS[command](pose, grid)


def run_commands(pose: Pose, commands: Iterable[Command], grid: Grid) -> Pose:
    """Fold a command sequence over a starting pose, strictly left to right."""
    for command in commands:
        pose = apply_command(pose, command, grid)
    return pose


def execute(rover: Rover, command: Command, grid: Grid) -> bool:
    """Apply ``command`` to ``rover`` in place.

    The rover takes the pose given by :func:`apply_command`. Returns False only
    when a move was rejected (blocked or off-grid).
    """
    before = rover.get_state()
    rover.reset(apply_command(before, command, grid))
    return command is not Command.MOVE or rover.get_state() != before
