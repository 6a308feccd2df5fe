"""Console prompts and output lines for a single rover run."""

from __future__ import annotations

from typing import Callable, List, Optional

from .grid import Grid
from .parsing import (
    InvalidInputError,
    parse_commands,
    parse_dimension,
    parse_heading,
    parse_int,
    parse_obstacle,
)
from .rover import Pose
from .simulation import Mission, SimulationResult

InputFn = Callable[[str], str]


def _asker(input_fn: InputFn) -> InputFn:
    """Wrap ``input_fn`` so a closed input stream counts as invalid input."""

    def ask(prompt: str) -> str:
        try:
            return input_fn(prompt)
        except EOFError:
            raise InvalidInputError("Input ended before the mission was complete") from None

    return ask


def read_mission(input_fn: Optional[InputFn] = None) -> Mission:
    """Prompt for a mission on the console.

    Answers are requested in a fixed order: grid size, starting pose, obstacles,
    then the command string. Any bad answer raises ``InvalidInputError``
    immediately; nothing is re-prompted.
    """
    if input_fn is None:
        input_fn = input
    ask = _asker(input_fn)

    width = parse_dimension(ask("Enter grid width: "), "grid width")
    height = parse_dimension(ask("Enter grid height: "), "grid height")

    start_x = parse_int(ask("Enter starting X: "), "starting X")
    start_y = parse_int(ask("Enter starting Y: "), "starting Y")
    heading = parse_heading(ask("Enter starting direction (N/S/E/W): "))

    count = parse_int(ask("Enter number of obstacles: "), "number of obstacles")
    obstacles = [
        parse_obstacle(ask(f"Enter obstacle {i + 1} (x y): ")) for i in range(max(count, 0))
    ]

    commands = parse_commands(ask("Enter commands (M/L/R without spaces): "))

    return Mission(
        grid=Grid.with_obstacles(width, height, obstacles),
        start=Pose(x=start_x, y=start_y, heading=heading),
        commands=commands,
    )


def format_result(result: SimulationResult) -> List[str]:
    report = result.report
    return [report.final_position(), f"Status Report: {report.message()}"]


def format_grid(grid: Grid) -> List[str]:
    return grid.describe()
