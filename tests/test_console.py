from __future__ import annotations

from typing import Iterator, List

import pytest

from mars_rover.console import format_grid, format_result, read_mission
from mars_rover.heading import Heading
from mars_rover.parsing import InvalidInputError
from mars_rover.rover import Pose
from mars_rover.simulation import run_mission


def scripted(answers: List[str], prompts: List[str]):
    it: Iterator[str] = iter(answers)

    def _input(prompt: str) -> str:
        prompts.append(prompt)
        return next(it)

    return _input


def test_read_mission_prompts_in_order() -> None:
    prompts: List[str] = []
    answers = ["5", "5", "0", "0", "n", "2", "2 2", "9 9", "mmrmm"]
    mission = read_mission(scripted(answers, prompts))

    assert prompts == [
        "Enter grid width: ",
        "Enter grid height: ",
        "Enter starting X: ",
        "Enter starting Y: ",
        "Enter starting direction (N/S/E/W): ",
        "Enter number of obstacles: ",
        "Enter obstacle 1 (x y): ",
        "Enter obstacle 2 (x y): ",
        "Enter commands (M/L/R without spaces): ",
    ]
    assert mission.start == Pose(0, 0, Heading.NORTH)
    assert mission.grid.obstacles == frozenset({(2, 2), (9, 9)})
    assert len(mission.commands) == 5


def test_bad_direction_stops_before_obstacles() -> None:
    prompts: List[str] = []
    with pytest.raises(InvalidInputError, match="Invalid direction"):
        read_mission(scripted(["5", "5", "0", "0", "Q"], prompts))
    assert prompts[-1] == "Enter starting direction (N/S/E/W): "


def test_bad_command_is_rejected() -> None:
    with pytest.raises(InvalidInputError, match="Invalid command"):
        read_mission(scripted(["3", "3", "1", "1", "E", "0", "MXM"], []))


def test_format_result_lines() -> None:
    mission = read_mission(scripted(["5", "5", "0", "0", "N", "1", "0 1", "M"], []))
    lines = format_result(run_mission(mission))
    assert lines == [
        "Final Position: (0, 0, N)",
        "Status Report: Rover is at (0, 0) facing North. No Obstacles detected.",
    ]


def test_format_grid() -> None:
    mission = read_mission(scripted(["3", "2", "0", "0", "S", "1", "1 1", ""], []))
    assert format_grid(mission.grid) == ["Grid: 3 x 2", "Obstacle at (1, 1)"]


def test_closed_input_is_invalid_input() -> None:
    def closed(prompt: str) -> str:
        raise EOFError

    with pytest.raises(InvalidInputError, match="Input ended"):
        read_mission(closed)
