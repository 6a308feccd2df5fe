"""
Input validation for rover missions.

Turns raw text (console answers) or a mission dict (loaded from YAML) into a
validated :class:`~mars_rover.simulation.Mission`. Everything that can go wrong
with user input is raised here as :class:`InvalidInputError`; the simulation
core never sees a bad heading or command code.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

import yaml

from .commands import Command
from .grid import Cell, Grid
from .heading import Heading
from .rover import Pose
from .simulation import Mission


class InvalidInputError(ValueError):
    """Raised when mission input cannot be turned into a valid run."""


def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


# ---------------------------------------------------------------------------
# Scalar parsers
# ---------------------------------------------------------------------------


def parse_int(text: Any, field: str) -> int:
    """Parse an integer from text or an int, rejecting bools and floats."""
    if isinstance(text, bool):
        raise InvalidInputError(f"Invalid {field}: {text!r}")
    if isinstance(text, int):
        return text
    try:
        return int(str(text).strip())
    except ValueError:
        raise InvalidInputError(f"Invalid {field}: {text!r}") from None


def parse_dimension(text: Any, field: str) -> int:
    """Parse a strictly positive grid dimension."""
    value = parse_int(text, field)
    if value <= 0:
        raise InvalidInputError(f"Invalid {field}: must be positive, got {value}")
    return value


def parse_heading(code: Any) -> Heading:
    """Parse a one-letter heading code (N/S/E/W), case-insensitive."""
    try:
        return Heading(str(code).strip().upper())
    except ValueError:
        raise InvalidInputError("Invalid direction") from None


def parse_commands(text: Any) -> Tuple[Command, ...]:
    """Parse a command string such as ``"MMRMM"`` into a tuple of commands."""
    if text is None:
        return ()
    commands: List[Command] = []
    for ch in str(text).strip().upper():
        try:
            commands.append(Command(ch))
        except ValueError:
            raise InvalidInputError("Invalid command") from None
    return tuple(commands)


def parse_obstacle(value: Any) -> Cell:
    """Parse an obstacle cell from ``"x y"`` text or an ``[x, y]`` pair.

    Anything after the first two tokens is ignored.
    """
    parts = str(value).split() if isinstance(value, str) else value
    try:
        x, y = list(parts)[:2]
    except (TypeError, ValueError):
        raise InvalidInputError(f"Invalid obstacle: {value!r}") from None
    return parse_int(x, "obstacle x"), parse_int(y, "obstacle y")


# ---------------------------------------------------------------------------
# Mission loading
# ---------------------------------------------------------------------------


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    section = data.get(key)
    if not isinstance(section, dict):
        raise InvalidInputError(f"Mission is missing the '{key}' section")
    return section


def _field(section: Dict[str, Any], key: str, where: str) -> Any:
    if key not in section:
        raise InvalidInputError(f"Mission '{where}' is missing '{key}'")
    return section[key]


def mission_from_dict(data: Dict[str, Any]) -> Mission:
    """Build a mission from a dict with grid, obstacles, start and commands."""
    if not isinstance(data, dict):
        raise InvalidInputError("Mission must be a mapping")

    grid_cfg = _section(data, "grid")
    start_cfg = _section(data, "start")

    obstacles_data = data.get("obstacles") or []
    if not isinstance(obstacles_data, list):
        raise InvalidInputError("Mission 'obstacles' must be a list")

    grid = Grid.with_obstacles(
        width=parse_dimension(_field(grid_cfg, "width", "grid"), "grid width"),
        height=parse_dimension(_field(grid_cfg, "height", "grid"), "grid height"),
        obstacles=[parse_obstacle(o) for o in obstacles_data],
    )
    start = Pose(
        x=parse_int(_field(start_cfg, "x", "start"), "starting X"),
        y=parse_int(_field(start_cfg, "y", "start"), "starting Y"),
        heading=parse_heading(_field(start_cfg, "heading", "start")),
    )
    name = data.get("name")
    return Mission(
        grid=grid,
        start=start,
        commands=parse_commands(data.get("commands")),
        name=str(name) if name is not None else None,
    )


def load_mission(path: str) -> Mission:
    """Load a mission from a YAML file.

    An unreadable file or malformed YAML is reported as ``InvalidInputError``.
    """
    try:
        data = load_yaml(path)
    except (OSError, yaml.YAMLError) as exc:
        raise InvalidInputError(f"Cannot read mission {path}: {exc}") from exc
    return mission_from_dict(data)
