from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Tuple

from .commands import Command, execute
from .grid import Grid
from .rover import Pose, Rover, StatusReport


class StepLogger(Protocol):
    def log_step(self, record: Dict[str, Any]) -> None: ...


@dataclass(frozen=True)
class Mission:
    """Validated input for one run: grid, starting pose and command sequence."""

    grid: Grid
    start: Pose
    commands: Tuple[Command, ...] = ()
    name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "grid": {"width": self.grid.width, "height": self.grid.height},
            "obstacles": self.grid.to_dict()["obstacles"],
            "start": self.start.to_dict(),
            "commands": "".join(c.value for c in self.commands),
        }


@dataclass(frozen=True)
class StepRecord:
    """Pose after a single command, and whether the command took effect."""

    index: int
    command: Command
    pose: Pose
    accepted: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step": self.index,
            "command": self.command.value,
            "x": self.pose.x,
            "y": self.pose.y,
            "heading": self.pose.heading.code,
            "accepted": self.accepted,
        }


@dataclass
class SimulationResult:
    """Outcome of a run."""

    start_pose: Pose
    final_pose: Pose
    report: StatusReport
    steps: List[StepRecord] = field(default_factory=list)

    @property
    def blocked_moves(self) -> int:
        return sum(1 for s in self.steps if s.command is Command.MOVE and not s.accepted)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start": self.start_pose.to_dict(),
            "final": self.final_pose.to_dict(),
            "report": self.report.to_dict(),
            "blocked_moves": self.blocked_moves,
            "steps": [s.to_dict() for s in self.steps],
        }


def run_mission(mission: Mission, logger: Optional[StepLogger] = None) -> SimulationResult:
    """Apply every command of ``mission`` in order and report the final status.

    A move onto an obstacle or off the grid is skipped and the run continues.
    When ``logger`` is given, one record per command is passed to
    ``logger.log_step``.
    """
    grid = mission.grid
    rover = Rover(mission.start)
    steps: List[StepRecord] = []

    for i, command in enumerate(mission.commands):
        accepted = execute(rover, command, grid)
        record = StepRecord(index=i, command=command, pose=rover.get_state(), accepted=accepted)
        steps.append(record)
        if logger is not None:
            logger.log_step(record.to_dict())

    return SimulationResult(
        start_pose=mission.start,
        final_pose=rover.get_state(),
        report=rover.status_report(grid),
        steps=steps,
    )
