"""
Top-level package for the grid rover simulator.

Components:
- grid: bounded grid and obstacle cells
- heading: compass headings, rotation and forward offsets
- rover: pose, status report and the mutable rover
- commands: move/turn commands and the pose transition fold
- simulation: mission bundle and run driver
- parsing: input validation (console text, YAML missions)
- console: interactive prompts and output lines
- render: pygame-based playback (imported on demand)
"""

from .grid import Grid
from .heading import Heading
from .rover import Pose, Rover, StatusReport
from .commands import Command, apply_command, execute, run_commands
from .simulation import Mission, SimulationResult, StepRecord, run_mission
from .parsing import InvalidInputError, load_mission, mission_from_dict

__all__ = [
    "Grid",
    "Heading",
    "Pose",
    "Rover",
    "StatusReport",
    "Command",
    "apply_command",
    "execute",
    "run_commands",
    "Mission",
    "SimulationResult",
    "StepRecord",
    "run_mission",
    "InvalidInputError",
    "load_mission",
    "mission_from_dict",
]
