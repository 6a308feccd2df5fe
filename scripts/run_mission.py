from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

# Ensure project root is on path when running this script directly
_script_dir = Path(__file__).resolve().parent
_project_root = _script_dir.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from mars_rover.console import format_grid, format_result, read_mission
from mars_rover.parsing import InvalidInputError, load_mission, load_yaml, parse_commands
from mars_rover.simulation import Mission, SimulationResult, run_mission
from telemetry.logger import TelemetryLogger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a grid rover mission.")
    parser.add_argument(
        "--mission",
        type=str,
        default=None,
        help="Path to a mission YAML file. Prompts on the console when omitted.",
    )
    parser.add_argument(
        "--commands",
        type=str,
        default=None,
        help="Command string (M/L/R) overriding the mission's commands.",
    )
    parser.add_argument(
        "--config",
        type=str,
        default="configs/sim.yaml",
        help="Path to sim YAML config (render and telemetry settings).",
    )
    parser.add_argument(
        "--telemetry",
        type=str,
        nargs="?",
        const="",
        default=None,
        help="Write a JSONL trace of every command (optional path).",
    )
    parser.add_argument("--show-grid", action="store_true", help="Print the grid and its obstacles.")
    parser.add_argument("--render", action="store_true", help="Play the run back in a pygame window.")
    return parser


def _simulate(mission: Mission, telemetry_path: Optional[str]) -> SimulationResult:
    if telemetry_path is None:
        return run_mission(mission)
    with TelemetryLogger(telemetry_path) as logger:
        result = run_mission(mission, logger=logger)
    print(f"Wrote {logger.records_written} telemetry records to {telemetry_path}")
    return result


def _render(mission: Mission, result: SimulationResult, render_cfg: Dict[str, Any]) -> None:
    from mars_rover.render import GridRenderer, RenderConfig

    renderer = GridRenderer(mission.grid, RenderConfig.from_dict(render_cfg))
    poses = [result.start_pose] + [s.pose for s in result.steps]
    blocked = [False] + [not s.accepted for s in result.steps]
    try:
        renderer.play(poses, blocked, status=result.report.message())
    finally:
        renderer.close()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    cfg: Dict[str, Any] = load_yaml(args.config) if os.path.exists(args.config) else {}
    telemetry_cfg = cfg.get("telemetry", {})

    try:
        mission = load_mission(args.mission) if args.mission else read_mission()
        if args.commands is not None:
            mission = Mission(
                grid=mission.grid,
                start=mission.start,
                commands=parse_commands(args.commands),
                name=mission.name,
            )
    except InvalidInputError as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        return 2

    if args.show_grid:
        for line in format_grid(mission.grid):
            print(line)

    telemetry_path = args.telemetry
    if telemetry_path == "":
        telemetry_path = telemetry_cfg.get("default_path", "logs/rover_trace.jsonl")

    result = _simulate(mission, telemetry_path)
    for line in format_result(result):
        print(line)

    if args.render:
        _render(mission, result, cfg.get("render", {}))
    return 0


if __name__ == "__main__":
    sys.exit(main())
