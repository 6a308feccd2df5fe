from __future__ import annotations

import json
from pathlib import Path

from mars_rover.grid import Grid
from mars_rover.heading import Heading
from mars_rover.parsing import parse_commands
from mars_rover.rover import Pose
from mars_rover.simulation import Mission, run_mission
from telemetry.logger import TelemetryLogger


def test_trace_has_one_line_per_command(tmp_path: Path) -> None:
    path = tmp_path / "logs" / "trace.jsonl"
    mission = Mission(
        grid=Grid.with_obstacles(5, 5, [(0, 1)]),
        start=Pose(0, 0, Heading.NORTH),
        commands=parse_commands("MRM"),
    )
    with TelemetryLogger(str(path)) as logger:
        run_mission(mission, logger=logger)
        assert logger.records_written == 3

    records = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert [r["command"] for r in records] == ["M", "R", "M"]
    assert records[0]["accepted"] is False
    assert records[2] == {"step": 2, "command": "M", "x": 1, "y": 0, "heading": "E", "accepted": True}


def test_logger_appends_and_ignores_writes_after_close(tmp_path: Path) -> None:
    path = tmp_path / "trace.jsonl"
    logger = TelemetryLogger(str(path))
    logger.log_step({"a": 1})
    logger.close()
    logger.log_step({"a": 2})
    logger.close()

    with TelemetryLogger(str(path)) as again:
        again.log_step({"a": 3})

    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines == ['{"a":1}', '{"a":3}']
