from __future__ import annotations

import json
import os
from typing import Any, Dict, Optional, TextIO


class TelemetryLogger:
    """Structured JSONL logger for rover command traces.

    Append-only logging of dict records, one JSON object per line. A run writes
    one record per command:

    - step : int, index of the command in the sequence
    - command : str, "M", "L" or "R"
    - x, y : int, rover cell after the command
    - heading : str, "N", "S", "E" or "W" after the command
    - accepted : bool, False when a move was blocked or would leave the grid

    Usable as a context manager so the file is closed when a run ends.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        self._fp: Optional[TextIO] = open(self.path, "a", encoding="utf-8")
        self.records_written = 0

    def log_step(self, record: Dict[str, Any]) -> None:
        """Append a single telemetry record to the JSONL file."""
        if self._fp is None:
            return
        line = json.dumps(record, separators=(",", ":"))
        self._fp.write(line + "\n")
        self._fp.flush()
        self.records_written += 1

    def close(self) -> None:
        if self._fp is not None:
            self._fp.close()
            self._fp = None

    def __enter__(self) -> "TelemetryLogger":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
