"""Telemetry output for rover runs (JSONL command traces)."""

from .logger import TelemetryLogger

__all__ = ["TelemetryLogger"]
