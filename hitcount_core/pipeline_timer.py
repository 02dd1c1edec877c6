"""Timing of the aggregate and render phases of a report run."""
from __future__ import annotations
import logging
import time
from contextlib import contextmanager
from typing import Dict


class PipelineTimer:
    """Track wall-clock time spent in each named phase of a run."""

    def __init__(self):
        self.start_time = time.perf_counter()
        self.phases: Dict[str, float] = {}

    @contextmanager
    def phase(self, name: str):
        """Time the enclosed block; recorded even if the block raises."""
        phase_start = time.perf_counter()
        try:
            yield
        finally:
            self.phases[f"{name}_s"] = round(time.perf_counter() - phase_start, 3)

    def get_total_time(self) -> float:
        return round(time.perf_counter() - self.start_time, 3)

    def get_summary(self) -> Dict[str, float]:
        summary = self.phases.copy()
        summary['total_s'] = self.get_total_time()
        return summary

    def log_summary(self, logger: logging.Logger, label: str = "run") -> Dict[str, float]:
        summary = self.get_summary()
        timings = ", ".join(f"{k}={v}" for k, v in summary.items())
        logger.debug(f"{label} timings: {timings}")
        return summary
