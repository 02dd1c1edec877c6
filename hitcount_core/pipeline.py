"""Input file -> per-day aggregates -> rendered report.

The report is fully rendered in memory before anything is returned, so a run
that hits a malformed line never leaves partial output behind.
"""
from __future__ import annotations
import logging
import pathlib
from typing import List, Union

from .aggregator import AggregateState, aggregate
from .exceptions import FileAccessError
from .line_parser import iter_lines
from .pipeline_timer import PipelineTimer
from .report import render

logger = logging.getLogger(__name__)


def aggregate_file(path: Union[str, pathlib.Path]) -> AggregateState:
    """Aggregate every line of ``path``; the file is closed on all exit paths."""
    path = pathlib.Path(path)
    try:
        with path.open('r', encoding='utf-8') as f:
            return aggregate(iter_lines(f))
    except FileNotFoundError as e:
        raise FileAccessError(f"Input file not found: {path}") from e
    except IsADirectoryError as e:
        raise FileAccessError(f"Input path is a directory: {path}") from e
    except UnicodeDecodeError as e:
        raise FileAccessError(f"Input file {path} is not valid UTF-8 text: {e}") from e
    except OSError as e:
        raise FileAccessError(f"Failed to read input file {path}: {e}") from e


def run_report(path: Union[str, pathlib.Path]) -> List[str]:
    """Return the complete report for the visit log at ``path``."""
    timer = PipelineTimer()
    with timer.phase('aggregate'):
        state = aggregate_file(path)
    with timer.phase('render'):
        lines = render(state)
    timer.log_summary(logger, label=f"report {path}")
    return lines
