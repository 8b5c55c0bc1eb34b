from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable

from .registry import JobRegistry

logger = logging.getLogger(__name__)


class TraceError(ValueError):
    """Raised when a trace file cannot be turned into a job registry."""


def load_trace(path: str | Path) -> JobRegistry:
    """
    Load an `arrival,length` trace file into a JobRegistry.

    Jobs get ids in line order. Blank lines are skipped; a line missing
    either field, or a file with no jobs at all, is a TraceError.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            registry = parse_trace_lines(f)
    except UnicodeDecodeError as exc:
        raise TraceError(f"Trace is not valid UTF-8: {path}") from exc

    logger.debug("Loaded %d jobs from %s", len(registry), path)
    return registry


def parse_trace_lines(lines: Iterable[str]) -> JobRegistry:
    registry = JobRegistry()

    for lineno, row in enumerate(csv.reader(lines), start=1):
        fields = [cell.strip() for cell in row]
        if not any(fields):
            continue

        if len(fields) < 2 or not fields[0] or not fields[1]:
            raise TraceError(f"Bad line {lineno} in trace: {','.join(row)!r}")

        try:
            arrival = int(fields[0])
            length = int(fields[1])
        except ValueError as exc:
            raise TraceError(f"Non-integer field on line {lineno}: {','.join(row)!r}") from exc

        try:
            job = registry.add(arrival, length)
        except ValueError as exc:
            raise TraceError(f"Invalid job on line {lineno}: {exc}") from exc

        logger.debug("Job %d: arrival=%d length=%d tickets=%d", job.id, job.arrival, job.length, job.tickets)

    if not len(registry):
        raise TraceError("Empty trace")

    return registry
