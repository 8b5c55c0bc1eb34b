from __future__ import annotations

from typing import List

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import Segment

JOB_COLORS = ["red", "green", "yellow", "blue", "magenta", "cyan"]
IDLE_MARK = "·"


def job_color(job_id: int) -> str:
    return JOB_COLORS[job_id % len(JOB_COLORS)]


def build_gantt(timeline: List[Segment], title: str = "Gantt Chart") -> Panel:
    """
    Render a policy's timeline as one cell per logical time unit.

    The timeline is already in time order. Gaps between segments are drawn
    as idle, and every segment boundary gets a time mark underneath.
    """
    if not timeline:
        return Panel("No execution", title=title)

    bars = Text()
    labels = Text()
    marks = Text("0")
    clock = 0

    for seg in timeline:
        if seg.start_time > clock:
            gap = seg.start_time - clock
            bars.append(IDLE_MARK * gap, style="dim")
            labels.append(" " * gap)
            marks.append(f"{seg.start_time}".rjust(gap))

        color = job_color(seg.job_id)
        bars.append(" " * seg.duration, style=f"on {color}")
        labels.append(f"{seg.job_id}"[: seg.duration].ljust(seg.duration), style=f"bold {color}")
        marks.append(f"{seg.end_time}".rjust(seg.duration))
        clock = seg.end_time

    grid = Table.grid()
    grid.add_row(bars)
    grid.add_row(labels)
    grid.add_row(marks)
    return Panel.fit(grid, title=title)
