from __future__ import annotations

from typing import List

from .metrics import summarize_job_stats
from .models import JobStats, ScheduleResult, Segment


def format_segment(segment: Segment) -> str:
    return (
        f"t={segment.start_time}: [Job {segment.job_id}] "
        f"arrived at [{segment.arrival}], ran for: [{segment.duration}]"
    )


def trace_lines(result: ScheduleResult) -> List[str]:
    """
    The execution trace of one policy run, banners included.
    """
    lines = [f"Execution trace with {result.policy}:"]
    lines.extend(format_segment(segment) for segment in result.timeline)
    lines.append(f"End of execution with {result.policy}.")
    return lines


def analysis_lines(policy: str, stats: List[JobStats]) -> List[str]:
    lines = [f"Begin analyzing {policy}:"]
    for s in stats:
        lines.append(
            f"Job {s.job_id} -- Response time: {s.response_time}  "
            f"Turnaround: {s.turnaround_time}  Wait: {s.wait_time}"
        )

    summary = summarize_job_stats(stats)
    lines.append(
        f"Average -- Response: {summary['avg_response']:.2f}  "
        f"Turnaround {summary['avg_turnaround']:.2f}  "
        f"Wait {summary['avg_wait']:.2f}"
    )
    lines.append(f"End analyzing {policy}.")
    return lines
