from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Job:
    id: int
    arrival: int
    length: int
    tickets: int
    remaining: int = field(init=False)
    start_time: Optional[int] = None
    end_time: Optional[int] = None

    def __post_init__(self) -> None:
        self.remaining = self.length

    @property
    def finished(self) -> bool:
        return self.end_time is not None

    def is_ready(self, time: int) -> bool:
        return self.arrival <= time and self.remaining > 0 and not self.finished

    def mark_started(self, time: int) -> None:
        if self.start_time is None:
            self.start_time = time

    def run(self, duration: int, time: int) -> None:
        """
        Consume `duration` units of service ending at `time`, stamping the
        completion time when nothing is left.
        """
        if not 0 < duration <= self.remaining:
            raise ValueError(f"Job {self.id} cannot run for {duration} with {self.remaining} remaining")
        self.remaining -= duration
        if self.remaining == 0:
            self.end_time = time


@dataclass
class Segment:
    """
    One uninterrupted run of a job on the processor.
    """

    job_id: int
    arrival: int
    start_time: int
    duration: int

    @property
    def end_time(self) -> int:
        return self.start_time + self.duration


@dataclass
class JobStats:
    job_id: int
    arrival: int
    length: int
    start_time: int
    end_time: int
    response_time: int
    turnaround_time: int
    wait_time: int


@dataclass
class SystemMetrics:
    cpu_busy_time: int
    makespan: int
    throughput: float
    cpu_utilization: float


@dataclass
class ScheduleResult:
    policy: str
    slice: Optional[int]
    jobs: List[Job] = field(default_factory=list)
    timeline: List[Segment] = field(default_factory=list)
    system: Optional[SystemMetrics] = None
