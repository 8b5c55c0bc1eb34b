from __future__ import annotations

from typing import Iterator, List, Optional

from .models import Job

TICKETS_PER_POSITION = 100


class JobRegistry:
    """
    Ordered collection of the jobs read from a trace.

    Iteration order is insertion order, which is also id order; every
    policy falls back on it when two jobs are otherwise equal.
    """

    def __init__(self) -> None:
        self._jobs: List[Job] = []

    def add(self, arrival: int, length: int) -> Job:
        if arrival < 0:
            raise ValueError(f"arrival must be >= 0, got {arrival}")
        if length <= 0:
            raise ValueError(f"length must be > 0, got {length}")

        job_id = len(self._jobs)
        job = Job(
            id=job_id,
            arrival=arrival,
            length=length,
            tickets=(job_id + 1) * TICKETS_PER_POSITION,
        )
        self._jobs.append(job)
        return job

    @property
    def jobs(self) -> List[Job]:
        return self._jobs

    def __len__(self) -> int:
        return len(self._jobs)

    def __iter__(self) -> Iterator[Job]:
        return iter(self._jobs)

    def __getitem__(self, index: int) -> Job:
        return self._jobs[index]

    def all_done(self) -> bool:
        return all(job.finished for job in self._jobs)

    def next_arrival_after(self, time: int) -> Optional[int]:
        """
        Earliest arrival strictly after `time` among unfinished jobs, or None.
        """
        future = [job.arrival for job in self._jobs if not job.finished and job.arrival > time]
        return min(future) if future else None

    def advance_idle(self, time: int) -> int:
        """
        Where the clock goes when nothing is ready at `time`.
        """
        nxt = self.next_arrival_after(time)
        return time + 1 if nxt is None else nxt

    def ready(self, time: int) -> List[Job]:
        return [job for job in self._jobs if job.is_ready(time)]

    def ready_tickets(self, time: int) -> int:
        return sum(job.tickets for job in self.ready(time))

    def next_ready_from(self, start: int, time: int) -> Optional[int]:
        """
        Index of the first ready job scanning circularly from `start`.
        """
        count = len(self._jobs)
        for offset in range(count):
            index = (start + offset) % count
            if self._jobs[index].is_ready(time):
                return index
        return None
