from __future__ import annotations

import logging
import random
from typing import List, Optional

from .metrics import compute_system_metrics
from .models import Job, ScheduleResult, Segment
from .registry import JobRegistry

logger = logging.getLogger(__name__)

# Fixed so lottery runs are reproducible.
LOTTERY_SEED = 42


def _segment(job: Job, start_time: int, duration: int) -> Segment:
    return Segment(job_id=job.id, arrival=job.arrival, start_time=start_time, duration=duration)


def _finish(policy: str, slice: Optional[int], registry: JobRegistry, timeline: List[Segment]) -> ScheduleResult:
    result = ScheduleResult(policy=policy, slice=slice, jobs=registry.jobs, timeline=timeline)
    compute_system_metrics(result)
    return result


def _require_slice(policy: str, slice: Optional[int]) -> int:
    if slice is None or slice <= 0:
        raise ValueError(f"{policy} requires a positive time slice")
    return slice


def _pick_shortest(registry: JobRegistry, time: int) -> Optional[Job]:
    """
    Ready job with the least remaining work; earlier arrival wins ties, then
    registry order.
    """
    ready = registry.ready(time)
    if not ready:
        return None
    return min(ready, key=lambda j: (j.remaining, j.arrival))


def schedule_fifo(registry: JobRegistry, slice: Optional[int] = None) -> ScheduleResult:
    """
    First-In First-Out (non-preemptive), in registry order.
    """
    time = 0
    timeline: List[Segment] = []

    for job in registry:
        if time < job.arrival:
            time = job.arrival

        job.mark_started(time)
        duration = job.remaining
        timeline.append(_segment(job, time, duration))

        time += duration
        job.run(duration, time)

    return _finish("FIFO", slice, registry, timeline)


def schedule_sjf(registry: JobRegistry, slice: Optional[int] = None) -> ScheduleResult:
    """
    Shortest Job First (non-preemptive).

    Whenever the processor is free, the ready job with the least remaining
    work runs to completion.
    """
    time = 0
    timeline: List[Segment] = []

    while not registry.all_done():
        job = _pick_shortest(registry, time)

        if job is None:
            # Nothing is ready: jump to the next arrival.
            nxt = registry.advance_idle(time)
            logger.debug("SJF idle from t=%d to t=%d", time, nxt)
            time = nxt
            continue

        job.mark_started(time)
        duration = job.remaining
        timeline.append(_segment(job, time, duration))

        time += duration
        job.run(duration, time)

    return _finish("SJF", slice, registry, timeline)


def schedule_stcf(registry: JobRegistry, slice: Optional[int] = None) -> ScheduleResult:
    """
    Shortest Time-to-Completion First (preemptive SJF).

    The best ready job is re-chosen every tick. Consecutive ticks of the
    same job are coalesced into one segment; a segment closes only when a
    different job takes over or the running job completes.
    """
    time = 0
    timeline: List[Segment] = []
    current: Optional[Job] = None
    segment_start = 0

    while not registry.all_done():
        best = _pick_shortest(registry, time)

        if best is not current:
            if current is not None:
                if time > segment_start:
                    timeline.append(_segment(current, segment_start, time - segment_start))
                if best is not None:
                    logger.debug("STCF t=%d: job %d preempts job %d", time, best.id, current.id)
            current = best
            segment_start = time
            if current is not None:
                current.mark_started(time)

        if current is None:
            nxt = registry.advance_idle(time)
            logger.debug("STCF idle from t=%d to t=%d", time, nxt)
            time = nxt
            continue

        time += 1
        current.run(1, time)

        if current.finished:
            timeline.append(_segment(current, segment_start, time - segment_start))
            current = None
            segment_start = time

    return _finish("STCF", slice, registry, timeline)


def schedule_rr(registry: JobRegistry, slice: Optional[int] = None) -> ScheduleResult:
    """
    Round Robin over the registry with a fixed time slice.

    The scan pointer always moves past the job that just ran, so a job with
    work left is only revisited after a full circular pass.
    """
    quantum = _require_slice("RR", slice)

    time = 0
    timeline: List[Segment] = []
    position = 0

    while not registry.all_done():
        index = registry.next_ready_from(position, time)

        if index is None:
            nxt = registry.advance_idle(time)
            logger.debug("RR idle from t=%d to t=%d", time, nxt)
            time = nxt
            position = 0
            continue

        job = registry[index]
        job.mark_started(time)

        duration = min(quantum, job.remaining)
        timeline.append(_segment(job, time, duration))

        time += duration
        job.run(duration, time)

        position = (index + 1) % len(registry)

    return _finish("RR", quantum, registry, timeline)


def schedule_lottery(
    registry: JobRegistry,
    slice: Optional[int] = None,
    *,
    seed: int = LOTTERY_SEED,
) -> ScheduleResult:
    """
    Lottery scheduling with a fixed time slice.

    Each step is an independent draw over the currently ready jobs, weighted
    by their tickets.
    """
    quantum = _require_slice("LT", slice)
    rng = random.Random(seed)

    time = 0
    timeline: List[Segment] = []

    while not registry.all_done():
        total = registry.ready_tickets(time)

        if total == 0:
            nxt = registry.advance_idle(time)
            logger.debug("LT idle from t=%d to t=%d", time, nxt)
            time = nxt
            continue

        winning = rng.randrange(total)
        job = _draw_winner(registry, time, winning)
        logger.debug("LT t=%d: ticket %d of %d won by job %d", time, winning, total, job.id)

        job.mark_started(time)

        duration = min(quantum, job.remaining)
        timeline.append(_segment(job, time, duration))

        time += duration
        job.run(duration, time)

    return _finish("LT", quantum, registry, timeline)


def _draw_winner(registry: JobRegistry, time: int, winning: int) -> Job:
    counter = 0
    for job in registry.ready(time):
        counter += job.tickets
        if counter > winning:
            return job
    raise ValueError(f"Winning ticket {winning} exceeds ready tickets at t={time}")


ALGORITHMS = {
    "FIFO": schedule_fifo,
    "SJF": schedule_sjf,
    "STCF": schedule_stcf,
    "RR": schedule_rr,
    "LT": schedule_lottery,
}

SLICED_POLICIES = {"RR", "LT"}


def run_algorithm(name: str, registry: JobRegistry, slice: Optional[int] = None) -> ScheduleResult:
    """
    Dispatch to the named policy. The slice only matters for RR and LT.
    """
    if name not in ALGORITHMS:
        raise ValueError(f"Unknown policy '{name}'")

    func = ALGORITHMS[name]
    logger.debug("Running %s on %d jobs (slice=%s)", name, len(registry), slice)
    return func(registry, slice=slice)
