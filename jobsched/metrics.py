from __future__ import annotations

from typing import Iterable, List

from .models import Job, JobStats, ScheduleResult, SystemMetrics


def compute_job_stats(jobs: Iterable[Job]) -> List[JobStats]:
    """
    Response, turnaround and wait time for each completed job, in registry order.
    """
    stats: List[JobStats] = []
    for job in jobs:
        if job.start_time is None or job.end_time is None:
            raise ValueError(f"Job {job.id} has not completed")

        turnaround_time = job.end_time - job.arrival
        stats.append(
            JobStats(
                job_id=job.id,
                arrival=job.arrival,
                length=job.length,
                start_time=job.start_time,
                end_time=job.end_time,
                response_time=job.start_time - job.arrival,
                turnaround_time=turnaround_time,
                wait_time=turnaround_time - job.length,
            )
        )
    return stats


def summarize_job_stats(stats: List[JobStats]) -> dict:
    """
    Averages of the per-job times. An empty list averages to zero.
    """
    n = len(stats) or 1
    return {
        "avg_response": sum(s.response_time for s in stats) / n,
        "avg_turnaround": sum(s.turnaround_time for s in stats) / n,
        "avg_wait": sum(s.wait_time for s in stats) / n,
    }


def compute_system_metrics(result: ScheduleResult) -> SystemMetrics:
    """
    Compute throughput and CPU utilization from the timeline.
    """
    if not result.timeline:
        system = SystemMetrics(cpu_busy_time=0, makespan=0, throughput=0.0, cpu_utilization=0.0)
        result.system = system
        return system

    makespan = max(segment.end_time for segment in result.timeline)
    cpu_busy_time = sum(segment.duration for segment in result.timeline)

    throughput = len(result.jobs) / makespan if makespan > 0 else 0.0
    cpu_utilization = cpu_busy_time / makespan if makespan > 0 else 0.0

    system = SystemMetrics(
        cpu_busy_time=cpu_busy_time,
        makespan=makespan,
        throughput=throughput,
        cpu_utilization=cpu_utilization,
    )
    result.system = system
    return system
