"""
Job scheduling simulator package.

Replays a trace of job arrivals under FIFO, SJF, STCF, Round Robin and
Lottery scheduling and reports the resulting execution trace and timings.
"""

__all__ = ["cli"]
