from rich.console import Console

from jobsched.algorithms import schedule_fifo, schedule_stcf
from jobsched.gantt import IDLE_MARK, build_gantt, job_color
from jobsched.registry import JobRegistry


def _render(panel) -> str:
    console = Console(width=120, color_system=None)
    with console.capture() as capture:
        console.print(panel)
    return capture.get()


def test_job_colors_cycle_by_id():
    assert job_color(0) == "red"
    assert job_color(6) == job_color(0)
    assert job_color(7) != job_color(6)


def test_idle_gap_is_marked():
    registry = JobRegistry()
    registry.add(2, 3)
    registry.add(10, 1)
    out = _render(build_gantt(schedule_fifo(registry).timeline))
    assert IDLE_MARK * 2 in out
    assert IDLE_MARK * 5 in out


def test_segment_boundaries_are_marked():
    registry = JobRegistry()
    registry.add(0, 5)
    registry.add(1, 3)
    out = _render(build_gantt(schedule_stcf(registry).timeline, title="STCF timeline"))
    assert "STCF timeline" in out
    assert "01  4   8" in out
    assert IDLE_MARK not in out


def test_empty_timeline():
    assert "No execution" in _render(build_gantt([]))
