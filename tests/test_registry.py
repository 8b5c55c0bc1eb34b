import pytest

from jobsched.registry import JobRegistry


def _registry():
    registry = JobRegistry()
    registry.add(0, 5)
    registry.add(4, 2)
    registry.add(9, 1)
    return registry


def test_ids_and_tickets_follow_trace_position():
    registry = _registry()
    assert [j.id for j in registry] == [0, 1, 2]
    assert [j.tickets for j in registry] == [100, 200, 300]
    assert all(j.remaining == j.length for j in registry)
    assert all(j.start_time is None and j.end_time is None for j in registry)


def test_add_rejects_invalid_jobs():
    registry = JobRegistry()
    with pytest.raises(ValueError):
        registry.add(-1, 3)
    with pytest.raises(ValueError):
        registry.add(0, 0)


def test_all_done():
    registry = _registry()
    assert not registry.all_done()
    for job in registry:
        job.run(job.length, 10)
    assert registry.all_done()
    assert JobRegistry().all_done()


def test_next_arrival_after_skips_finished_jobs():
    registry = _registry()
    assert registry.next_arrival_after(0) == 4
    registry[1].run(2, 6)
    assert registry.next_arrival_after(0) == 9
    assert registry.next_arrival_after(9) is None


def test_advance_idle():
    registry = _registry()
    assert registry.advance_idle(5) == 9
    assert registry.advance_idle(9) == 10


def test_ready_and_tickets():
    registry = _registry()
    assert [j.id for j in registry.ready(4)] == [0, 1]
    assert registry.ready_tickets(4) == 300
    assert registry.ready_tickets(-1) == 0


def test_next_ready_from_wraps_around():
    registry = _registry()
    assert registry.next_ready_from(2, 5) == 0
    assert registry.next_ready_from(1, 5) == 1
    assert registry.next_ready_from(0, -1) is None


def test_run_cannot_overshoot_remaining():
    job = JobRegistry().add(0, 3)
    job.run(2, 2)
    with pytest.raises(ValueError):
        job.run(2, 4)
    assert job.remaining == 1
    assert job.end_time is None
