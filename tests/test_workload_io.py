from pathlib import Path

import pytest

from jobsched.workload_io import TraceError, load_trace, parse_trace_lines


def test_load_trace(tmp_path: Path):
    p = tmp_path / "trace.txt"
    p.write_text("0,5\n1,3\n\n4, 2\n")
    registry = load_trace(p)
    assert [(j.id, j.arrival, j.length) for j in registry] == [(0, 0, 5), (1, 1, 3), (2, 4, 2)]
    assert registry[2].tickets == 300


def test_ids_follow_line_order_not_arrival():
    registry = parse_trace_lines(["5,1\n", "0,2\n"])
    assert [(j.id, j.arrival) for j in registry] == [(0, 5), (1, 0)]


def test_missing_field_is_an_error():
    with pytest.raises(TraceError, match="line 2"):
        parse_trace_lines(["0,5\n", "3\n"])


def test_non_integer_field_is_an_error():
    with pytest.raises(TraceError):
        parse_trace_lines(["0,five\n"])


def test_non_positive_length_is_an_error():
    with pytest.raises(TraceError):
        parse_trace_lines(["0,0\n"])


def test_empty_trace_is_an_error(tmp_path: Path):
    p = tmp_path / "empty.txt"
    p.write_text("\n\n")
    with pytest.raises(TraceError):
        load_trace(p)


def test_missing_file(tmp_path: Path):
    with pytest.raises(OSError):
        load_trace(tmp_path / "nope.txt")


def test_invalid_utf8_is_a_trace_error(tmp_path: Path):
    p = tmp_path / "trace.txt"
    p.write_bytes(b"0,5\n\xff\xfe,3\n")
    with pytest.raises(TraceError, match="UTF-8"):
        load_trace(p)
