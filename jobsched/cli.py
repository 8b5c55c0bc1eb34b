from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .algorithms import ALGORITHMS, SLICED_POLICIES, run_algorithm
from .gantt import build_gantt
from .metrics import compute_job_stats, summarize_job_stats
from .models import JobStats, ScheduleResult
from .report import analysis_lines, trace_lines
from .workload_io import TraceError, load_trace

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jobsched",
        description="CPU scheduling simulator (FIFO, SJF, STCF, RR, LT).",
    )
    parser.add_argument(
        "analysis",
        type=int,
        help="1 to print response/turnaround/wait analysis after the trace, 0 to skip it.",
    )
    parser.add_argument(
        "policy",
        choices=list(ALGORITHMS),
        help="Scheduling policy to simulate.",
    )
    parser.add_argument(
        "slice",
        type=int,
        help="Time slice for RR and LT. Must be an integer for every policy, but only RR and LT use it.",
    )
    parser.add_argument(
        "trace",
        help="Path to a trace file with one 'arrival,length' job per line.",
    )
    parser.add_argument(
        "--gantt",
        action="store_true",
        help="Show a Gantt chart of the execution after the trace.",
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="Show per-job and system metrics as tables.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log scheduling decisions to stderr.",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _print_lines(console: Console, lines: list[str]) -> None:
    for line in lines:
        console.out(line, highlight=False)


def _print_tables(console: Console, result: ScheduleResult, stats: list[JobStats]) -> None:
    headers = ["Job", "Arrive", "Length", "Start", "End", "Response", "Turnaround", "Wait"]

    job_table = Table(title=f"Per-job metrics ({result.policy})", box=box.SIMPLE_HEAVY)
    for h in headers:
        job_table.add_column(h, justify="center" if h == "Job" else "right")

    for s in stats:
        job_table.add_row(
            str(s.job_id),
            str(s.arrival),
            str(s.length),
            str(s.start_time),
            str(s.end_time),
            str(s.response_time),
            str(s.turnaround_time),
            str(s.wait_time),
        )

    console.print(job_table)

    summary = summarize_job_stats(stats)
    sys_table = Table(title="System metrics", box=box.SIMPLE_HEAVY)
    sys_table.add_column("Metric")
    sys_table.add_column("Value", justify="right")

    sys_table.add_row("Avg response", f"{summary['avg_response']:.2f}")
    sys_table.add_row("Avg turnaround", f"{summary['avg_turnaround']:.2f}")
    sys_table.add_row("Avg wait", f"{summary['avg_wait']:.2f}")
    if result.system:
        system = result.system
        sys_table.add_row("Makespan", str(system.makespan))
        sys_table.add_row("Throughput (jobs/time)", f"{system.throughput:.3f}")
        sys_table.add_row("CPU utilization", f"{system.cpu_utilization*100:.1f}%")

    console.print(sys_table)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.policy in SLICED_POLICIES and args.slice <= 0:
        parser.error(f"{args.policy} requires a positive time slice, got {args.slice}")

    _configure_logging(args.verbose)

    console = Console(highlight=False)
    err_console = Console(stderr=True)

    try:
        registry = load_trace(Path(args.trace))
    except OSError as exc:
        err_console.print(f"[red]Cannot open trace: {escape(str(exc))}[/red]")
        return 1
    except TraceError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        return 1

    result = run_algorithm(args.policy, registry, slice=args.slice)
    _print_lines(console, trace_lines(result))

    if args.gantt:
        console.print(build_gantt(result.timeline, title=f"{result.policy} timeline"))

    stats = compute_job_stats(result.jobs)
    if args.analysis == 1:
        _print_lines(console, analysis_lines(args.policy, stats))

    if args.table:
        _print_tables(console, result, stats)

    logger.debug("%s finished at t=%d", args.policy, result.system.makespan if result.system else 0)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
