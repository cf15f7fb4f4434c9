"""Command line entry: generate a workload and compare every scheduler."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable, Iterable, Sequence
from os import PathLike
from pathlib import Path

from . import custom, mlfq, rr_priority, sjf
from .process import Process, ScheduleResult, generate_processes
from .report import print_results, save_gantt_chart_csv

DEFAULT_NUM_PROCESSES = 10
_RULE = "-" * 50

_ALGORITHMS: tuple[tuple[str, str, Callable[[list[Process]], ScheduleResult]], ...] = (
    (sjf.ALGO_NAME, "preeSJF_gantt_data.csv", sjf.preemptive_sjf),
    (rr_priority.ALGO_NAME, "RR_priority_gantt_data.csv", rr_priority.rr_priority),
    (mlfq.ALGO_NAME, "MLFQ_gantt_data.csv", mlfq.multilevel_feedback_queue),
    (custom.ALGO_NAME, "custom_gantt_data.csv", custom.priority_sjf_aging),
)


def format_initial_processes(processes: Iterable[Process]) -> str:
    """Render the generated workload as a table."""
    lines = [
        "--- Initial Processes ---",
        "Process ID | Arrival Time | Burst Time | Priority",
        _RULE,
    ]
    lines.extend(
        f"{p.id:>10} | {p.arrival_time:>12} | {p.burst_time:>10} | {p.priority:>8}"
        for p in processes
    )
    lines.append(_RULE)
    return "\n".join(lines) + "\n"


def run_all(processes: Iterable[Process], output_dir: str | PathLike = ".") -> list[ScheduleResult]:
    """Run every scheduler on the same workload, saving each Gantt chart as CSV."""
    procs = list(processes)
    directory = Path(output_dir)
    results = []
    for name, filename, schedule in _ALGORITHMS:
        print(f"\n--- Starting {name} ---")
        result = schedule(procs)
        save_gantt_chart_csv(result.gantt, directory / filename)
        print_results(result.processes, result.context_switches, result.algo_name)
        results.append(result)
    return results


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cpusched", description="Compare CPU scheduling algorithms on a random workload."
    )
    parser.add_argument(
        "-n", "--num-processes", type=int, default=DEFAULT_NUM_PROCESSES,
        help="number of processes to generate",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "-o", "--output-dir", default=".", help="directory for the Gantt chart CSV files"
    )
    args = parser.parse_args(argv)
    if args.num_processes < 0:
        parser.error("--num-processes must not be negative")

    processes = generate_processes(args.num_processes, random.Random(args.seed))
    print(format_initial_processes(processes), end="")
    run_all(processes, args.output_dir)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())