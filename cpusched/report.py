"""Text reports, Gantt charts and CSV export of scheduling results."""

from __future__ import annotations

import csv
import math
from collections.abc import Iterable, Mapping
from os import PathLike

from .process import IDLE, Process

_RULE = "-" * 89


def format_results(processes: Iterable[Process], context_switches: int, algo_name: str) -> str:
    """Render the per-process table and averages as text."""
    procs = list(processes)
    lines = [
        "",
        f"--- {algo_name} Results ---",
        "Process ID | Arrival Time | Burst Time | Completion Time | Turnaround Time | Waiting Time",
        _RULE,
    ]
    lines.extend(
        f"{p.id:>10} | {p.arrival_time:>12} | {p.burst_time:>10} | "
        f"{p.completion_time:>15} | {p.turnaround_time:>15} | {p.waiting_time:>12}"
        for p in procs
    )
    if procs:
        avg_turnaround = sum(p.turnaround_time for p in procs) / len(procs)
        avg_waiting = sum(p.waiting_time for p in procs) / len(procs)
    else:
        avg_turnaround = avg_waiting = math.nan
    lines += [
        _RULE,
        f"Average Turnaround Time: {avg_turnaround:g} ms",
        f"Average Waiting Time: {avg_waiting:g} ms",
        f"Context Switches: {context_switches}",
    ]
    return "\n".join(lines) + "\n"


def print_results(processes: Iterable[Process], context_switches: int, algo_name: str) -> None:
    """Print the result table to standard output."""
    print(format_results(processes, context_switches, algo_name), end="")


def format_gantt_chart(gantt: Mapping[int, int]) -> str:
    """Render a time -> process id mapping as a two-row chart."""
    if not gantt:
        return "\nGantt Chart:\n  [Empty]\n"
    max_time = max(0, max(gantt))
    times = "".join(f"{t:>4}" for t in range(max_time + 1))
    cells = []
    for t in range(max_time + 1):
        pid = gantt.get(t, IDLE)
        cells.append(f"{'-' if pid == IDLE else pid:>4}")
    return f"\nGantt Chart:\nTime:   {times}\nProcess:{''.join(cells)}\n"


def print_gantt_chart(gantt: Mapping[int, int]) -> None:
    """Print the Gantt chart to standard output."""
    print(format_gantt_chart(gantt), end="")


def save_gantt_chart_csv(gantt: Mapping[int, int], filename: str | PathLike) -> None:
    """Write the Gantt data as Time,ProcessID rows in time order."""
    with open(filename, "w", newline="", encoding="utf-8") as outfile:
        writer = csv.writer(outfile, lineterminator="\n")
        writer.writerow(["Time", "ProcessID"])
        writer.writerows(sorted(gantt.items()))
    print(f"Gantt chart data saved to {filename}")