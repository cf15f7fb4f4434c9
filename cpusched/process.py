"""Process records, schedule results and random workload generation."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

IDLE = -1
"""Gantt chart marker for a tick in which the CPU runs nothing."""

ARRIVAL_OPTIONS = (0, 5, 10)
BURST_RANGE = (6, 28)
PRIORITY_RANGE = (1, 3)


@dataclass
class Process:
    """A simulated process; a smaller priority number means a higher priority."""

    id: int
    arrival_time: int
    burst_time: int
    priority: int
    remaining_burst_time: int = field(init=False)
    start_time: int = field(init=False)
    completion_time: int = field(init=False)
    last_run_time: int = field(init=False)
    is_started: bool = field(init=False)

    def __post_init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Restore the scheduling state to that of a process never run."""
        self.remaining_burst_time = self.burst_time
        self.start_time = -1
        self.completion_time = -1
        self.last_run_time = self.arrival_time
        self.is_started = False

    @property
    def turnaround_time(self) -> int:
        return self.completion_time - self.arrival_time

    @property
    def waiting_time(self) -> int:
        return self.turnaround_time - self.burst_time


@dataclass
class ScheduleResult:
    """The outcome of one scheduling run."""

    algo_name: str
    processes: list[Process]
    gantt: dict[int, int]
    context_switches: int

    def averages(self) -> tuple[float, float]:
        """Return (average turnaround time, average waiting time)."""
        if not self.processes:
            return math.nan, math.nan
        count = len(self.processes)
        turnaround = sum(p.turnaround_time for p in self.processes) / count
        waiting = sum(p.waiting_time for p in self.processes) / count
        return turnaround, waiting


def generate_processes(num_processes: int, rng: random.Random | None = None) -> list[Process]:
    """Generate processes with ids 1..n and random arrival, burst and priority."""
    rng = rng if rng is not None else random.Random()
    return [
        Process(
            id=number,
            arrival_time=rng.choice(ARRIVAL_OPTIONS),
            burst_time=rng.randint(*BURST_RANGE),
            priority=rng.randint(*PRIORITY_RANGE),
        )
        for number in range(1, num_processes + 1)
    ]