"""Preemptive shortest-job-first (shortest remaining time) scheduling."""

from __future__ import annotations

import copy
from collections.abc import Callable, Collection, Iterable
from typing import Any

from .process import IDLE, Process, ScheduleResult

ALGO_NAME = "Preemptive SJF Scheduling"


def _prepare(
    processes: Iterable[Process],
    *,
    unique_ids: bool = False,
    priorities: Collection[int] | None = None,
) -> tuple[list[Process], list[Process]]:
    """Validate the input and return it with fresh working copies."""
    originals = list(processes)
    seen: set[int] = set()
    for p in originals:
        if p.burst_time <= 0:
            raise ValueError(f"process {p.id} has non-positive burst time {p.burst_time}")
        if priorities is not None and p.priority not in priorities:
            raise ValueError(
                f"process {p.id} has priority {p.priority}, expected one of {tuple(priorities)}"
            )
        if unique_ids:
            if p.id in seen:
                raise ValueError(f"duplicate process id {p.id}")
            seen.add(p.id)
    work = [copy.copy(p) for p in originals]
    for p in work:
        p.reset()
    return originals, work


class _Timeline:
    """Clock, Gantt chart and context-switch count of one simulation."""

    def __init__(self) -> None:
        self.gantt: dict[int, int] = {}
        self.time = 0
        self.switches = 0
        self._prev = IDLE

    def idle(self) -> None:
        self.gantt[self.time] = IDLE
        self.time += 1
        self._prev = IDLE

    def run(self, proc: Process, ticks: int) -> bool:
        """Give the CPU to proc for ticks; return True if it finished."""
        if self._prev != IDLE and self._prev != proc.id:
            self.switches += 1
        self._prev = proc.id
        if not proc.is_started:
            proc.start_time = self.time
            proc.is_started = True
        for tick in range(self.time, self.time + ticks):
            self.gantt[tick] = proc.id
        proc.remaining_burst_time -= ticks
        self.time += ticks
        if proc.remaining_burst_time == 0:
            proc.completion_time = self.time
            return True
        return False

    def result(self, name: str, originals: list[Process], work: list[Process]) -> ScheduleResult:
        finished = []
        for original, done in zip(originals, work):
            record = copy.copy(original)
            record.completion_time = done.completion_time
            finished.append(record)
        finished.sort(key=lambda p: p.id)
        return ScheduleResult(name, finished, self.gantt, self.switches)


def _tick_schedule(
    name: str,
    processes: Iterable[Process],
    order: Callable[[Process], Any],
    age: Callable[[list[Process], int], None] | None = None,
) -> ScheduleResult:
    """Run one-millisecond ticks, always picking the ready process with the smallest order key."""
    originals, work = _prepare(processes)
    ready: list[int] = []
    queued: set[int] = set()
    line = _Timeline()
    pending = len(work)

    while pending:
        for index, p in enumerate(work):
            if p.arrival_time <= line.time and p.remaining_burst_time > 0 and index not in queued:
                ready.append(index)
                queued.add(index)
                p.last_run_time = line.time

        if age is not None:
            age([work[i] for i in ready], line.time)

        ready.sort(key=lambda i: order(work[i]))

        if not ready:
            line.idle()
            continue

        current = work[ready[0]]
        if line.run(current, 1):
            pending -= 1
            queued.discard(ready.pop(0))
        current.last_run_time = line.time

    return line.result(name, originals, work)


def preemptive_sjf(processes: Iterable[Process]) -> ScheduleResult:
    """Run one-millisecond ticks, always giving the CPU to the shortest remaining job."""
    return _tick_schedule(ALGO_NAME, processes, lambda p: p.remaining_burst_time)