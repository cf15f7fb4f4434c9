"""Round robin within fixed priority levels."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from .process import Process, ScheduleResult
from .sjf import _prepare, _Timeline

ALGO_NAME = "RR + Non-Preemptive Priority Scheduling"
PRIORITY_LEVELS = (1, 2, 3)
DEFAULT_QUANTUM = 5


def rr_priority(processes: Iterable[Process], time_quantum: int = DEFAULT_QUANTUM) -> ScheduleResult:
    """Serve the highest non-empty priority level, round robin inside each level.

    A running process keeps the CPU for a whole quantum even if a process of
    higher priority arrives meanwhile.
    """
    if time_quantum <= 0:
        raise ValueError(f"time quantum must be positive, got {time_quantum}")
    originals, work = _prepare(processes, unique_ids=True, priorities=PRIORITY_LEVELS)

    queues: dict[int, deque[Process]] = {level: deque() for level in PRIORITY_LEVELS}
    queued: set[int] = set()
    line = _Timeline()
    pending = len(work)

    while pending:
        for p in work:
            if (
                p.arrival_time <= line.time
                and p.remaining_burst_time > 0
                and p.last_run_time <= line.time
                and p.id not in queued
                and p.completion_time == -1
            ):
                queues[p.priority].append(p)
                queued.add(p.id)
                p.last_run_time = line.time

        level = next((lvl for lvl in PRIORITY_LEVELS if queues[lvl]), None)
        if level is None:
            line.idle()
            continue

        current = queues[level].popleft()
        if line.run(current, min(time_quantum, current.remaining_burst_time)):
            pending -= 1
            queued.discard(current.id)
        else:
            queues[current.priority].append(current)
            current.last_run_time = line.time

    return line.result(ALGO_NAME, originals, work)