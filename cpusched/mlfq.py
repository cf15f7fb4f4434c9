"""Three-level multilevel feedback queue scheduling."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from .process import Process, ScheduleResult
from .sjf import _prepare, _Timeline

ALGO_NAME = "Multilevel Feedback Queue Scheduling"
DEFAULT_QUANTUM_Q0 = 5
DEFAULT_QUANTUM_Q1 = 10


def multilevel_feedback_queue(
    processes: Iterable[Process],
    quantum_q0: int = DEFAULT_QUANTUM_Q0,
    quantum_q1: int = DEFAULT_QUANTUM_Q1,
) -> ScheduleResult:
    """Schedule with RR queues of quantum_q0 and quantum_q1 above an FCFS queue.

    New arrivals enter the top queue; a process that uses up its quantum
    drops one level. The bottom queue runs a process to completion.
    """
    if quantum_q0 <= 0 or quantum_q1 <= 0:
        raise ValueError(f"quanta must be positive, got {quantum_q0} and {quantum_q1}")
    originals, work = _prepare(processes, unique_ids=True)

    quanta: tuple[int | None, ...] = (quantum_q0, quantum_q1, None)
    queues: list[deque[Process]] = [deque() for _ in quanta]
    bottom = len(queues) - 1
    entered: set[int] = set()
    line = _Timeline()
    pending = len(work)

    while pending:
        for p in work:
            if p.arrival_time <= line.time and p.remaining_burst_time > 0 and p.id not in entered:
                queues[0].append(p)
                entered.add(p.id)

        level = next((lvl for lvl, queue in enumerate(queues) if queue), None)
        if level is None:
            line.idle()
            continue

        current = queues[level].popleft()
        quantum = quanta[level]
        remaining = current.remaining_burst_time
        if line.run(current, remaining if quantum is None else min(quantum, remaining)):
            pending -= 1
        else:
            queues[min(level + 1, bottom)].append(current)

    return line.result(ALGO_NAME, originals, work)