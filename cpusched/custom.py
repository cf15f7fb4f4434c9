"""Preemptive priority scheduling with SJF tie-break and aging."""

from __future__ import annotations

from collections.abc import Iterable

from .process import Process, ScheduleResult
from .sjf import _tick_schedule

ALGO_NAME = "Custom: Priority-based SJF with Aging Scheduling"
AGING_THRESHOLD = 15
AGING_PRIORITY_BOOST = 1
TOP_PRIORITY = 1


def priority_sjf_aging(
    processes: Iterable[Process],
    aging_threshold: int = AGING_THRESHOLD,
    aging_boost: int = AGING_PRIORITY_BOOST,
) -> ScheduleResult:
    """Run one-millisecond ticks ordered by (priority, remaining time).

    A ready process that has not run for aging_threshold ticks has its
    priority number lowered by aging_boost, never below 1.
    """

    def age(ready: list[Process], time: int) -> None:
        for p in ready:
            if p.priority > TOP_PRIORITY and time - p.last_run_time >= aging_threshold:
                p.priority = max(TOP_PRIORITY, p.priority - aging_boost)
                p.last_run_time = time

    return _tick_schedule(
        ALGO_NAME,
        processes,
        lambda p: (p.priority, p.remaining_burst_time),
        age,
    )