import random

import pytest

from cpusched.custom import AGING_THRESHOLD, ALGO_NAME, priority_sjf_aging
from cpusched.process import IDLE, Process, generate_processes


def _check(result, procs):
    remaining = {p.id: p.burst_time for p in procs}
    arrival = {p.id: p.arrival_time for p in procs}
    finished = {}
    prev = IDLE
    switches = 0
    for t in range(len(result.gantt)):
        pid = result.gantt[t]
        if pid != IDLE:
            assert arrival[pid] <= t
            assert remaining[pid] > 0
            remaining[pid] -= 1
            if remaining[pid] == 0:
                finished[pid] = t + 1
            switches += prev not in (IDLE, pid)
        prev = pid
    assert not any(remaining.values())
    assert {p.id: p.completion_time for p in result.processes} == finished
    assert [p.id for p in result.processes] == sorted(finished)
    assert result.context_switches == switches


def test_shortest_job_first_within_priority():
    procs = [Process(1, 0, 8, 2), Process(2, 0, 3, 2)]
    result = priority_sjf_aging(procs)
    assert result.algo_name == ALGO_NAME
    assert result.gantt[0] == 2
    assert result.processes[1].completion_time == 3
    _check(result, procs)


def test_priority_beats_burst_length():
    procs = [Process(1, 0, 2, 2), Process(2, 0, 9, 1)]
    result = priority_sjf_aging(procs)
    assert result.gantt[0] == 2
    assert result.processes[1].completion_time == 9
    _check(result, procs)


def test_aging_lets_waiting_process_in():
    procs = [Process(1, 0, 30, 1), Process(2, 0, 5, 2)]
    result = priority_sjf_aging(procs)
    assert (result.gantt[AGING_THRESHOLD - 1], result.gantt[AGING_THRESHOLD]) == (1, 2)
    assert result.processes[1].priority == 2
    _check(result, procs)


def test_without_aging_low_priority_waits():
    procs = [Process(1, 0, 30, 1), Process(2, 0, 5, 2)]
    result = priority_sjf_aging(procs, aging_threshold=100)
    assert result.gantt[AGING_THRESHOLD] == 1
    assert result.processes[1].completion_time == 35
    _check(result, procs)


def test_zero_boost_disables_aging():
    procs = [Process(1, 0, 30, 1), Process(2, 0, 5, 2)]
    result = priority_sjf_aging(procs, aging_boost=0)
    assert {result.gantt[t] for t in range(30)} == {1}
    _check(result, procs)


def test_preempts_on_arrival():
    procs = [Process(1, 0, 10, 2), Process(2, 3, 2, 1)]
    result = priority_sjf_aging(procs)
    assert result.gantt[3] == 2
    _check(result, procs)


def test_input_is_not_mutated():
    procs = [Process(1, 0, 40, 1), Process(2, 0, 9, 3)]
    priority_sjf_aging(procs)
    assert [(p.priority, p.completion_time) for p in procs] == [(1, -1), (3, -1)]


@pytest.mark.parametrize("seed", range(5))
def test_random_workloads(seed):
    procs = generate_processes(10, random.Random(seed))
    _check(priority_sjf_aging(procs), procs)


@pytest.mark.parametrize("burst", [0, -3])
def test_non_positive_burst_rejected(burst):
    with pytest.raises(ValueError):
        priority_sjf_aging([Process(1, 0, burst, 1)])