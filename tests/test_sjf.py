from collections import Counter

import pytest

from cpusched.process import IDLE, Process, generate_processes
from cpusched.sjf import preemptive_sjf

import random


def test_single_process():
    result = preemptive_sjf([Process(1, 0, 3, 1)])
    assert result.gantt == {0: 1, 1: 1, 2: 1}
    assert result.processes[0].completion_time == 3
    assert result.context_switches == 0
    assert result.algo_name == "Preemptive SJF Scheduling"


def test_idle_until_arrival():
    result = preemptive_sjf([Process(1, 2, 2, 1)])
    assert result.gantt[0] == IDLE and result.gantt[1] == IDLE
    assert result.gantt[2] == 1 and result.gantt[3] == 1
    assert result.processes[0].completion_time == max(result.gantt) + 1


def test_shorter_arrival_preempts():
    result = preemptive_sjf([Process(1, 0, 10, 1), Process(2, 5, 2, 1)])
    assert result.gantt[5] == 2 and result.gantt[6] == 2
    assert result.gantt[7] == 1
    p1, p2 = result.processes
    assert p2.completion_time < p1.completion_time
    assert result.context_switches == 2


def test_results_sorted_by_id_and_input_untouched():
    inputs = [Process(3, 0, 5, 1), Process(1, 0, 2, 1), Process(2, 0, 4, 1)]
    result = preemptive_sjf(inputs)
    assert [p.id for p in result.processes] == [1, 2, 3]
    assert all(p.completion_time == -1 and p.remaining_burst_time == p.burst_time for p in inputs)


@pytest.mark.parametrize("seed", range(5))
def test_invariants_on_random_workload(seed):
    procs = generate_processes(10, random.Random(seed))
    result = preemptive_sjf(procs)
    counts = Counter(result.gantt.values())
    for p in result.processes:
        assert counts[p.id] == p.burst_time
        assert p.completion_time >= p.arrival_time + p.burst_time
        assert p.waiting_time >= 0
    end = max(p.completion_time for p in result.processes)
    assert sorted(result.gantt) == list(range(end))


def test_empty_input():
    result = preemptive_sjf([])
    assert result.processes == [] and result.gantt == {}


def test_non_positive_burst_rejected():
    with pytest.raises(ValueError):
        preemptive_sjf([Process(1, 0, 0, 1)])