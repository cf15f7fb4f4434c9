# cpusched

A small simulator for classic CPU scheduling algorithms. It generates a set
of processes, runs each one through four schedulers on the same input and
reports per-process completion, turnaround and waiting times, their
averages, and the number of context switches. The timeline of each run is
saved as a Gantt-chart CSV file.

Time advances in whole milliseconds. A context switch is counted whenever
the CPU passes directly from one process to a different one; a switch into
or out of an idle period is not counted.

## Algorithms

| Function | Module | Policy |
|---|---|---|
| `preemptive_sjf(processes)` | `cpusched.sjf` | Shortest remaining time first, re-evaluated every millisecond |
| `rr_priority(processes, time_quantum=5)` | `cpusched.rr_priority` | Round robin within each priority level (1, 2, 3); the highest non-empty level is served first, and a running process keeps the CPU for its whole quantum |
| `multilevel_feedback_queue(processes, quantum_q0=5, quantum_q1=10)` | `cpusched.mlfq` | Three queues: round robin with `quantum_q0`, round robin with `quantum_q1`, then first-come first-served to completion; a process that uses up its quantum drops one level |
| `priority_sjf_aging(processes, aging_threshold=15, aging_boost=1)` | `cpusched.custom` | Every millisecond, pick by priority, then by shortest remaining time; a ready process that has not run for `aging_threshold` ms has its priority number lowered by `aging_boost`, never below 1 |

Priority 1 is the highest. Every scheduler raises `ValueError` for a process
with a burst time of zero or less. `rr_priority` also requires priorities in
1–3 and unique process ids, and `multilevel_feedback_queue` requires unique
ids; both raise `ValueError` for a quantum that is not positive.

The schedulers work on copies, so the processes passed in are left as they
were. Each returns a `ScheduleResult`.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Command line

```
cpusched [-n NUM_PROCESSES] [--seed SEED] [-o OUTPUT_DIR]
```

Generates random processes (arrival time 0, 5 or 10 ms, burst time 6–28 ms,
priority 1–3), prints them as a table, then runs every algorithm in turn,
printing a result table for each and writing one Gantt-chart CSV per
algorithm:

- `preeSJF_gantt_data.csv`
- `RR_priority_gantt_data.csv`
- `MLFQ_gantt_data.csv`
- `custom_gantt_data.csv`

Options:

- `-n`, `--num-processes`: number of processes to generate (default 10; must not be negative)
- `--seed`: seed for the random generator, for a repeatable workload
- `-o`, `--output-dir`: directory for the CSV files (default: the current directory)

## Library use

```python
import random

from cpusched.process import Process, generate_processes
from cpusched.sjf import preemptive_sjf
from cpusched.report import format_gantt_chart, print_results

processes = generate_processes(5, random.Random(42))
result = preemptive_sjf(processes)

print_results(result.processes, result.context_switches, result.algo_name)
print(format_gantt_chart(result.gantt))
avg_turnaround, avg_waiting = result.averages()

# Or build a workload by hand: Process(id, arrival_time, burst_time, priority)
custom = [Process(1, 0, 8, 2), Process(2, 3, 4, 1)]
```

`cpusched.process` holds:

- `Process`, a dataclass with `id`, `arrival_time`, `burst_time` and
  `priority`, plus scheduling state (`remaining_burst_time`, `start_time`,
  `completion_time`, `last_run_time`, `is_started`) that `reset()` restores.
  Its `turnaround_time` and `waiting_time` properties are computed from the
  completion time.
- `ScheduleResult`, with `algo_name`, `processes` (sorted by id, with
  `completion_time` filled in), `gantt` (a mapping from millisecond to the
  running process id, `-1` when idle) and `context_switches`. Its
  `averages()` method returns the average turnaround and waiting times
  (NaN for an empty run).
- `generate_processes(num_processes, rng=None)`, which makes processes with
  ids 1..n using the given `random.Random` or a fresh one.

`cpusched.report` formats and prints result tables (`format_results`,
`print_results`), renders a two-row text Gantt chart (`format_gantt_chart`,
`print_gantt_chart`) and writes the timeline as CSV with a
`Time,ProcessID` header in time order (`save_gantt_chart_csv`).

`cpusched.cli.run_all(processes, output_dir=".")` runs all four algorithms
on one list of processes, prints their results, writes their CSV files into
the given directory and returns the list of `ScheduleResult`s;
`format_initial_processes` renders the input table.

## What it does not do

The Gantt chart is produced only as CSV data and as a text chart from
`format_gantt_chart`; the package draws no graphical chart. The command line
always uses a randomly generated workload and has no option for reading
processes from a file.