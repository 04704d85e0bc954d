# osalgos

Small, readable implementations of algorithms taught in an operating-systems
course. Each one can be used as a library function or run as a command.

## What is inside

| Module               | Contents |
|----------------------|----------|
| `osalgos.paging`     | FIFO, optimal and LRU page replacement: `fifo_faults`, `optimal_faults`, `lru` (returns an `LruResult` with `faults` and `hits`) |
| `osalgos.disk`       | SSTF, SCAN, C-SCAN and C-LOOK on cylinders 0–199: `sstf`, `scan`, `c_scan`, `c_look` (each returns a `SeekResult` with `order` and `total`) |
| `osalgos.allocation` | Best-fit and first-fit placement of files into blocks: `best_fit`, `first_fit` (lists of `Placement`), `format_table` |
| `osalgos.banker`     | Banker's algorithm: `available_resources`, `safe_sequence` |
| `osalgos.cpu`        | Preemptive SJF, round robin and non-preemptive priority: `Process`, `ProcessResult`, `preemptive_sjf`, `round_robin`, `non_preemptive_priority`, `averages`, `format_results` |
| `osalgos.realtime`   | Rate-monotonic and earliest-deadline-first schedules over one hyperperiod: `Task`, `Slot`, `hyper_period`, `rate_monotonic`, `earliest_deadline_first` |
| `osalgos.processes`  | String sorting and process ids: `sort_by_first_char`, `bubble_sort`, `selection_sort`, `process_ids` |

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from osalgos.paging import fifo_faults, optimal_faults, lru
from osalgos.disk import sstf
from osalgos.cpu import Process, round_robin, averages

pages = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2]
print(fifo_faults(pages, 3))
print(optimal_faults(pages, 3))
print(lru(pages, 3))                  # LruResult(faults=..., hits=...)

print(sstf([98, 183, 37, 122, 14, 124, 65, 67], 53))

results = round_robin([Process(1, 5), Process(2, 3, arrival=1)], quantum=2)
print(averages(results))              # (average waiting, average turnaround)
```

Notes on behaviour:

- SCAN reports the starting head position as the first entry of its order,
  and C-SCAN reports cylinder 0 where the head jumps back to the start.
  SCAN, C-SCAN and C-LOOK ignore requests outside cylinders 0–199.
- `safe_sequence` returns only the processes that could finish; if the state
  is unsafe the list is shorter than the number of processes.
- In `osalgos.cpu` a lower priority number runs first.
- `rate_monotonic` and `earliest_deadline_first` return one `Slot` per time
  unit, with `task` set to `None` when the CPU is idle and `missed` listing
  tasks whose previous job had not finished when they were released again.

## Command line

All input is given as arguments; `--help` on any command shows its options.

```
osalgos-paging 3 7 0 1 2 0 3 0 4 2 3 0 3 2
osalgos-disk sstf 53 98 183 37 122 14 124 65 67        # or scan, c-scan, c-look
osalgos-allocation best --blocks 100 500 200 300 600 --files 212 417 112 426   # or first
osalgos-banker --instances 10 5 7 \
    --allocated "0 1 0" "2 0 0" "3 0 2" "2 1 1" "0 0 2" \
    --maximum "7 5 3" "3 2 2" "9 0 2" "2 2 2" "4 3 3"
osalgos-cpu rr --burst 5 3 8 --arrival 0 1 2 --quantum 2   # or sjf, priority
osalgos-realtime rms --task 1 4 4 --task 2 6 6              # or edf
osalgos-processes sort banana apple cherry                  # or first-char, ids
```

`osalgos-cpu` picks a random priority from 1 to 10 for each process unless
`--priority` is given.

## What it does not do

The package contains no concurrency demonstrations: there is no
producer–consumer buffer, no readers–writers lock and nothing that starts
threads. `osalgos.processes` sorts strings and reports process ids within the
current process; it does not start child processes.