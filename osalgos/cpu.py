"""CPU scheduling: preemptive SJF, round robin and non-preemptive priority."""

from __future__ import annotations

import argparse
import random
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Process:
    """A process to schedule; a lower priority number runs first."""

    id: int
    burst: int
    arrival: int = 0
    priority: int = 0

    def __post_init__(self) -> None:
        if self.burst < 1:
            raise ValueError(f"process {self.id}: burst time must be at least 1")
        if self.arrival < 0:
            raise ValueError(f"process {self.id}: arrival time cannot be negative")


@dataclass(frozen=True)
class ProcessResult:
    """When a process completed, with the times derived from it."""

    process: Process
    completion: int

    @property
    def turnaround(self) -> int:
        return self.completion - self.process.arrival

    @property
    def waiting(self) -> int:
        return self.turnaround - self.process.burst


def _collect(processes: Sequence[Process], completion: dict[int, int]) -> list[ProcessResult]:
    return [ProcessResult(process, completion[index]) for index, process in enumerate(processes)]


def _next_arrival(processes: Sequence[Process], pending: Sequence[int]) -> int:
    return min(processes[index].arrival for index in pending)


def preemptive_sjf(processes: Sequence[Process]) -> list[ProcessResult]:
    """Each time unit, run the arrived process with the least remaining time."""
    remaining = [process.burst for process in processes]
    completion: dict[int, int] = {}
    clock = 0
    while len(completion) < len(processes):
        pending = [i for i in range(len(processes)) if i not in completion]
        ready = [i for i in pending if processes[i].arrival <= clock]
        if not ready:
            clock = _next_arrival(processes, pending)
            continue
        chosen = min(ready, key=remaining.__getitem__)
        remaining[chosen] -= 1
        clock += 1
        if remaining[chosen] == 0:
            completion[chosen] = clock
    return _collect(processes, completion)


def round_robin(processes: Sequence[Process], quantum: int) -> list[ProcessResult]:
    """Serve arrived processes in turn, each for at most one quantum."""
    if quantum < 1:
        raise ValueError("the time quantum must be at least 1")
    remaining = [process.burst for process in processes]
    completion: dict[int, int] = {}
    clock = 0
    queue: deque[int] = deque(i for i, p in enumerate(processes) if p.arrival <= clock)

    def admit(running: int | None) -> None:
        for index, process in enumerate(processes):
            if (
                process.arrival <= clock
                and index not in completion
                and index not in queue
                and index != running
            ):
                queue.append(index)

    while len(completion) < len(processes):
        if not queue:
            pending = [i for i in range(len(processes)) if i not in completion]
            clock = max(clock, _next_arrival(processes, pending))
            admit(None)
            continue
        current = queue.popleft()
        run = min(quantum, remaining[current])
        remaining[current] -= run
        clock += run
        if remaining[current] == 0:
            completion[current] = clock
        admit(current)
        if remaining[current] > 0:
            queue.append(current)
    return _collect(processes, completion)


def non_preemptive_priority(processes: Sequence[Process]) -> list[ProcessResult]:
    """Run the arrived process with the lowest priority number to completion."""
    pending = list(range(len(processes)))
    completion: dict[int, int] = {}
    clock = 0
    while pending:
        ready = [i for i in pending if processes[i].arrival <= clock]
        if not ready:
            clock = _next_arrival(processes, pending)
            continue
        chosen = min(ready, key=lambda i: processes[i].priority)
        clock += processes[chosen].burst
        completion[chosen] = clock
        pending.remove(chosen)
    return _collect(processes, completion)


def averages(results: Sequence[ProcessResult]) -> tuple[float, float]:
    """Average waiting time and average turnaround time."""
    if not results:
        raise ValueError("no results to average")
    count = len(results)
    return (
        sum(r.waiting for r in results) / count,
        sum(r.turnaround for r in results) / count,
    )


def format_results(results: Sequence[ProcessResult]) -> str:
    """Render results as a tab-separated table."""
    lines = ["Process ID\tBurst Time\tArrival Time\tCompletion Time\tWaiting Time\tTurnaround Time"]
    lines.extend(
        f"{r.process.id}\t\t{r.process.burst}\t\t{r.process.arrival}"
        f"\t\t{r.completion}\t\t{r.waiting}\t\t{r.turnaround}"
        for r in results
    )
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="osalgos-cpu",
        description="Simulate CPU scheduling algorithms.",
    )
    parser.add_argument("algorithm", choices=["sjf", "rr", "priority"])
    parser.add_argument("--burst", type=int, nargs="+", required=True, help="burst times")
    parser.add_argument("--arrival", type=int, nargs="+", help="arrival times (default 0)")
    parser.add_argument("--priority", type=int, nargs="+",
                        help="priorities (default random 1-10)")
    parser.add_argument("--quantum", type=int, help="time quantum for round robin")
    args = parser.parse_args(argv)

    count = len(args.burst)
    arrivals = args.arrival if args.arrival is not None else [0] * count
    priorities = (
        args.priority if args.priority is not None
        else [random.randint(1, 10) for _ in range(count)]
    )
    if len(arrivals) != count or len(priorities) != count:
        parser.error("burst, arrival and priority lists must have the same length")
    if args.algorithm == "rr" and args.quantum is None:
        parser.error("round robin needs --quantum")

    try:
        processes = [
            Process(number, burst, arrival, priority)
            for number, (burst, arrival, priority) in enumerate(
                zip(args.burst, arrivals, priorities), start=1
            )
        ]
        if args.algorithm == "sjf":
            results = preemptive_sjf(processes)
        elif args.algorithm == "rr":
            results = round_robin(processes, args.quantum)
        else:
            results = non_preemptive_priority(processes)
    except ValueError as error:
        parser.error(str(error))

    waiting, turnaround = averages(results)
    print()
    print(f"Average Waiting Time: {waiting:.2f}")
    print(f"Average Turnaround Time: {turnaround:.2f}")
    print()
    print(format_results(results))
    return 0