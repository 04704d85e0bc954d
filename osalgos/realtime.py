"""Real-time scheduling over one hyperperiod: rate monotonic and EDF."""

from __future__ import annotations

import argparse
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Task:
    """A periodic task released at time 0 and every period after."""

    id: int
    exec_time: int
    period: int
    deadline: int

    def __post_init__(self) -> None:
        if self.period < 1:
            raise ValueError(f"task {self.id}: period must be at least 1")
        if self.exec_time < 0:
            raise ValueError(f"task {self.id}: execution time cannot be negative")


@dataclass(frozen=True)
class Slot:
    """One time unit: the task that ran (None when idle) and any missed deadlines."""

    time: int
    task: int | None
    missed: tuple[int, ...] = ()


def hyper_period(tasks: Sequence[Task]) -> int:
    """Least common multiple of all task periods."""
    if not tasks:
        raise ValueError("at least one task is required")
    return math.lcm(*(task.period for task in tasks))


def _simulate(tasks: Sequence[Task], rank: Callable[[Task, int], int]) -> list[Slot]:
    horizon = hyper_period(tasks)
    remaining = [0] * len(tasks)
    due = [0] * len(tasks)
    slots = []
    for time in range(horizon):
        missed = []
        for index, task in enumerate(tasks):
            if time % task.period == 0:
                if remaining[index] > 0:
                    missed.append(task.id)
                remaining[index] = task.exec_time
                due[index] = time + task.deadline
        ready = [index for index, left in enumerate(remaining) if left > 0]
        chosen = min(ready, key=lambda i: rank(tasks[i], due[i]), default=None)
        if chosen is None:
            slots.append(Slot(time, None, tuple(missed)))
        else:
            remaining[chosen] -= 1
            slots.append(Slot(time, tasks[chosen].id, tuple(missed)))
    return slots


def rate_monotonic(tasks: Sequence[Task]) -> list[Slot]:
    """Schedule with fixed priorities: the shorter the period, the higher."""
    return _simulate(tasks, lambda task, due: task.period)


def earliest_deadline_first(tasks: Sequence[Task]) -> list[Slot]:
    """Schedule the ready job whose absolute deadline comes first."""
    return _simulate(tasks, lambda task, due: due)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="osalgos-realtime",
        description="Simulate RMS or EDF scheduling over one hyperperiod.",
    )
    parser.add_argument("algorithm", choices=["rms", "edf"])
    parser.add_argument("--task", type=int, nargs=3, action="append", required=True,
                        metavar=("EXEC", "PERIOD", "DEADLINE"), help="one periodic task")
    args = parser.parse_args(argv)

    try:
        tasks = [
            Task(number, exec_time, period, deadline)
            for number, (exec_time, period, deadline) in enumerate(args.task, start=1)
        ]
    except ValueError as error:
        parser.error(str(error))

    schedule = rate_monotonic if args.algorithm == "rms" else earliest_deadline_first
    for slot in schedule(tasks):
        for task_id in slot.missed:
            print(f"Missed deadline for Task {task_id} at time {slot.time}")
        if slot.task is None:
            print(f"Time {slot.time}: CPU is idle")
        else:
            print(f"Time {slot.time}:  {slot.task}")
    return 0