"""Disk head scheduling: SSTF, SCAN, C-SCAN and C-LOOK on a 200-cylinder disk."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import pairwise

CYLINDERS = 200
_LAST = CYLINDERS - 1


@dataclass(frozen=True)
class SeekResult:
    """The positions reported as the head's route and the total head movement.

    For SCAN the route starts with the initial head position; for C-SCAN it
    holds cylinder 0 where the head returns to the start of the disk.
    """

    order: tuple[int, ...]
    total: int


def _travel(path: Iterable[int]) -> int:
    return sum(abs(after - before) for before, after in pairwise(path))


def _upward(requests: Sequence[int], start: int) -> list[int]:
    return sorted(r for r in requests if start <= r <= _LAST)


def sstf(requests: Sequence[int], start: int) -> SeekResult:
    """Always serve the pending request closest to the head."""
    pending = list(requests)
    head = start
    order: list[int] = []
    total = 0
    while pending:
        nearest = min(pending, key=lambda r, h=head: abs(h - r))
        pending.remove(nearest)
        total += abs(head - nearest)
        head = nearest
        order.append(nearest)
    return SeekResult(tuple(order), total)


def scan(requests: Sequence[int], start: int) -> SeekResult:
    """Sweep up to the last cylinder, then back down."""
    upward = _upward(requests, start)
    downward = sorted((r for r in requests if 0 <= r <= _LAST and r < start), reverse=True)
    total = _travel([start, *upward, _LAST, *downward])
    return SeekResult((start, *upward, *downward), total)


def c_scan(requests: Sequence[int], start: int) -> SeekResult:
    """Sweep up to the last cylinder, jump to cylinder 0 and sweep up again."""
    upward = _upward(requests, start)
    wrapped = sorted(r for r in requests if 0 <= r < start)
    head = upward[-1] if upward else start
    total = _travel([start, *upward]) + (_LAST - head)
    if wrapped:
        total += _LAST + _travel([0, *wrapped])
    return SeekResult((*upward, 0, *wrapped), total)


def c_look(requests: Sequence[int], start: int) -> SeekResult:
    """Sweep up to the highest request, then serve the lower ones ascending."""
    upward = _upward(requests, start)
    wrapped = sorted(r for r in requests if 0 <= r < start)
    return SeekResult((*upward, *wrapped), _travel([start, *upward, *wrapped]))


_ALGORITHMS = {
    "sstf": ("SSTF", sstf),
    "scan": ("SCAN", scan),
    "c-scan": ("C-SCAN", c_scan),
    "c-look": ("C-LOOK", c_look),
}


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="osalgos-disk",
        description=f"Simulate disk head scheduling on cylinders 0-{_LAST}.",
    )
    parser.add_argument("algorithm", choices=list(_ALGORITHMS))
    parser.add_argument("start", type=int, help=f"initial head position (0-{_LAST})")
    parser.add_argument("requests", type=int, nargs="*", help="cylinder requests")
    args = parser.parse_args(argv)

    name, algorithm = _ALGORITHMS[args.algorithm]
    result = algorithm(args.requests, args.start)
    print(f"{name} Disk Scheduling Algorithm:")
    print("Order of processing requests: " + "".join(f"{p} " for p in result.order))
    print(f"Total Head Movement: {result.total}")
    print()
    return 0