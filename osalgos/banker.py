"""Banker's algorithm: find a safe order in which processes can finish."""

from __future__ import annotations

import argparse
from collections.abc import Sequence


def _check_rows(rows: Sequence[Sequence[int]], width: int, name: str) -> None:
    for number, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"{name} row {number} has {len(row)} entries, expected {width}")


def available_resources(
    instances: Sequence[int], allocated: Sequence[Sequence[int]]
) -> list[int]:
    """Instances of each resource left after the current allocations."""
    _check_rows(allocated, len(instances), "allocation")
    held = [sum(column) for column in zip(*allocated)] if allocated else [0] * len(instances)
    return [total - taken for total, taken in zip(instances, held)]


def safe_sequence(
    instances: Sequence[int],
    allocated: Sequence[Sequence[int]],
    maximum: Sequence[Sequence[int]],
) -> list[int]:
    """Process indices in the order they can finish.

    Processes are scanned in index order, pass after pass, until a pass lets
    none finish. If the state is unsafe, the result holds only the processes
    that could finish.
    """
    available = available_resources(instances, allocated)
    if len(maximum) != len(allocated):
        raise ValueError("the maximum and allocation matrices differ in process count")
    _check_rows(maximum, len(instances), "maximum")

    needs = [[most - held for most, held in zip(limit, row)] for limit, row in zip(maximum, allocated)]
    pending = list(range(len(allocated)))
    sequence: list[int] = []
    progress = True
    while progress:
        progress = False
        for process in list(pending):
            if all(need <= free for need, free in zip(needs[process], available)):
                sequence.append(process)
                pending.remove(process)
                available = [free + held for free, held in zip(available, allocated[process])]
                progress = True
    return sequence


def _row(text: str) -> list[int]:
    return [int(value) for value in text.split()]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="osalgos-banker",
        description="Find a safe sequence with the banker's algorithm.",
    )
    parser.add_argument("--instances", type=int, nargs="+", required=True,
                        help="total instances of each resource")
    parser.add_argument("--allocated", type=_row, nargs="+", required=True,
                        help="one quoted row of allocations per process")
    parser.add_argument("--maximum", type=_row, nargs="+", required=True,
                        help="one quoted row of maximum demands per process")
    args = parser.parse_args(argv)

    try:
        sequence = safe_sequence(args.instances, args.allocated, args.maximum)
    except ValueError as error:
        parser.error(str(error))
    print()
    print("Safe sequence: <" + "".join(f" P[{p}] " for p in sequence) + ">")
    return 0