"""Contiguous memory allocation: best fit and first fit."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

# Best fit only accepts a block whose leftover space is below this bound.
_BEST_FIT_LIMIT = 10000


@dataclass(frozen=True)
class Placement:
    """Where a file landed: a block index and the space left over, or nothing."""

    file_size: int
    block: int | None = None
    fragment: int | None = None

    @property
    def allocated(self) -> bool:
        return self.block is not None


def best_fit(blocks: Sequence[int], files: Sequence[int]) -> list[Placement]:
    """Give each file the free block that leaves the least space unused."""
    used: set[int] = set()
    placements = []
    for size in files:
        fits = [
            (block_size - size, index)
            for index, block_size in enumerate(blocks)
            if index not in used and 0 <= block_size - size < _BEST_FIT_LIMIT
        ]
        if fits:
            fragment, index = min(fits)
            used.add(index)
            placements.append(Placement(size, index, fragment))
        else:
            placements.append(Placement(size))
    return placements


def first_fit(blocks: Sequence[int], files: Sequence[int]) -> list[Placement]:
    """Give each file the first free block large enough to hold it."""
    used: set[int] = set()
    placements = []
    for size in files:
        index = next(
            (i for i, block_size in enumerate(blocks) if i not in used and block_size >= size),
            None,
        )
        if index is None:
            placements.append(Placement(size))
        else:
            used.add(index)
            placements.append(Placement(size, index, blocks[index] - size))
    return placements


def format_table(title: str, blocks: Sequence[int], placements: Sequence[Placement]) -> str:
    """Render placements as a tab-separated table under a title."""
    lines = [f"{title}:", "", "File No\tFile Size\tBlock No\tBlock Size\tFragment"]
    for number, placement in enumerate(placements, start=1):
        if placement.block is None:
            lines.append(f"{number}\t\t{placement.file_size}\t\tNot Allocated")
        else:
            lines.append(
                f"{number}\t\t{placement.file_size}\t\t{placement.block + 1}"
                f"\t\t{blocks[placement.block]}\t\t{placement.fragment}"
            )
    return "\n".join(lines)


_METHODS = {
    "best": ("Best Fit Allocation", best_fit),
    "first": ("First Fit Allocation", first_fit),
}


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="osalgos-allocation",
        description="Place files into memory blocks by best fit or first fit.",
    )
    parser.add_argument("method", choices=list(_METHODS))
    parser.add_argument("--blocks", type=int, nargs="+", required=True, help="block sizes")
    parser.add_argument("--files", type=int, nargs="+", required=True, help="file sizes")
    args = parser.parse_args(argv)

    title, method = _METHODS[args.method]
    print()
    print(format_table(title, args.blocks, method(args.blocks, args.files)))
    return 0