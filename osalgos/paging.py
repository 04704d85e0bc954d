"""Page replacement policies: FIFO, optimal and least recently used."""

from __future__ import annotations

import argparse
from collections.abc import Hashable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class LruResult:
    """Outcome of an LRU run over a reference string."""

    faults: int
    hits: int


def _check_frames(frames: int) -> None:
    if frames < 1:
        raise ValueError("at least one frame is required")


def fifo_faults(pages: Sequence[Hashable], frames: int) -> int:
    """Count page faults when the oldest loaded page is evicted first."""
    _check_frames(frames)
    memory: list[Hashable | None] = [None] * frames
    pointer = 0
    faults = 0
    for page in pages:
        if page in memory:
            continue
        memory[pointer] = page
        pointer = (pointer + 1) % frames
        faults += 1
    return faults


def _victim(memory: list[Hashable | None], future: list[Hashable]) -> int:
    """Pick the slot whose page is never used again, or used farthest ahead."""
    victim, farthest = 0, -1
    for slot, resident in enumerate(memory):
        try:
            next_use = future.index(resident)
        except ValueError:
            return slot
        if next_use > farthest:
            farthest, victim = next_use, slot
    return victim


def optimal_faults(pages: Sequence[Hashable], frames: int) -> int:
    """Count page faults under Belady's optimal replacement."""
    _check_frames(frames)
    references = list(pages)
    memory: list[Hashable | None] = [None] * frames
    faults = 0
    for position, page in enumerate(references):
        if page in memory:
            continue
        memory[_victim(memory, references[position + 1:])] = page
        faults += 1
    return faults


def lru(pages: Sequence[Hashable], frames: int) -> LruResult:
    """Run least-recently-used replacement and count faults and hits."""
    _check_frames(frames)
    memory: list[Hashable | None] = [None] * frames
    last_used = [-1] * frames
    faults = hits = 0
    for clock, page in enumerate(pages):
        if page in memory:
            slot = memory.index(page)
            hits += 1
        else:
            slot = min(range(frames), key=last_used.__getitem__)
            memory[slot] = page
            faults += 1
        last_used[slot] = clock
    return LruResult(faults=faults, hits=hits)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="osalgos-paging",
        description="Compare FIFO, optimal and LRU page replacement.",
    )
    parser.add_argument("frames", type=int, help="number of page frames")
    parser.add_argument("pages", type=int, nargs="+", help="page reference string")
    args = parser.parse_args(argv)
    if args.frames < 1:
        parser.error("the number of frames must be at least 1")

    print(f"FIFO Page Replacement: Number of page faults = {fifo_faults(args.pages, args.frames)}")
    print(f"Optimal Page Replacement: Number of page faults = {optimal_faults(args.pages, args.frames)}")
    result = lru(args.pages, args.frames)
    print(f"LRU Page Replacement: Number of page faults = {result.faults}")
    print(f"hits {result.hits}")
    return 0