"""String sorting exercises and process identifiers."""

from __future__ import annotations

import argparse
import os
from collections.abc import Iterable, Sequence


def sort_by_first_char(strings: Iterable[str]) -> list[str]:
    """Stable sort on the first character only; empty strings come first."""
    return sorted(strings, key=lambda text: text[:1])


def bubble_sort(strings: Iterable[str]) -> list[str]:
    """Sort with bubble sort, returning a new list."""
    items = list(strings)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for i in range(end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
    return items


def selection_sort(strings: Iterable[str]) -> list[str]:
    """Sort with selection sort, returning a new list."""
    items = list(strings)
    for start in range(len(items) - 1):
        smallest = min(range(start, len(items)), key=items.__getitem__)
        if smallest != start:
            items[start], items[smallest] = items[smallest], items[start]
    return items


def process_ids() -> tuple[int, int]:
    """The current process id and its parent's."""
    return os.getpid(), os.getppid()


def _tabbed(strings: Iterable[str]) -> str:
    return "".join(f"{text}\t" for text in strings)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="osalgos-processes",
        description="Sort strings or show process identifiers.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    first = commands.add_parser("first-char", help="sort strings by their first character")
    first.add_argument("strings", nargs="*")
    full = commands.add_parser("sort", help="sort strings with bubble and selection sort")
    full.add_argument("strings", nargs="*")
    commands.add_parser("ids", help="show the process and parent process ids")
    args = parser.parse_args(argv)

    if args.command == "first-char":
        print("sorted strings are")
        print(_tabbed(sort_by_first_char(args.strings)))
        print(" unsorted strings are ")
        print(_tabbed(args.strings))
    elif args.command == "sort":
        print("1st child sorted strings:")
        print(_tabbed(bubble_sort(args.strings)))
        print("2nd child sorted strings:")
        print(_tabbed(selection_sort(args.strings)))
    else:
        pid, ppid = process_ids()
        print(f"process pid is {pid}")
        print(f"process ppid is {ppid}")
    return 0