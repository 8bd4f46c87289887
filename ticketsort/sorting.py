"""Array sorting routines, with instrumented variants that count their work."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class SortStats:
    """Work done by an instrumented sort."""

    comparisons: int = 0
    swaps: int = 0


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy using a full-pass bubble sort."""
    result, _ = bubble_sort_counted(values)
    return result


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy using selection sort."""
    result = list(values)
    for i in range(len(result)):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy; each item goes before the first larger one already placed."""
    result: list[int] = []
    for value in values:
        position = next(
            (index for index, placed in enumerate(result) if value < placed),
            len(result),
        )
        result.insert(position, value)
    return result


def _partition(items: list[int], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for index in range(low, high + 1):
        if items[index] <= pivot:
            boundary += 1
            items[index], items[boundary] = items[boundary], items[index]
    return boundary


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy using quicksort with the last element as pivot."""
    result = list(values)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot_index = _partition(result, low, high)
        pending.append((low, pivot_index - 1))
        pending.append((pivot_index + 1, high))
    return result


def _shell_gaps(size: int) -> Iterator[int]:
    """Yield the decreasing gap sequence used by the shell sort."""
    gap = 0
    while gap < size:
        gap = 3 * gap + 1
    gap = (gap - 1) // 3
    while gap > 0:
        yield gap
        if gap == 2:
            gap = 1
        elif gap in (3, 4):
            gap = 2
        else:
            gap = (gap - 1) // 3


def shell_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy using shell sort over the 3g+1 gap sequence."""
    result = list(values)
    for gap in _shell_gaps(len(result)):
        for index in range(gap, len(result)):
            key = result[index]
            slot = index
            while slot >= gap and result[slot - gap] > key:
                result[slot] = result[slot - gap]
                slot -= gap
            result[slot] = key
    return result


def bubble_sort_counted(values: Iterable[int]) -> tuple[list[int], SortStats]:
    """Bubble sort that always makes every pass, counting comparisons and swaps."""
    result = list(values)
    comparisons = swaps = 0
    for _ in range(len(result)):
        for index in range(len(result) - 1):
            comparisons += 1
            if result[index] > result[index + 1]:
                swaps += 1
                result[index], result[index + 1] = result[index + 1], result[index]
    return result, SortStats(comparisons, swaps)


def optimized_bubble_sort_counted(values: Iterable[int]) -> tuple[list[int], SortStats]:
    """Bubble sort that shrinks each pass and stops once a pass swaps nothing."""
    result = list(values)
    comparisons = swaps = 0
    swapped = True
    passes = 0
    while passes < len(result) and swapped:
        swapped = False
        for index in range(len(result) - 1 - passes):
            comparisons += 1
            if result[index] > result[index + 1]:
                swaps += 1
                swapped = True
                result[index], result[index + 1] = result[index + 1], result[index]
        passes += 1
    return result, SortStats(comparisons, swaps)


def list_insertion_sort(values: Iterable[int]) -> list[int]:
    """Sort by building a descending list, then reading it back from the end."""
    descending: list[int] = []
    for value in values:
        position = next(
            (index for index, placed in enumerate(descending) if placed < value),
            len(descending),
        )
        descending.insert(position, value)
    return descending[::-1]


def random_values(count: int, upper: int = 100, seed: int | None = None) -> list[int]:
    """Return ``count`` pseudo-random integers in ``[0, upper)``."""
    if count < 0:
        raise ValueError("count must not be negative")
    if upper <= 0:
        raise ValueError("upper must be positive")
    rng = random.Random(seed)
    return [rng.randrange(upper) for _ in range(count)]


_Plain = Callable[[Iterable[int]], list[int]]
_Counted = Callable[[Iterable[int]], tuple[list[int], SortStats]]

_PLAIN: dict[str, _Plain] = {
    "bubble": bubble_sort,
    "selection": selection_sort,
    "insertion": insertion_sort,
    "quick": quick_sort,
    "shell": shell_sort,
    "list": list_insertion_sort,
}

_COUNTED: dict[str, _Counted] = {
    "bubble-counted": bubble_sort_counted,
    "bubble-optimized": optimized_bubble_sort_counted,
}


def _format(values: Sequence[int]) -> str:
    return " ".join(str(value) for value in values)


def main(argv: Sequence[str] | None = None) -> int:
    """Sort a random array with the chosen algorithm and print it before and after."""
    parser = argparse.ArgumentParser(description="Sort a random array of integers.")
    parser.add_argument("algorithm", choices=sorted([*_PLAIN, *_COUNTED]))
    parser.add_argument("--size", type=int, default=10)
    parser.add_argument("--upper", type=int, default=100)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    try:
        values = random_values(args.size, args.upper, args.seed)
    except ValueError as error:
        parser.error(str(error))

    print(f"Before: {_format(values)}")
    if args.algorithm in _COUNTED:
        result, stats = _COUNTED[args.algorithm](values)
        print(f"After: {_format(result)}")
        print(f"Comparisons: {stats.comparisons}. Swaps: {stats.swaps}.")
    else:
        result = _PLAIN[args.algorithm](values)
        print(f"After: {_format(result)}")
    return 0