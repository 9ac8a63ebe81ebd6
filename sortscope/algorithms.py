"""
The four instrumented sorting algorithms.

Each implementation sorts ``values`` in place, counting comparisons and
swaps into ``counters`` and handing the array to ``emit`` at its
snapshot points.  Callers go through ``sortscope.runner.sort``, which
copies the input and times the call.
"""

from enum import Enum
from typing import Callable, Dict, List

from sortscope.counters import Counters
from sortscope.snapshots import SnapshotEmitter


class Algorithm(Enum):
    BUBBLE = ("bubble", "Bubble Sort", "B")
    SELECTION = ("selection", "Selection Sort", "S")
    INSERTION = ("insertion", "Insertion Sort", "I")
    QUICK = ("quick", "Quick Sort", "Q")

    def __init__(self, key: str, title: str, letter: str):
        self.key = key
        self.title = title
        self.letter = letter

    def __str__(self):
        return self.title

    @classmethod
    def from_letter(cls, letter: str) -> "Algorithm":
        for algorithm in cls:
            if algorithm.letter == letter.upper():
                return algorithm
        raise ValueError(f"Unknown algorithm letter: {letter}")

    @classmethod
    def from_key(cls, key: str) -> "Algorithm":
        for algorithm in cls:
            if algorithm.key == key.lower():
                return algorithm
        raise ValueError(f"Unknown algorithm: {key}")


SortFunction = Callable[[List[int], Counters, SnapshotEmitter], None]

_implementations: Dict[Algorithm, SortFunction] = {}


def implements(algorithm: Algorithm) -> Callable[[SortFunction], SortFunction]:
    """
    A decorator registering a function as the implementation of ``algorithm``.
    """

    def decorator(func: SortFunction) -> SortFunction:
        _implementations[algorithm] = func
        return func

    return decorator


def implementation(algorithm: Algorithm) -> SortFunction:
    return _implementations[algorithm]


@implements(Algorithm.BUBBLE)
def bubble_sort(values: List[int], counters: Counters, emit: SnapshotEmitter) -> None:
    n = len(values)
    for i in range(n - 1):
        swapped = False
        for j in range(n - 1 - i):
            counters.compare()
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                counters.swap()
                swapped = True
            emit(values)
        # a pass without swaps means the rest is already in order
        if not swapped:
            break


@implements(Algorithm.SELECTION)
def selection_sort(
    values: List[int], counters: Counters, emit: SnapshotEmitter
) -> None:
    n = len(values)
    for i in range(n):
        min_index = i
        for j in range(i + 1, n):
            counters.compare()
            if values[j] < values[min_index]:
                min_index = j

        if min_index != i:
            values[i], values[min_index] = values[min_index], values[i]
            counters.swap()
        emit(values)


@implements(Algorithm.INSERTION)
def insertion_sort(
    values: List[int], counters: Counters, emit: SnapshotEmitter
) -> None:
    for i in range(1, len(values)):
        key = values[i]
        j = i - 1
        while j >= 0:
            counters.compare()
            if values[j] <= key:
                break
            # a shift moves one element; it is still reported as a swap
            values[j + 1] = values[j]
            counters.swap()
            j -= 1
        values[j + 1] = key
        emit(values)


def partition(values: List[int], low: int, high: int, counters: Counters) -> int:
    """
    Lomuto partition of values[low..high] around values[high].
    Returns the final index of the pivot.
    """
    pivot = values[high]
    i = low - 1

    for j in range(low, high):
        counters.compare()
        if values[j] <= pivot:
            i += 1
            values[i], values[j] = values[j], values[i]
            counters.swap()

    values[i + 1], values[high] = values[high], values[i + 1]
    counters.swap()
    return i + 1


@implements(Algorithm.QUICK)
def quick_sort(values: List[int], counters: Counters, emit: SnapshotEmitter) -> None:
    # Pending (low, high) ranges.  The right half is pushed before the left
    # so ranges are partitioned in the same order as the recursive version.
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot_index = partition(values, low, high, counters)
        emit(values)
        pending.append((pivot_index + 1, high))
        pending.append((low, pivot_index - 1))
