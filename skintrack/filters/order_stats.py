from __future__ import annotations
from typing import MutableSequence, Sequence

import numpy as np

from skintrack.errors import UsageError


def _swap(data: MutableSequence[int], i: int, j: int) -> None:
    data[i], data[j] = data[j], data[i]


def partition(data: MutableSequence[int], left: int, right: int) -> int:
    """
    Partition data[left..right] around its leftmost element and return the
    pivot's final index. Everything before it is <= pivot, everything after
    it is > pivot.
    """
    pivot = data[left]
    i = left
    j = right

    while i < j:
        while i <= right and data[i] <= pivot:
            i += 1
        while data[j] > pivot:
            j -= 1
        if i < j:
            _swap(data, i, j)
    _swap(data, left, j)
    return j


def quick_sort(data: MutableSequence[int], left: int = 0, right: int | None = None) -> None:
    """Sort data[left..right] in place."""
    if right is None:
        right = len(data) - 1

    # iterate on the smaller side, stack the larger one: equal-valued runs
    # degrade partition to O(n) depth
    stack = [(left, right)]
    while stack:
        lo, hi = stack.pop()
        while lo < hi:
            j = partition(data, lo, hi)
            if j - lo < hi - j:
                stack.append((j + 1, hi))
                hi = j - 1
            else:
                stack.append((lo, j - 1))
                lo = j + 1


def _require_samples(data: Sequence[int]) -> int:
    n = len(data)
    if n == 0:
        raise UsageError("empty sample: order statistics need at least one value")
    return n


def select(data: MutableSequence[int], rank: int) -> int:
    """
    Return the value that would sit at `rank` (0-indexed) once data is sorted.
    Reorders data in place.
    """
    n = _require_samples(data)
    if not 0 <= rank < n:
        raise UsageError(f"rank {rank} out of range for {n} samples")

    lo, hi = 0, n - 1
    while lo < hi:
        j = partition(data, lo, hi)
        if j == rank:
            return data[j]
        if rank < j:
            hi = j - 1
        else:
            lo = j + 1
    return data[rank]


def lower_quartile(data: MutableSequence[int]) -> int:
    n = _require_samples(data)
    return select(data, (n - 1) // 4)


def median(data: MutableSequence[int]) -> int:
    n = _require_samples(data)
    return select(data, (n - 1) // 2)


def upper_quartile(data: MutableSequence[int]) -> int:
    n = _require_samples(data)
    return select(data, 3 * (n - 1) // 4)


def mean(data: Sequence[int]) -> float:
    _require_samples(data)
    return float(np.fromiter(data, dtype=np.float64, count=len(data)).mean())


def standard_deviation(data: Sequence[int]) -> float:
    """Population standard deviation (divides by N)."""
    _require_samples(data)
    return float(np.fromiter(data, dtype=np.float64, count=len(data)).std())
