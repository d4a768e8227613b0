"""Comparator-driven sorting helpers and a fork-join parallel merge sort.

Every function here works in place on a caller-owned mutable sequence and
orders elements with a ``less(a, b) -> bool`` predicate that must define a
strict weak ordering. Nothing is returned except where noted; callers should
not assume the original ordering survives.

The centrepiece is `parallel_sort`, which splits large ranges in half, sorts
the left half on a worker thread while the current thread sorts the right
half, waits for the worker, and merges the two halves. The parallelism budget
is halved at each split so concurrent fan-out always terminates.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, MutableSequence, Sequence
from concurrent.futures import Executor, ThreadPoolExecutor, wait
from functools import cmp_to_key
from itertools import pairwise
from typing import Any, TypeVar

from sortkit.config import PARALLEL_THRESHOLD

T = TypeVar("T")
K = TypeVar("K")

logger = logging.getLogger(__name__)

THREAD_NAME_PREFIX = "sortkit"  # pragma: no mutate


# ============================================================================
#                               Helpers
# ============================================================================


def _as_key(less: Callable[[T, T], bool]) -> Callable[[T], Any]:
    """Adapt a less-predicate into a ``key=`` callable for the builtin sort."""

    def compare(a: T, b: T) -> int:
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    return cmp_to_key(compare)


def _write_back(sequence: MutableSequence[T], lo: int, items: Iterable[T]) -> None:
    for offset, item in enumerate(items):
        sequence[lo + offset] = item


def _sort_range(
    sequence: MutableSequence[T], lo: int, hi: int, less: Callable[[T, T], bool]
) -> None:
    """Sequentially sort ``sequence[lo:hi]`` in place."""
    ordered = sorted((sequence[k] for k in range(lo, hi)), key=_as_key(less))
    _write_back(sequence, lo, ordered)


# ============================================================================
#                           Comparator sorts
# ============================================================================


def sort_by(sequence: MutableSequence[T], less: Callable[[T, T], bool]) -> None:
    """Sort a sequence in place using a custom comparator.

    Args:
        sequence: The sequence to sort.
        less: Returns True when its first argument must sort before its second.
    """
    _sort_range(sequence, 0, len(sequence), less)


def sort_by_key(
    sequence: MutableSequence[T],
    key: Callable[[T], K],
    less_key: Callable[[K, K], bool],
) -> None:
    """Sort a sequence in place by a key extracted from each element.

    Args:
        sequence: The sequence to sort.
        key: Extracts the comparison key from an element.
        less_key: Orders two extracted keys.
    """
    sort_by(sequence, lambda a, b: less_key(key(a), key(b)))


def sort_by_key_ordered(sequence: MutableSequence[T], key: Callable[[T], Any]) -> None:
    """Sort a sequence in place by a naturally ordered key (anything supporting ``<``)."""
    _write_back(sequence, 0, sorted(sequence, key=key))


# ============================================================================
#                           Parallel merge sort
# ============================================================================


def parallel_sort(
    sequence: MutableSequence[T], less: Callable[[T, T], bool], parallelism: int
) -> None:
    """Sort a sequence in place with a fork-join parallel merge sort.

    Sequences shorter than `PARALLEL_THRESHOLD`, or a ``parallelism`` of 1 or
    less, fall back to the sequential comparator sort. Otherwise the range is
    split at its midpoint; the left half is sorted on a worker thread and the
    right half on the calling thread, each with half the budget, and the two
    are merged once the worker has finished.

    Equal elements are merged left-first. Whole-sort stability is not part of
    the contract, although the sequential fallback is the stable builtin sort.

    Args:
        sequence: The sequence to sort. It is mutated; nothing is returned.
        less: Strict weak ordering predicate. Exceptions it raises propagate
            to the caller once every in-flight branch has finished.
        parallelism: Upper bound on concurrent sort branches. Values of 1 or
            less disable concurrency.
    """
    size = len(sequence)
    if size < 2:
        return

    if parallelism <= 1 or size < PARALLEL_THRESHOLD:
        logger.debug(
            "Sorting %d items sequentially (parallelism=%d)", size, parallelism
        )
        _sort_range(sequence, 0, size, less)
        return

    logger.debug("Sorting %d items with parallelism=%d", size, parallelism)
    # A budget of p spawns at most p - 1 tasks, so every blocked parent's
    # child gets its own worker.
    with ThreadPoolExecutor(
        max_workers=parallelism - 1, thread_name_prefix=THREAD_NAME_PREFIX
    ) as executor:
        _parallel_sort_range(sequence, 0, size, less, parallelism, executor)


def _parallel_sort_range(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    sequence: MutableSequence[T],
    lo: int,
    hi: int,
    less: Callable[[T, T], bool],
    parallelism: int,
    executor: Executor,
) -> None:
    if hi - lo < 2:
        return

    if parallelism <= 1 or hi - lo < PARALLEL_THRESHOLD:
        _sort_range(sequence, lo, hi, less)
        return

    mid = lo + (hi - lo) // 2
    budget = parallelism // 2
    left = executor.submit(
        _parallel_sort_range, sequence, lo, mid, less, budget, executor
    )
    try:
        _parallel_sort_range(sequence, mid, hi, less, budget, executor)
    finally:
        # never return while the left branch may still be writing
        wait([left])
    left.result()

    _merge(sequence, lo, mid, hi, less)


def _merge(
    sequence: MutableSequence[T],
    lo: int,
    mid: int,
    hi: int,
    less: Callable[[T, T], bool],
) -> None:
    """Merge the sorted ranges ``[lo, mid)`` and ``[mid, hi)`` in place."""
    temp = [sequence[k] for k in range(lo, hi)]
    split, end = mid - lo, hi - lo

    i, j, k = 0, split, lo
    while i < split and j < end:
        if less(temp[j], temp[i]):
            sequence[k] = temp[j]
            j += 1
        else:
            sequence[k] = temp[i]
            i += 1
        k += 1

    _write_back(sequence, k, temp[i:split])
    _write_back(sequence, k + split - i, temp[j:end])


# ============================================================================
#                               Queries
# ============================================================================


def is_sorted(sequence: Sequence[T], less: Callable[[T, T], bool]) -> bool:
    """Return True if no element sorts before its predecessor."""
    return not any(less(b, a) for a, b in pairwise(sequence))


def binary_search(
    sequence: Sequence[T], target: T, less: Callable[[T, T], bool]
) -> tuple[int, bool]:
    """Binary search a sequence sorted by ``less``.

    Args:
        sequence: A sequence sorted according to ``less``.
        target: The value to look for.
        less: The ordering the sequence is sorted by.

    Returns:
        ``(index, True)`` if an element equivalent to ``target`` was found,
        otherwise ``(insertion_point, False)`` where inserting ``target``
        keeps the sequence sorted.
    """
    low, high = 0, len(sequence) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if less(sequence[mid], target):
            low = mid + 1
        elif less(target, sequence[mid]):
            high = mid - 1
        else:
            return mid, True
    return low, False


def deduplicate(sequence: MutableSequence[T]) -> int:
    """Remove adjacent duplicates from a sorted sequence in place.

    The first element of each run of equal (``==``) elements is kept and the
    sequence is truncated to the unique prefix.

    Returns:
        The new length of the sequence.
    """
    if len(sequence) < 2:
        return len(sequence)

    write = 1
    for read in range(1, len(sequence)):
        if sequence[read] != sequence[write - 1]:
            if read != write:
                sequence[write] = sequence[read]
            write += 1

    del sequence[write:]
    return write
