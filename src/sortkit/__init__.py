"""SORTKIT

Comparator-driven sorting helpers for Python sequences, centred on a
fork-join parallel merge sort that sorts caller-owned sequences in place.
"""

from sortkit.sorting import (
    binary_search,
    deduplicate,
    is_sorted,
    parallel_sort,
    sort_by,
    sort_by_key,
    sort_by_key_ordered,
)

__all__ = [
    "__version__",
    "binary_search",
    "deduplicate",
    "is_sorted",
    "parallel_sort",
    "sort_by",
    "sort_by_key",
    "sort_by_key_ordered",
]
__version__ = "0.1.0"
