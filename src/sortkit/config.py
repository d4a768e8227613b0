"""Configuration utilities for SORTKIT.

This module centralizes the tunable constants used by the sorting routines and
the resolution of the default parallelism budget from the environment.
"""

import os

from sortkit.errors import InvalidParallelismError

# Ranges shorter than this are always sorted sequentially.
PARALLEL_THRESHOLD = 1000  # pragma: no mutate

PARALLELISM_ENV_VAR = "SORTKIT_PARALLELISM"  # pragma: no mutate


def get_default_parallelism() -> int:
    """Get the default parallelism budget.

    Returns:
        The value of the `SORTKIT_PARALLELISM` environment variable when it is
        set, otherwise the number of CPUs reported by `os.cpu_count()`
        (1 when that is unknown).

    Raises:
        InvalidParallelismError: If `SORTKIT_PARALLELISM` is set but is not a
            positive integer.
    """
    if not (raw := os.environ.get(PARALLELISM_ENV_VAR, "").strip()):
        return os.cpu_count() or 1
    try:
        value = int(raw)
    except ValueError as e:
        raise InvalidParallelismError(raw) from e
    if value < 1:
        raise InvalidParallelismError(raw)
    return value
