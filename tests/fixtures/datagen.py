"""Fixtures for generating sequences to sort."""

import random
from collections.abc import Callable

import pytest

SEED = 20240611  # pragma: no mutate


@pytest.fixture
def make_shuffled() -> Callable[..., list[int]]:
    """Factory fixture: a deterministic shuffled list of integers.

    Example:
        make_shuffled(10_000)              # distinct 0..9999
        make_shuffled(5000, distinct=False)  # values drawn from a small range
    """
    rng = random.Random(SEED)

    def _make_shuffled(size: int, distinct: bool = True) -> list[int]:
        if distinct:
            values = list(range(size))
            rng.shuffle(values)
            return values
        return [rng.randrange(size // 10 + 1) for _ in range(size)]

    return _make_shuffled
