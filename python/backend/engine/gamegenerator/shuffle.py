"""Uniform in-place shuffling."""

from __future__ import annotations

import random
from typing import MutableSequence, TypeVar

T = TypeVar("T")


def shuffle(items: MutableSequence[T], rng: random.Random | None = None) -> MutableSequence[T]:
    """Fisher–Yates shuffle *items* in place and return the same sequence.

    Every permutation is equally likely given an unbiased *rng*
    (defaults to the ``random`` module).
    """
    rand = rng if rng is not None else random
    for i in range(len(items) - 1, 0, -1):
        j = rand.randint(0, i)
        items[i], items[j] = items[j], items[i]
    return items
