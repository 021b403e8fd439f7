# Authors: Thor Lemke, Sally Hyun Hahm, Matteo Corrado
# Last Update: 10/19/2026
# Course: COSC 69.15/169.15 at Dartmouth College in 25F with Professor Alberto Quattrini Li
# Purpose: Collection helpers for picking a random element with a None/empty guard
# Acknowledgements: NumPy random Generator API

"""Collection helpers."""
from typing import Optional, Sequence, TypeVar

import numpy as np

from .randomness import get_rng

T = TypeVar("T")


def get_random(items: Optional[Sequence[T]], default: Optional[T] = None,
               rng: Optional[np.random.Generator] = None) -> Optional[T]:
    """Return a uniformly chosen element of `items`.

    Returns `default` if `items` is None or empty.
    """
    if items is None or len(items) == 0:
        return default

    rng = rng if rng is not None else get_rng()
    return items[int(rng.integers(0, len(items)))]
