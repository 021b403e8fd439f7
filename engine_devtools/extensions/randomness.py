# Authors: Thor Lemke, Sally Hyun Hahm, Matteo Corrado
# Last Update: 10/19/2026
# Course: COSC 69.15/169.15 at Dartmouth College in 25F with Professor Alberto Quattrini Li
# Purpose: Random sampling helpers for order-agnostic int/float ranges, per-component vector
# ranges, points inside bounds, percentage chance rolls and planar directions
# Acknowledgements: NumPy random Generator API (integers, uniform, random)

"""Random helpers built on a shared numpy Generator.

The module-level generator is created from config.RANDOM_SEED and can be
reset with seed(). Every helper also accepts an explicit `rng` so callers
can keep independent, reproducible streams.

Range conventions:
    - Integers: [low, high) half-open, bounds swapped if given in reverse
    - Floats: [low, high], bounds swapped if given in reverse
    - Chance: percent on a 0..100 scale
"""
import logging
import math
from typing import Optional, Union

import numpy as np

from ..config import CHANCE_MAX, RANDOM_SEED, RandomConfig
from ..engine.vectors import Bounds, Vector2, Vector3

logger = logging.getLogger(__name__)

_rng: np.random.Generator = np.random.default_rng(RANDOM_SEED)
_chance_max: float = CHANCE_MAX


def seed(value: Optional[int] = None) -> None:
    """Reset the shared generator. None reseeds from OS entropy."""
    global _rng
    _rng = np.random.default_rng(value)
    logger.debug(f"Shared random generator reseeded (seed={value})")


def configure(config: RandomConfig) -> None:
    """Apply generator seed and chance scale from `config`."""
    global _chance_max
    seed(config.seed)
    _chance_max = config.chance_max


def get_rng() -> np.random.Generator:
    """Return the shared generator."""
    return _rng


def _resolve(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else _rng


def random_int(a: int, b: int, rng: Optional[np.random.Generator] = None) -> int:
    """Random integer in [min(a, b), max(a, b)).

    Returns `a` when both bounds are equal.
    """
    low, high = min(a, b), max(a, b)
    if low == high:
        return int(low)
    if a > b:
        logger.debug(f"random_int bounds reversed ({a}, {b}), sampling [{low}, {high})")
    return int(_resolve(rng).integers(low, high))


def random_float(a: float, b: float, rng: Optional[np.random.Generator] = None) -> float:
    """Random float between min(a, b) and max(a, b)."""
    low, high = min(a, b), max(a, b)
    if a > b:
        logger.debug(f"random_float bounds reversed ({a}, {b}), sampling [{low}, {high}]")
    return float(_resolve(rng).uniform(low, high))


def random_vector(min_vec: Vector3, max_vec: Vector3, rng: Optional[np.random.Generator] = None) -> Vector3:
    """Random vector with each component between the matching components of min_vec and max_vec."""
    lo = min_vec.to_array()
    hi = max_vec.to_array()
    return Vector3.from_array(_resolve(rng).uniform(np.minimum(lo, hi), np.maximum(lo, hi)))


def random_to(a: Union[int, float, Vector3], b: Union[int, float, Vector3],
              rng: Optional[np.random.Generator] = None) -> Union[int, float, Vector3]:
    """Sample between `a` and `b`, choosing the helper from the argument types.

    Two ints sample an integer (exclusive upper bound), two Vector3 sample a
    vector, anything else samples a float.
    """
    if isinstance(a, Vector3) and isinstance(b, Vector3):
        return random_vector(a, b, rng)
    if isinstance(a, Vector3) or isinstance(b, Vector3):
        raise TypeError(f"Cannot sample between {type(a).__name__} and {type(b).__name__}")
    if isinstance(a, (int, np.integer)) and isinstance(b, (int, np.integer)) \
            and not isinstance(a, bool) and not isinstance(b, bool):
        return random_int(a, b, rng)
    return random_float(a, b, rng)


def random_point(bounds: Bounds, rng: Optional[np.random.Generator] = None) -> Vector3:
    """Random point inside `bounds`, e.g. for spawning inside a box collider."""
    return random_vector(bounds.min, bounds.max, rng)


def try_chance(percent: float, rng: Optional[np.random.Generator] = None) -> bool:
    """True with a probability of `percent` out of the chance scale (100 by default).

    0 (or less) never succeeds; the full scale (or more) always succeeds.
    """
    return bool(_resolve(rng).random() < percent / _chance_max)


def to_vector3_xz(vector: Vector2) -> Vector3:
    """Map a 2D vector (x, y) onto the ground plane as (x, 0, y)."""
    return Vector3(vector.x, 0.0, vector.y)


def random_xz(rng: Optional[np.random.Generator] = None) -> Vector3:
    """Random unit-length direction on the XZ plane (y == 0)."""
    angle = _resolve(rng).uniform(0.0, 2.0 * math.pi)
    return to_vector3_xz(Vector2(math.cos(angle), math.sin(angle)))
