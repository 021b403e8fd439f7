# Authors: Thor Lemke, Sally Hyun Hahm, Matteo Corrado
# Last Update: 10/19/2026
# Course: COSC 69.15/169.15 at Dartmouth College in 25F with Professor Alberto Quattrini Li
# Purpose: Extensions package initialization exposing collection, layer, random and transform helpers
# Acknowledgements: NumPy random Generator API

"""Extension helpers for engine types.

Key Components:
- lists: random element pick with None/empty guard
- layers: layer mask membership tests
- randomness: range sampling, chance rolls, planar directions
- transforms: local and world pose resets

Usage:
    >>> from engine_devtools.extensions import random_to, try_chance
    >>> value = random_to(5, 10)  # 5 <= value < 10
"""

from .lists import get_random
from .layers import contains_layer, contains_game_object, mask_contains
from .randomness import (
    seed,
    configure,
    get_rng,
    random_int,
    random_float,
    random_vector,
    random_to,
    random_point,
    try_chance,
    random_xz,
    to_vector3_xz,
)
from .transforms import reset, reset_world

__all__ = [
    'get_random',
    'contains_layer',
    'contains_game_object',
    'mask_contains',
    'seed',
    'configure',
    'get_rng',
    'random_int',
    'random_float',
    'random_vector',
    'random_to',
    'random_point',
    'try_chance',
    'random_xz',
    'to_vector3_xz',
    'reset',
    'reset_world',
]
