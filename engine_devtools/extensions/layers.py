# Authors: Thor Lemke, Sally Hyun Hahm, Matteo Corrado
# Last Update: 10/19/2026
# Course: COSC 69.15/169.15 at Dartmouth College in 25F with Professor Alberto Quattrini Li
# Purpose: Layer mask helpers testing whether a mask selects a layer index or a game object's layer

"""Layer mask helpers.

Example:
    >>> ground = LayerMask.from_layers(8)
    >>> contains_layer(ground, 8)
    True
    >>> mask_contains(ground, GameObject("floor", layer=8))
    True
"""
from typing import Union

from ..engine.scene import GameObject, LayerMask, check_layer_index


def contains_layer(mask: Union[LayerMask, int], layer_index: int) -> bool:
    """Check if `mask` selects the layer `layer_index` (0-31).

    Raises:
        OutOfRangeError: If layer_index is outside [0, 32)
    """
    return ((1 << check_layer_index(layer_index)) & int(mask)) != 0


def contains_game_object(mask: Union[LayerMask, int], game_object: GameObject) -> bool:
    """Check if `mask` selects the layer of `game_object`."""
    return (int(mask) & (1 << check_layer_index(game_object.layer))) != 0


def mask_contains(mask: Union[LayerMask, int], target: Union[int, GameObject]) -> bool:
    """Check a layer index or a game object against `mask`."""
    if isinstance(target, GameObject):
        return contains_game_object(mask, target)
    if isinstance(target, bool) or not isinstance(target, int):
        raise TypeError(f"target must be a layer index or GameObject, got {type(target).__name__}")
    return contains_layer(mask, target)
