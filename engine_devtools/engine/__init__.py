# Authors: Thor Lemke, Sally Hyun Hahm, Matteo Corrado
# Last Update: 10/19/2026
# Course: COSC 69.15/169.15 at Dartmouth College in 25F with Professor Alberto Quattrini Li
# Purpose: Engine package initialization exposing vector, bounds, layer mask and transform types
# Acknowledgements: NumPy for array operations

"""Engine value types consumed by the extension helpers.

Key Components:
- Vector2, Vector3: immutable vectors
- Quaternion: rotations
- Bounds: axis-aligned boxes
- LayerMask: 32-bit layer selection mask
- GameObject, Transform: scene objects with a parent/child transform chain
"""

from .vectors import Vector2, Vector3, Quaternion, Bounds
from .scene import LayerMask, GameObject, Transform

__all__ = [
    'Vector2',
    'Vector3',
    'Quaternion',
    'Bounds',
    'LayerMask',
    'GameObject',
    'Transform',
]
