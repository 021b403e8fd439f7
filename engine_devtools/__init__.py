# Authors: Thor Lemke, Sally Hyun Hahm, Matteo Corrado
# Last Update: 10/19/2026
# Course: COSC 69.15/169.15 at Dartmouth College in 25F with Professor Alberto Quattrini Li
# Purpose: Top-level package initialization organizing engine types, extension helpers and the
# experimental immutable array editor into one importable toolkit
# Acknowledgements: NumPy for array operations

"""Devtools: small helpers for game and simulation code.

Modules:
- engine: Vector2/Vector3/Quaternion/Bounds value types, LayerMask, GameObject, Transform
- extensions: collection, layer mask, random and transform helpers
- experimental.arrays: immutable array editing (append/insert/remove/slice/concat)
- config: constants, config dataclasses, apply_config and logging setup
- errors: NullArgumentError, OutOfRangeError
"""
import logging

__version__ = '1.0.0'

from .errors import DevToolsError, NullArgumentError, OutOfRangeError
from .engine import Vector2, Vector3, Quaternion, Bounds, LayerMask, GameObject, Transform
from .experimental import arrays
from .config import DevToolsConfig, apply_config, configure_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'DevToolsError',
    'NullArgumentError',
    'OutOfRangeError',
    'Vector2',
    'Vector3',
    'Quaternion',
    'Bounds',
    'LayerMask',
    'GameObject',
    'Transform',
    'arrays',
    'DevToolsConfig',
    'apply_config',
    'configure_logging',
]
