# Authors: Thor Lemke, Sally Hyun Hahm, Matteo Corrado
# Last Update: 10/19/2026
# Course: COSC 69.15/169.15 at Dartmouth College in 25F with Professor Alberto Quattrini Li
# Purpose: Transform reset helpers for restoring local or world pose to defaults
# Acknowledgements: Editor "Reset" behaviour for transforms (zero position, identity rotation, unit scale)

"""Transform reset helpers."""
import logging

from ..engine.scene import Transform
from ..engine.vectors import Quaternion, Vector3

logger = logging.getLogger(__name__)


def reset(transform: Transform) -> None:
    """Reset local position, rotation and scale to defaults.

    Matches the editor's "Reset" command: the transform ends up at its
    parent's origin, aligned with its parent, at unit scale.
    """
    transform.local_position = Vector3.zero()
    transform.local_rotation = Quaternion.identity()
    transform.local_scale = Vector3.one()
    logger.debug(f"Reset local pose of {transform!r}")


def reset_world(transform: Transform) -> None:
    """Move to the world origin with identity world rotation and unit local scale."""
    transform.position = Vector3.zero()
    transform.rotation = Quaternion.identity()
    transform.local_scale = Vector3.one()
    logger.debug(f"Reset world pose of {transform!r}")
