# Authors: Thor Lemke, Sally Hyun Hahm, Matteo Corrado
# Last Update: 10/19/2026
# Course: COSC 69.15/169.15 at Dartmouth College in 25F with Professor Alberto Quattrini Li
# Purpose: Scene object types: 32-bit layer masks, game objects carrying a layer, and a
# parent-aware transform exposing both local and world position/rotation/scale
# Acknowledgements: Boston Dynamics SDK frame_helpers for the a_tform_b parent/child chain idea

"""Scene object types.

Transform hierarchy:
    world_position = parent.position + parent.rotation * (parent.lossy_scale (*) local_position)
    world_rotation = parent.rotation * local_rotation
    lossy_scale    = parent.lossy_scale (*) local_scale

where (*) is the component-wise product. Shear from non-uniform parent
scale combined with rotation is not modelled.
"""
import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

import numpy as np

from ..config import ALL_LAYERS_MASK, LAYER_COUNT
from ..errors import OutOfRangeError
from .vectors import Quaternion, Vector3

logger = logging.getLogger(__name__)


def check_layer_index(layer_index: int) -> int:
    """Return `layer_index` unchanged, or raise OutOfRangeError outside [0, LAYER_COUNT)."""
    if not 0 <= layer_index < LAYER_COUNT:
        raise OutOfRangeError(
            "layer_index", layer_index,
            f"layer_index must be between 0 and {LAYER_COUNT - 1}, got {layer_index}"
        )
    return layer_index


@dataclass(frozen=True)
class LayerMask:
    """32-bit mask where bit N selects layer N."""
    value: int = 0

    def __post_init__(self):
        # Store as unsigned 32-bit so negative masks (e.g. ~0) behave as "everything"
        object.__setattr__(self, "value", int(self.value) & ALL_LAYERS_MASK)

    @classmethod
    def from_layers(cls, *layer_indices: int) -> "LayerMask":
        value = 0
        for index in layer_indices:
            value |= 1 << check_layer_index(index)
        return cls(value)

    @classmethod
    def everything(cls) -> "LayerMask":
        return cls(ALL_LAYERS_MASK)

    @classmethod
    def nothing(cls) -> "LayerMask":
        return cls(0)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __or__(self, other) -> "LayerMask":
        return LayerMask(self.value | int(other))

    def __and__(self, other) -> "LayerMask":
        return LayerMask(self.value & int(other))

    def __rand__(self, other) -> int:
        return int(other) & self.value

    def __ror__(self, other) -> int:
        return int(other) | self.value


class Transform:
    """Position, rotation and scale of an object, optionally relative to a parent."""

    def __init__(
        self,
        local_position: Optional[Vector3] = None,
        local_rotation: Optional[Quaternion] = None,
        local_scale: Optional[Vector3] = None,
        parent: Optional["Transform"] = None,
    ):
        self.local_position = local_position or Vector3.zero()
        self.local_rotation = local_rotation or Quaternion.identity()
        self.local_scale = local_scale or Vector3.one()
        self._parent: Optional[Transform] = None
        self._children: List[Transform] = []
        if parent is not None:
            self.set_parent(parent)

    @property
    def parent(self) -> Optional["Transform"]:
        return self._parent

    @property
    def children(self) -> Iterator["Transform"]:
        return iter(self._children)

    def set_parent(self, parent: Optional["Transform"], world_position_stays: bool = False) -> None:
        """Attach to `parent` (or detach with None).

        Args:
            parent: New parent transform, or None for a root transform
            world_position_stays: Rewrite local values so the world pose is
                unchanged by re-parenting
        """
        ancestor = parent
        while ancestor is not None:
            if ancestor is self:
                raise ValueError("Cannot parent a transform to itself or one of its descendants")
            ancestor = ancestor._parent

        position, rotation = self.position, self.rotation

        if self._parent is not None:
            self._parent._children.remove(self)
        self._parent = parent
        if parent is not None:
            parent._children.append(self)
        logger.debug(f"Transform parent set to {parent!r} (world_position_stays={world_position_stays})")

        if world_position_stays:
            self.position = position
            self.rotation = rotation

    @property
    def position(self) -> Vector3:
        """World-space position."""
        if self._parent is None:
            return self.local_position
        parent = self._parent
        offset = parent.rotation.rotate(parent.lossy_scale.scale(self.local_position))
        return parent.position + offset

    @position.setter
    def position(self, value: Vector3) -> None:
        if self._parent is None:
            self.local_position = value
            return
        parent = self._parent
        unrotated = parent.rotation.inverse().rotate(value - parent.position).to_array()
        scale = parent.lossy_scale.to_array()
        # Zero-scale axes collapse; keep the local component at zero there
        local = np.divide(unrotated, scale, out=np.zeros(3), where=scale != 0.0)
        self.local_position = Vector3.from_array(local)

    @property
    def rotation(self) -> Quaternion:
        """World-space rotation."""
        if self._parent is None:
            return self.local_rotation
        return self._parent.rotation * self.local_rotation

    @rotation.setter
    def rotation(self, value: Quaternion) -> None:
        if self._parent is None:
            self.local_rotation = value
            return
        self.local_rotation = self._parent.rotation.inverse() * value

    @property
    def lossy_scale(self) -> Vector3:
        """Approximate world-space scale."""
        if self._parent is None:
            return self.local_scale
        return self._parent.lossy_scale.scale(self.local_scale)

    def __repr__(self) -> str:
        return (
            f"Transform(local_position={self.local_position}, "
            f"local_rotation={self.local_rotation}, local_scale={self.local_scale})"
        )


@dataclass
class GameObject:
    """Named scene object with a layer and its own transform."""
    name: str = "GameObject"
    layer: int = 0
    transform: Transform = field(default_factory=Transform)

    def __post_init__(self):
        check_layer_index(self.layer)
