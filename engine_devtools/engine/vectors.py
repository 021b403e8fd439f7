# Authors: Thor Lemke, Sally Hyun Hahm, Matteo Corrado
# Last Update: 10/19/2026
# Course: COSC 69.15/169.15 at Dartmouth College in 25F with Professor Alberto Quattrini Li
# Purpose: Engine value types for 2D/3D vectors, rotation quaternions and axis-aligned bounds,
# backed by NumPy for conversions, rotation matrices and tolerance comparisons
# Acknowledgements: NumPy for array operations, Boston Dynamics SDK math_helpers for the
# Vec3/Quat API shape (transform_vec3, inverse, multiplication order)

"""Vector, quaternion and bounds value types.

All types are immutable dataclasses. Arithmetic returns new instances.

Conventions:
    - Left-handed, Y-up world: +X right, +Y up, +Z forward
    - Quaternion stored as (w, x, y, z), Hamilton product
    - Euler angles in degrees, applied Z then X then Y
"""
import math
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from ..config import FLOAT_TOLERANCE


@dataclass(frozen=True)
class Vector2:
    """2D vector."""
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> "Vector2":
        return cls(1.0, 1.0)

    @classmethod
    def from_array(cls, values: Iterable[float]) -> "Vector2":
        x, y = np.asarray(values, dtype=float)
        return cls(float(x), float(y))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    @property
    def magnitude(self) -> float:
        return float(np.linalg.norm(self.to_array()))

    def normalized(self) -> "Vector2":
        """Return a unit-length copy, or zero if the vector is (near) zero."""
        mag = self.magnitude
        if mag < FLOAT_TOLERANCE:
            return Vector2.zero()
        return Vector2.from_array(self.to_array() / mag)

    def approx_equals(self, other: "Vector2", tol: float = FLOAT_TOLERANCE) -> bool:
        return bool(np.allclose(self.to_array(), other.to_array(), atol=tol, rtol=0.0))

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__


@dataclass(frozen=True)
class Vector3:
    """3D vector used for positions, directions and scales."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> "Vector3":
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def from_array(cls, values: Iterable[float]) -> "Vector3":
        x, y, z = np.asarray(values, dtype=float)
        return cls(float(x), float(y), float(z))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    @property
    def magnitude(self) -> float:
        return float(np.linalg.norm(self.to_array()))

    def normalized(self) -> "Vector3":
        """Return a unit-length copy, or zero if the vector is (near) zero."""
        mag = self.magnitude
        if mag < FLOAT_TOLERANCE:
            return Vector3.zero()
        return Vector3.from_array(self.to_array() / mag)

    def scale(self, other: "Vector3") -> "Vector3":
        """Component-wise product."""
        return Vector3.from_array(self.to_array() * other.to_array())

    def approx_equals(self, other: "Vector3", tol: float = FLOAT_TOLERANCE) -> bool:
        return bool(np.allclose(self.to_array(), other.to_array(), atol=tol, rtol=0.0))

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> "Vector3":
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__


@dataclass(frozen=True)
class Quaternion:
    """Unit quaternion describing a 3D rotation, stored as (w, x, y, z)."""
    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def identity(cls) -> "Quaternion":
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_axis_angle(cls, axis: Vector3, angle_deg: float) -> "Quaternion":
        """Rotation of `angle_deg` degrees around `axis`."""
        unit = axis.normalized()
        half = np.deg2rad(angle_deg) / 2.0
        s = math.sin(half)
        return cls(math.cos(half), unit.x * s, unit.y * s, unit.z * s)

    @classmethod
    def from_euler(cls, x_deg: float, y_deg: float, z_deg: float) -> "Quaternion":
        """Rotation from Euler angles in degrees.

        Applied around Z first, then X, then Y (engine convention), i.e.
        q = qy * qx * qz.
        """
        qx = cls.from_axis_angle(Vector3(1.0, 0.0, 0.0), x_deg)
        qy = cls.from_axis_angle(Vector3(0.0, 1.0, 0.0), y_deg)
        qz = cls.from_axis_angle(Vector3(0.0, 0.0, 1.0), z_deg)
        return qy * qx * qz

    def to_array(self) -> np.ndarray:
        return np.array([self.w, self.x, self.y, self.z], dtype=float)

    def to_matrix(self) -> np.ndarray:
        """3x3 rotation matrix."""
        w, x, y, z = self.to_array() / np.linalg.norm(self.to_array())
        return np.array([
            [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
            [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
            [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
        ])

    def inverse(self) -> "Quaternion":
        norm_sq = float(np.dot(self.to_array(), self.to_array()))
        return Quaternion(self.w / norm_sq, -self.x / norm_sq, -self.y / norm_sq, -self.z / norm_sq)

    def rotate(self, vector: Vector3) -> Vector3:
        """Apply this rotation to a vector."""
        return Vector3.from_array(self.to_matrix() @ vector.to_array())

    def approx_equals(self, other: "Quaternion", tol: float = FLOAT_TOLERANCE) -> bool:
        """Rotation equality; q and -q describe the same rotation."""
        dot = abs(float(np.dot(self.to_array(), other.to_array())))
        return abs(1.0 - dot) <= tol

    def __mul__(self, other: "Quaternion") -> "Quaternion":
        w1, x1, y1, z1 = self.w, self.x, self.y, self.z
        w2, x2, y2, z2 = other.w, other.x, other.y, other.z
        return Quaternion(
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
        )


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box defined by center and full size."""
    center: Vector3 = Vector3()
    size: Vector3 = Vector3()

    @classmethod
    def from_min_max(cls, min_point: Vector3, max_point: Vector3) -> "Bounds":
        lo, hi = min_point.to_array(), max_point.to_array()
        return cls(Vector3.from_array((lo + hi) / 2.0), Vector3.from_array(hi - lo))

    @property
    def extents(self) -> Vector3:
        return self.size * 0.5

    @property
    def min(self) -> Vector3:
        return self.center - self.extents

    @property
    def max(self) -> Vector3:
        return self.center + self.extents

    def contains(self, point: Vector3) -> bool:
        """True if `point` lies inside or on the surface of the box."""
        p = point.to_array()
        return bool(np.all(p >= self.min.to_array()) and np.all(p <= self.max.to_array()))
