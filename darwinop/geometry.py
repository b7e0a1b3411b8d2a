"""Points and vectors in two and three dimensions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Optional

# The angle conversions use this truncated value of pi.
_PI = 3.141592


@dataclass(frozen=True)
class Point2D:
    """A point in the plane."""

    x: float = 0.0
    y: float = 0.0

    def distance(self, other: Point2D) -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def __add__(self, other):
        if isinstance(other, Point2D):
            return Point2D(self.x + other.x, self.y + other.y)
        if isinstance(other, Real):
            return Point2D(self.x + other, self.y + other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Point2D):
            return Point2D(self.x - other.x, self.y - other.y)
        if isinstance(other, Real):
            return Point2D(self.x - other, self.y - other)
        return NotImplemented

    def __mul__(self, value):
        if isinstance(value, Real):
            return Point2D(self.x * value, self.y * value)
        return NotImplemented

    def __truediv__(self, value):
        if isinstance(value, Real):
            return Point2D(self.x / value, self.y / value)
        return NotImplemented


@dataclass(frozen=True)
class Point3D:
    """A point in space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def distance(self, other: Point3D) -> float:
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return math.sqrt(dx * dx + dy * dy + dz * dz)

    def __add__(self, other):
        if isinstance(other, Point3D):
            return Point3D(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, Real):
            return Point3D(self.x + other, self.y + other, self.z + other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Point3D):
            return Point3D(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Real):
            return Point3D(self.x - other, self.y - other, self.z - other)
        return NotImplemented

    def __mul__(self, value):
        if isinstance(value, Real):
            return Point3D(self.x * value, self.y * value, self.z * value)
        return NotImplemented

    def __truediv__(self, value):
        if isinstance(value, Real):
            return Point3D(self.x / value, self.y / value, self.z / value)
        return NotImplemented


@dataclass(frozen=True)
class Vector3D:
    """A vector in space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def between(cls, start: Point3D, end: Point3D) -> Vector3D:
        """The vector leading from ``start`` to ``end``."""
        return cls(end.x - start.x, end.y - start.y, end.z - start.z)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3D:
        """A vector of unit length pointing the same way."""
        length = self.length()
        if length == 0:
            raise ValueError("cannot normalize a zero-length vector")
        return Vector3D(self.x / length, self.y / length, self.z / length)

    def dot(self, other: Vector3D) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3D) -> Vector3D:
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def angle_between(self, other: Vector3D, axis: Optional[Vector3D] = None) -> float:
        """Angle to ``other`` in degrees.

        With ``axis`` given, the angle is negative when the cross product
        points away from the axis.
        """
        denominator = self.length() * other.length()
        if denominator == 0:
            raise ValueError("angle with a zero-length vector is undefined")
        cosine = max(-1.0, min(1.0, self.dot(other) / denominator))
        angle = math.acos(cosine) * (180.0 / _PI)
        if axis is not None and self.cross(other).dot(axis) < 0.0:
            angle = -angle
        return angle

    def __add__(self, other):
        if isinstance(other, Vector3D):
            return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, Real):
            return Vector3D(self.x + other, self.y + other, self.z + other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector3D):
            return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Real):
            return Vector3D(self.x - other, self.y - other, self.z - other)
        return NotImplemented

    def __mul__(self, value):
        if isinstance(value, Real):
            return Vector3D(self.x * value, self.y * value, self.z * value)
        return NotImplemented

    def __truediv__(self, value):
        if isinstance(value, Real):
            return Vector3D(self.x / value, self.y / value, self.z / value)
        return NotImplemented