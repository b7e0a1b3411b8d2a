"""Homogeneous 4x4 transformation matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple, TypeVar, Union

from .geometry import Point3D, Vector3D

# The angle conversions use this truncated value of pi.
_PI = 3.141592

_IDENTITY: Tuple[float, ...] = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)

_Spatial = TypeVar("_Spatial", Point3D, Vector3D)


def _det3(a, b, c, d, e, f, g, h, i) -> float:
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


@dataclass(frozen=True)
class Matrix3D:
    """An immutable 4x4 matrix stored row by row."""

    values: Tuple[float, ...] = _IDENTITY

    def __post_init__(self) -> None:
        values = tuple(float(v) for v in self.values)
        if len(values) != 16:
            raise ValueError("a Matrix3D needs exactly 16 values")
        object.__setattr__(self, "values", values)

    @classmethod
    def identity(cls) -> Matrix3D:
        return cls(_IDENTITY)

    @classmethod
    def from_transform(cls, point: Point3D, angle: Vector3D) -> Matrix3D:
        """Rotation by Euler angles in degrees (z, y, x order) plus a translation."""
        cx = math.cos(angle.x * _PI / 180.0)
        cy = math.cos(angle.y * _PI / 180.0)
        cz = math.cos(angle.z * _PI / 180.0)
        sx = math.sin(angle.x * _PI / 180.0)
        sy = math.sin(angle.y * _PI / 180.0)
        sz = math.sin(angle.z * _PI / 180.0)
        return cls((
            cz * cy, cz * sy * sx - sz * cx, cz * sy * cx + sz * sx, point.x,
            sz * cy, sz * sy * sx + cz * cx, sz * sy * cx - cz * sx, point.y,
            -sy, cy * sx, cy * cx, point.z,
            0.0, 0.0, 0.0, 1.0,
        ))

    def __getitem__(self, index: Tuple[int, int]) -> float:
        row, column = index
        if not (0 <= row < 4 and 0 <= column < 4):
            raise IndexError("matrix index out of range")
        return self.values[row * 4 + column]

    @property
    def rows(self) -> Tuple[Tuple[float, ...], ...]:
        return tuple(self.values[r * 4:r * 4 + 4] for r in range(4))

    def _cofactor(self, row: int, column: int) -> float:
        minor = [
            self.values[r * 4 + c]
            for r in range(4) if r != row
            for c in range(4) if c != column
        ]
        sign = -1.0 if (row + column) % 2 else 1.0
        return sign * _det3(*minor)

    def determinant(self) -> float:
        return sum(self.values[c] * self._cofactor(0, c) for c in range(4))

    def inverse(self) -> Matrix3D:
        """The inverse matrix; raises ValueError when the matrix is singular."""
        det = self.determinant()
        if det == 0:
            raise ValueError("matrix is not invertible")
        factor = 1.0 / det
        return Matrix3D(tuple(
            self._cofactor(c, r) * factor for r in range(4) for c in range(4)
        ))

    def scale(self, scale: Vector3D) -> Matrix3D:
        """This matrix followed by a scaling along each axis."""
        return self * Matrix3D((
            scale.x, 0.0, 0.0, 0.0,
            0.0, scale.y, 0.0, 0.0,
            0.0, 0.0, scale.z, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    def rotate(self, angle: float, axis: Vector3D) -> Matrix3D:
        """This matrix followed by a rotation of ``angle`` degrees about ``axis``."""
        rad = angle * _PI / 180.0
        c = math.cos(rad)
        s = math.sin(rad)
        t = 1.0 - c
        x, y, z = axis.x, axis.y, axis.z
        return self * Matrix3D((
            c + x * x * t, x * y * t - z * s, x * z * t + y * s, 0.0,
            x * y * t + z * s, c + y * y * t, y * z * t - x * s, 0.0,
            x * z * t - y * s, y * z * t + x * s, c + z * z * t, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    def translate(self, offset: Vector3D) -> Matrix3D:
        """This matrix followed by a translation by ``offset``."""
        return self * Matrix3D((
            1.0, 0.0, 0.0, offset.x,
            0.0, 1.0, 0.0, offset.y,
            0.0, 0.0, 1.0, offset.z,
            0.0, 0.0, 0.0, 1.0,
        ))

    def transform(self, point: _Spatial) -> _Spatial:
        """Apply the matrix to a point or vector, returning the same type."""
        m = self.values
        return type(point)(
            m[0] * point.x + m[1] * point.y + m[2] * point.z + m[3],
            m[4] * point.x + m[5] * point.y + m[6] * point.z + m[7],
            m[8] * point.x + m[9] * point.y + m[10] * point.z + m[11],
        )

    def __mul__(self, other: Union[Matrix3D, object]) -> Matrix3D:
        if not isinstance(other, Matrix3D):
            return NotImplemented
        a = self.values
        b = other.values
        return Matrix3D(tuple(
            sum(a[r * 4 + k] * b[k * 4 + c] for k in range(4))
            for r in range(4)
            for c in range(4)
        ))