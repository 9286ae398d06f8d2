"""3x3 rotation matrix."""

import math
from typing import List, Optional, Sequence
import numpy as np
from galaxy_collision.math.angles import random_angle
from galaxy_collision.math.vector import Vec3


class Matrix3x3:
    """A 3x3 matrix for rotating 3D vectors.

    Storage is row-major: ``data[i][j]`` is row ``i``, column ``j``.

    Vectors are treated as ROW vectors. ``transform(v)`` computes ``v · M``,
    which reads the matrix by columns, while ``mul`` is the ordinary
    row-by-column product. Together they satisfy::

        a.mul(b).transform(v) == b.transform(a.transform(v))
    """

    def __init__(self, data: Sequence[Sequence[float]]):
        """Create a matrix from nested rows.

        Args:
            data: Three rows of three numbers (copied)

        Raises:
            ValueError: If data is not exactly 3x3
        """
        if len(data) != 3:
            raise ValueError(f"Matrix must have 3 rows, got {len(data)}")
        for i, row in enumerate(data):
            if len(row) != 3:
                raise ValueError(f"Row {i} must have 3 columns, got {len(row)}")
        self._data = np.array(data, dtype=np.float64)

    @classmethod
    def identity(cls) -> "Matrix3x3":
        return cls(np.eye(3))

    @classmethod
    def from_euler(cls, x: float, y: float, z: float) -> "Matrix3x3":
        """Rotation about x, then y, then z (ZYX composition).

        Args:
            x: Angle around the x-axis in radians (roll)
            y: Angle around the y-axis in radians (pitch)
            z: Angle around the z-axis in radians (yaw)

        Returns:
            New rotation matrix
        """
        cx, sx = math.cos(x), math.sin(x)
        cy, sy = math.cos(y), math.sin(y)
        cz, sz = math.cos(z), math.sin(z)

        return cls([
            [cz * cy, cz * sy * sx - sz * cx, cz * sy * cx + sz * sx],
            [sz * cy, sz * sy * sx + cz * cx, sz * sy * cx - cz * sx],
            [-sy, cy * sx, cy * cx],
        ])

    @classmethod
    def from_axis_angle(cls, axis: Vec3, angle: float) -> "Matrix3x3":
        """Rodrigues' rotation formula.

        The axis is used as given; pass a unit vector for a pure rotation.
        """
        x, y, z = axis.x, axis.y, axis.z
        c = math.cos(angle)
        s = math.sin(angle)
        t = 1 - c

        return cls([
            [t * x * x + c, t * x * y - z * s, t * x * z + y * s],
            [t * y * x + z * s, t * y * y + c, t * y * z - x * s],
            [t * z * x - y * s, t * z * y + x * s, t * z * z + c],
        ])

    @classmethod
    def random_rotation(cls, rng: Optional[np.random.Generator] = None) -> "Matrix3x3":
        """Euler rotation with each angle uniform in [0, 2π)."""
        if rng is None:
            rng = np.random.default_rng()
        return cls.from_euler(random_angle(rng), random_angle(rng), random_angle(rng))

    def transform(self, vec: Vec3) -> Vec3:
        """Rotate a vector (row-vector convention, ``v · M``)."""
        m = self._data
        return Vec3(
            float(m[0, 0] * vec.x + m[1, 0] * vec.y + m[2, 0] * vec.z),
            float(m[0, 1] * vec.x + m[1, 1] * vec.y + m[2, 1] * vec.z),
            float(m[0, 2] * vec.x + m[1, 2] * vec.y + m[2, 2] * vec.z),
        )

    def mul(self, other: "Matrix3x3") -> "Matrix3x3":
        """Matrix product ``self · other``."""
        return Matrix3x3(self._data @ other._data)

    def __matmul__(self, other: "Matrix3x3") -> "Matrix3x3":
        return self.mul(other)

    def get(self, row: int, col: int) -> float:
        return float(self._data[row, col])

    def set(self, row: int, col: int, value: float):
        self._data[row, col] = value

    def to_array(self) -> List[List[float]]:
        """Deep copy of the elements as nested lists."""
        return self._data.tolist()

    def to_euler(self) -> Vec3:
        """Euler angles (x, y, z) consistent with from_euler.

        Not meaningful at gimbal lock (y = ±π/2).
        """
        m = self._data
        return Vec3(
            math.atan2(m[2, 1], m[2, 2]),
            math.asin(-m[2, 0]),
            math.atan2(m[1, 0], m[0, 0]),
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __repr__(self) -> str:
        return f"Matrix3x3({self.to_array()!r})"
