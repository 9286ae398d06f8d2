"""Immutable 3D vector."""

import math
from dataclasses import dataclass
from typing import Iterator, Optional, Union
import numpy as np


Operand = Union["Vec3", float, int]


def _divide(a: float, b: float) -> float:
    """IEEE division: zero divisors give inf/nan instead of raising."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


@dataclass(frozen=True)
class Vec3:
    """A 3D vector with value semantics.

    Every operation returns a new vector; operands are never modified.
    Arithmetic accepts either another vector (component-wise) or a scalar
    (broadcast to all three components).
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> "Vec3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def random(cls, factor: float = 1.0, rng: Optional[np.random.Generator] = None) -> "Vec3":
        """Random vector with components uniform in [0, 1), scaled by factor.

        Args:
            factor: Scale applied to each component
            rng: Random generator (a fresh default_rng() if None)

        Returns:
            New random vector
        """
        if rng is None:
            rng = np.random.default_rng()
        return cls(float(rng.random()), float(rng.random()), float(rng.random())).mul(factor)

    @classmethod
    def random_centered(cls, factor: float = 1.0, rng: Optional[np.random.Generator] = None) -> "Vec3":
        """Random vector with components uniform in [-0.5, 0.5), scaled by factor.

        This samples a cube, not a ball: corners are as likely as the axes.
        """
        return cls.random(1.0, rng).sub(0.5).mul(factor)

    @classmethod
    def from_array(cls, values) -> "Vec3":
        x, y, z = values
        return cls(float(x), float(y), float(z))

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2)

    def copy(self) -> "Vec3":
        return Vec3(self.x, self.y, self.z)

    def add(self, other: Operand) -> "Vec3":
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        return Vec3(self.x + other, self.y + other, self.z + other)

    def sub(self, other: Operand) -> "Vec3":
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        return Vec3(self.x - other, self.y - other, self.z - other)

    def mul(self, other: Operand) -> "Vec3":
        """Component-wise product (not the dot product)."""
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vec3(self.x * other, self.y * other, self.z * other)

    def div(self, other: Operand) -> "Vec3":
        if isinstance(other, Vec3):
            return Vec3(_divide(self.x, other.x), _divide(self.y, other.y), _divide(self.z, other.z))
        return Vec3(_divide(self.x, other), _divide(self.y, other), _divide(self.z, other))

    def normalize(self) -> "Vec3":
        """Unit vector in the same direction.

        A zero vector has no direction; the result is then non-finite.
        """
        return self.div(self.magnitude)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Operand) -> "Vec3":
        return self.add(other)

    def __sub__(self, other: Operand) -> "Vec3":
        return self.sub(other)

    def __mul__(self, other: Operand) -> "Vec3":
        return self.mul(other)

    def __rmul__(self, other: Operand) -> "Vec3":
        return self.mul(other)

    def __truediv__(self, other: Operand) -> "Vec3":
        return self.div(other)

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)
