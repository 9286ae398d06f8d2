"""Vector and rotation math."""

from galaxy_collision.math.vector import Vec3
from galaxy_collision.math.matrix import Matrix3x3
from galaxy_collision.math.angles import TWO_PI, random_angle, random_angle_in_range

__all__ = ["Vec3", "Matrix3x3", "TWO_PI", "random_angle", "random_angle_in_range"]
