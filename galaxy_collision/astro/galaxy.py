"""Galaxy: a central point mass that owns a disk of stars."""

from typing import Any, Dict, List
from galaxy_collision.astro.star import Star
from galaxy_collision.math.vector import Vec3


class Galaxy:
    """A galaxy with position, velocity, orientation, mass and stars.

    The galaxy's gravity is modelled as a single point mass at ``position``.
    ``orientation`` holds the three Euler angles of the star disk. The galaxy
    exclusively owns ``stars``; stars keep no reference back to it.
    """

    def __init__(self, position: Vec3, velocity: Vec3, orientation: Vec3, mass: float = 0.0):
        """Create a galaxy with no stars.

        Position comes first, as for Star. The galaxy.c port took velocity
        first, so positional calls carried over from it must swap the two.

        Args:
            position: Centre of the galaxy
            velocity: Bulk velocity
            orientation: Euler angles of the star disk
            mass: Point mass of the centre
        """
        if velocity is None:
            raise ValueError("Velocity is required")
        if position is None:
            raise ValueError("Position is required")
        if orientation is None:
            raise ValueError("Orientation is required")

        self.position = position
        self.velocity = velocity
        self.orientation = orientation
        self.mass = mass
        self.stars: List[Star] = []
        self.attributes: Dict[str, Any] = {}

    def __repr__(self) -> str:
        return (
            f"Galaxy(position={self.position!r}, velocity={self.velocity!r}, "
            f"orientation={self.orientation!r}, mass={self.mass!r}, stars={len(self.stars)})"
        )
