"""Star: a tracer particle orbiting one or more galaxies."""

from typing import Any, Dict
from galaxy_collision.math.vector import Vec3


class Star:
    """A star with position, velocity and mass.

    Stars default to zero mass: they respond to gravity but exert none.
    ``attributes`` is free for collaborators (e.g. renderers) and is never
    read by the physics code.
    """

    def __init__(self, position: Vec3, velocity: Vec3, mass: float = 0.0):
        if position is None:
            raise ValueError("Position is required")
        if velocity is None:
            raise ValueError("Velocity is required")

        self.position = position
        self.velocity = velocity
        self.mass = mass
        self.attributes: Dict[str, Any] = {}

    def __repr__(self) -> str:
        return f"Star(position={self.position!r}, velocity={self.velocity!r}, mass={self.mass!r})"
