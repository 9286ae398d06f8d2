"""
Galaxy Collision - a simplified N-body galaxy collision simulator.

Features:
- Heavy central galaxies with disks of massless tracer stars
- Symplectic Euler integration (star-star forces ignored)
- Procedural disk generation with seedable randomness
- Host simulator with periodic scene regeneration
- State snapshots (NPZ/JSON), JSON/YAML configuration
- 2D matplotlib rendering and a CLI
"""

__version__ = "0.1.0"

from galaxy_collision.math import Vec3, Matrix3x3
from galaxy_collision.astro import Star, Galaxy
from galaxy_collision.physics.util import all_stars, iter_stars, star_count
from galaxy_collision.physics.simple import GalaxyOptions, create_random_galaxy, update_galaxies
from galaxy_collision.physics.simulator import Simulator

__all__ = [
    "Vec3",
    "Matrix3x3",
    "Star",
    "Galaxy",
    "all_stars",
    "iter_stars",
    "star_count",
    "GalaxyOptions",
    "create_random_galaxy",
    "update_galaxies",
    "Simulator",
]
