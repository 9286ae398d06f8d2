"""Physics engine for galaxy collisions."""

from galaxy_collision.physics.constants import G, TIME_STEP
from galaxy_collision.physics.util import all_stars, iter_stars, star_count
from galaxy_collision.physics.simple import (
    GalaxyOptions,
    create_random_galaxy,
    create_random_galaxies,
    update_galaxies,
)
from galaxy_collision.physics.simulator import Simulator

__all__ = [
    "G",
    "TIME_STEP",
    "all_stars",
    "iter_stars",
    "star_count",
    "GalaxyOptions",
    "create_random_galaxy",
    "create_random_galaxies",
    "update_galaxies",
    "Simulator",
]
