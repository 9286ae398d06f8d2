"""Simple galaxy-collision physics.

Adapted from galaxy.c, the Galaxy Collision Screen Saver: a few heavy
galaxies attract each other and carry disks of massless stars. Stars feel
every galaxy but not each other, which keeps a step linear in the number
of stars.

This module provides the two public entry points:

- ``update_galaxies``: advance a galaxy collection by one time step
- ``create_random_galaxy``: procedurally generate one populated galaxy
"""

import dataclasses
import math
import warnings
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence, Union
import numpy as np
from galaxy_collision.astro import Galaxy, Star
from galaxy_collision.math.matrix import Matrix3x3
from galaxy_collision.math.vector import Vec3
from galaxy_collision.physics.constants import G, TIME_STEP
from galaxy_collision.physics.integrators.symplectic_euler import SymplecticEulerIntegrator


_INTEGRATOR = SymplecticEulerIntegrator()


def update_galaxies(galaxies: Sequence[Galaxy], dt: float = TIME_STEP, G: float = G):
    """Advance all galaxies and stars by one step using symplectic Euler.

    Mutates the galaxies and their stars in place.

    Args:
        galaxies: Galaxies to update
        dt: Time step (default: TIME_STEP)
        G: Gravitational constant (default: G)
    """
    _INTEGRATOR.step(galaxies, dt, G)


@dataclass
class GalaxyOptions:
    """Options for create_random_galaxy.

    ``max_star_count`` and ``max_galaxy_radius`` are optional upper bounds;
    when unset (or zero) the corresponding minimum is used exactly.
    """
    min_star_count: float = 1500
    max_star_count: Optional[float] = None
    min_galaxy_radius: float = 1.0
    max_galaxy_radius: Optional[float] = None
    # Bulk speed bound; each velocity component is uniform in ±max/2
    max_initial_speed: float = 4.0
    # How many units of time to rewind the start position along the velocity
    rewind_time_steps: float = 3.0
    # Random offset that knocks galaxies off a head-on course
    initial_collision_avoidance_offset: float = 1.5

    def __post_init__(self):
        if self.min_star_count < 0:
            raise ValueError(f"min_star_count must be non-negative, got {self.min_star_count}")
        if self.max_star_count is not None and self.max_star_count < 0:
            raise ValueError(f"max_star_count must be non-negative, got {self.max_star_count}")
        if self.max_star_count and self.max_star_count < self.min_star_count:
            warnings.warn(
                f"max_star_count ({self.max_star_count}) is below min_star_count "
                f"({self.min_star_count}); star counts will fall between them."
            )
        if self.max_galaxy_radius and self.max_galaxy_radius < self.min_galaxy_radius:
            warnings.warn(
                f"max_galaxy_radius ({self.max_galaxy_radius}) is below min_galaxy_radius "
                f"({self.min_galaxy_radius}); radii will fall between them."
            )


OptionsLike = Union[GalaxyOptions, Mapping[str, Any], None]


def resolve_options(options: OptionsLike = None, **overrides) -> GalaxyOptions:
    """Build a GalaxyOptions from an options object, a mapping, or nothing.

    Raises:
        ValueError: If a mapping or override names an unknown option
    """
    if isinstance(options, GalaxyOptions):
        values = dataclasses.asdict(options)
    else:
        values = dict(options or {})
    values.update(overrides)

    known = {f.name for f in dataclasses.fields(GalaxyOptions)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ValueError(f"Unknown galaxy options: {unknown}. Available: {sorted(known)}")
    return GalaxyOptions(**values)


def _uniform_between(rng: np.random.Generator, low: float, high: Optional[float]) -> float:
    """Uniform value in [low, high] when high is set, else exactly low."""
    if high:
        return float(rng.random()) * (high - low) + low
    return low


def create_random_galaxy(
    options: OptionsLike = None,
    rng: Optional[np.random.Generator] = None,
    **overrides
) -> Galaxy:
    """Create a galaxy with a random velocity and a disk of orbiting stars.

    The galaxy is placed so it flies towards the centre of the simulation,
    offset a little to encourage fly-bys rather than head-on collisions.

    Args:
        options: GalaxyOptions, a mapping of option names, or None for defaults
        rng: Random generator (a fresh default_rng() if None)
        **overrides: Individual options overriding ``options``

    Returns:
        The populated galaxy. Its mass equals the sampled star count.
    """
    opts = resolve_options(options, **overrides)
    if rng is None:
        rng = np.random.default_rng()

    velocity = Vec3.random_centered(opts.max_initial_speed, rng)

    # Rewind along the velocity so the galaxy starts away from the centre
    # and approaches it, then nudge it off a perfect collision course.
    rewind = velocity.mul(-opts.rewind_time_steps)
    position = rewind.add(Vec3.random_centered(opts.initial_collision_avoidance_offset, rng))

    orientation = Vec3.random(math.pi, rng)

    target_star_count = _uniform_between(rng, opts.min_star_count, opts.max_star_count)
    radius = _uniform_between(rng, opts.min_galaxy_radius, opts.max_galaxy_radius)

    galaxy = Galaxy(position, velocity, orientation, mass=target_star_count)

    rotation = Matrix3x3.from_euler(orientation.x, orientation.y, orientation.z)

    # A fractional target still counts as a loop bound: 700.2 gives 701 stars.
    while len(galaxy.stars) < target_star_count:
        galaxy.stars.append(create_random_star_in_galaxy(galaxy, rotation, radius, rng))

    return galaxy


def create_random_star_in_galaxy(
    galaxy: Galaxy,
    rotation: Matrix3x3,
    galaxy_radius: float = 1.0,
    rng: Optional[np.random.Generator] = None
) -> Star:
    """Create one star on the galaxy's disk with a circular orbital velocity.

    The star is built in the disk's local frame (disk in the x/y plane) and
    then rotated and translated into world coordinates.

    Args:
        galaxy: Galaxy supplying mass, position and velocity
        rotation: The galaxy's precomputed orientation matrix
        galaxy_radius: Disk radius
        rng: Random generator (a fresh default_rng() if None)

    Returns:
        A zero-mass star
    """
    if rng is None:
        rng = np.random.default_rng()

    angle = 2 * math.pi * float(rng.random())
    # Uniform in radius, so density per unit area rises towards the centre.
    distance = float(rng.random()) * galaxy_radius

    # A zero radius gives 0/0 = nan, so the star comes out non-finite.
    relative_distance = distance / galaxy_radius if galaxy_radius else math.nan
    # Exponential falloff keeps most stars near the plane and thickens the core.
    height = ((float(rng.random()) * math.exp(-2 * relative_distance)) / 5) * galaxy_radius
    if float(rng.random()) < 0.5:
        height = -height

    # Circular orbit speed v = sqrt(G * M / r). The height is ignored dynamically.
    distance_3d = math.sqrt(distance ** 2 + height ** 2)
    orbital_speed = math.sqrt((galaxy.mass * G) / distance_3d) if distance_3d > 0 else math.inf

    sin_w = math.sin(angle)
    cos_w = math.cos(angle)

    local_position = Vec3(distance * cos_w, distance * sin_w, height)
    # (-y, x) is perpendicular to (x, y): counter-clockwise circular motion
    local_velocity = Vec3(-orbital_speed * sin_w, orbital_speed * cos_w, 0.0)

    world_position = rotation.transform(local_position).add(galaxy.position)
    world_velocity = rotation.transform(local_velocity).add(galaxy.velocity)

    return Star(world_position, world_velocity)


def create_random_galaxies(
    count: int,
    options: OptionsLike = None,
    rng: Optional[np.random.Generator] = None
) -> List[Galaxy]:
    """Create count independent random galaxies sharing the same options."""
    if rng is None:
        rng = np.random.default_rng()
    return [create_random_galaxy(options, rng) for _ in range(count)]
