"""Symplectic (semi-implicit) Euler integrator for galaxies and their stars."""

import math
from typing import Optional, Sequence
from galaxy_collision.astro import Galaxy
from galaxy_collision.math.vector import Vec3
from galaxy_collision.physics.integrators.base import Integrator
from galaxy_collision.physics.util import iter_stars


def gravitational_acceleration(
    position: Vec3,
    galaxies: Sequence[Galaxy],
    G: float,
    exclude: Optional[Galaxy] = None
) -> Vec3:
    """Acceleration at a point due to the central masses of galaxies.

    a = Σ G * M / |r|³ * r, with r pointing from the point to each galaxy.
    Galaxies sitting exactly on the point contribute nothing.

    Args:
        position: Point where the acceleration is evaluated
        galaxies: Attracting galaxies
        G: Gravitational constant
        exclude: Galaxy to leave out of the sum (compared by identity)

    Returns:
        Total acceleration vector
    """
    total = Vec3.zero()
    for other in galaxies:
        if other is exclude:
            continue

        d_pos = other.position.sub(position)
        dist_sq = d_pos.x ** 2 + d_pos.y ** 2 + d_pos.z ** 2
        if dist_sq == 0:
            continue

        dist = math.sqrt(dist_sq)
        total = total.add(d_pos.mul(G * other.mass / (dist * dist_sq)))
    return total


def update_stars(galaxies: Sequence[Galaxy], dt: float, G: float):
    """Phase 1: kick then drift every star using start-of-step galaxy positions.

    Stars feel every galaxy, including their own; star-star forces are ignored.
    """
    for star, _galaxy, _i in iter_stars(galaxies):
        acceleration = gravitational_acceleration(star.position, galaxies, G)
        star.velocity = star.velocity.add(acceleration.mul(dt))
        star.position = star.position.add(star.velocity.mul(dt))


def update_galaxy_velocities(galaxies: Sequence[Galaxy], dt: float, G: float):
    """Phase 2: kick every galaxy from all the others. Positions are not touched."""
    accelerations = [
        gravitational_acceleration(galaxy.position, galaxies, G, exclude=galaxy)
        for galaxy in galaxies
    ]
    for galaxy, acceleration in zip(galaxies, accelerations):
        galaxy.velocity = galaxy.velocity.add(acceleration.mul(dt))


def update_galaxy_positions(galaxies: Sequence[Galaxy], dt: float):
    """Phase 3: drift every galaxy with its already-updated velocity."""
    for galaxy in galaxies:
        galaxy.position = galaxy.position.add(galaxy.velocity.mul(dt))


class SymplecticEulerIntegrator(Integrator):
    """Symplectic Euler: v_new = v + a*dt, then r_new = r + v_new*dt.

    One step runs three phases in a fixed order:

    1. stars (velocity then position), against start-of-step galaxy positions
    2. galaxy velocities, still against start-of-step positions
    3. galaxy positions

    Moving galaxies only after every velocity is known keeps all force
    evaluations within a step on the same positions.
    """

    @property
    def name(self) -> str:
        return "symplectic_euler"

    @property
    def order(self) -> int:
        return 1

    def step(self, galaxies: Sequence[Galaxy], dt: float, G: float):
        update_stars(galaxies, dt, G)
        update_galaxy_velocities(galaxies, dt, G)
        update_galaxy_positions(galaxies, dt)
