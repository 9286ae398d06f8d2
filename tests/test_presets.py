"""Tests for random galaxy generation."""

import math
import numpy as np
import pytest
from galaxy_collision.astro import Galaxy
from galaxy_collision.math import Matrix3x3
from galaxy_collision.physics.constants import G
from galaxy_collision.physics.simple import (
    GalaxyOptions,
    create_random_galaxy,
    create_random_galaxies,
    resolve_options,
)


def relative_states(galaxy):
    """Star positions and velocities relative to the galaxy, in world axes.

    World vectors are local · M, so ``world @ M.T`` recovers disk coordinates.
    """
    positions = np.array([(s.position - galaxy.position).to_array() for s in galaxy.stars])
    velocities = np.array([(s.velocity - galaxy.velocity).to_array() for s in galaxy.stars])
    return positions, velocities


def test_exact_star_count_with_equal_bounds():
    """min == max gives exactly that many stars."""
    galaxy = create_random_galaxy(
        {"min_star_count": 120, "max_star_count": 120},
        np.random.default_rng(1),
    )

    assert isinstance(galaxy, Galaxy)
    assert len(galaxy.stars) == 120
    assert galaxy.mass == 120


def test_star_count_without_max_uses_min():
    """An unset maximum means exactly min_star_count."""
    galaxy = create_random_galaxy(GalaxyOptions(min_star_count=30), np.random.default_rng(2))

    assert len(galaxy.stars) == 30
    assert galaxy.mass == 30


def test_star_count_in_range_and_mass_matches():
    """A sampled count lies between the bounds; mass is the raw sampled count."""
    rng = np.random.default_rng(3)
    for _ in range(5):
        galaxy = create_random_galaxy({"min_star_count": 20, "max_star_count": 60}, rng)
        assert 20 <= galaxy.mass <= 60
        assert len(galaxy.stars) == math.ceil(galaxy.mass)


def test_fractional_star_count():
    """A fractional count acts as a loop bound."""
    galaxy = create_random_galaxy({"min_star_count": 10.5}, np.random.default_rng(4))

    assert len(galaxy.stars) == 11
    assert galaxy.mass == 10.5


def test_stars_are_tracers():
    galaxy = create_random_galaxy({"min_star_count": 25}, np.random.default_rng(5))

    assert all(star.mass == 0 for star in galaxy.stars)


def test_radius_containment():
    """All stars lie within the disk radius in the galaxy's own plane."""
    radius = 2.5
    galaxy = create_random_galaxy(
        {"min_star_count": 400, "min_galaxy_radius": radius, "max_galaxy_radius": radius},
        np.random.default_rng(6),
    )
    positions, _ = relative_states(galaxy)
    local = positions @ np.array(Matrix3x3.from_euler(*galaxy.orientation).to_array()).T

    planar = np.sqrt(local[:, 0] ** 2 + local[:, 1] ** 2)
    assert np.all(planar <= radius + 1e-9)
    # Thin disk: |height| <= radius / 5
    assert np.all(np.abs(local[:, 2]) <= radius / 5 + 1e-9)


def test_zero_radius_gives_non_finite_stars():
    """A degenerate disk does not raise; its stars come out as nan."""
    galaxy = create_random_galaxy(
        {"min_star_count": 3, "min_galaxy_radius": 0},
        np.random.default_rng(1),
    )

    assert len(galaxy.stars) == 3
    for star in galaxy.stars:
        assert not np.any(np.isfinite(star.position.to_array()))


def test_disk_is_thin_and_two_sided():
    """Heights are small and fall on both sides of the plane."""
    galaxy = create_random_galaxy({"min_star_count": 500}, np.random.default_rng(7))
    positions, _ = relative_states(galaxy)
    local = positions @ np.array(Matrix3x3.from_euler(*galaxy.orientation).to_array()).T

    assert np.any(local[:, 2] > 0)
    assert np.any(local[:, 2] < 0)
    assert np.std(local[:, 2]) < np.std(local[:, 0])


def test_circular_orbital_velocities():
    """Star velocities relative to the galaxy are tangential with speed sqrt(G M / r)."""
    galaxy = create_random_galaxy({"min_star_count": 200}, np.random.default_rng(8))
    positions, velocities = relative_states(galaxy)

    distances = np.linalg.norm(positions, axis=1)
    speeds = np.linalg.norm(velocities, axis=1)

    assert np.allclose(speeds, np.sqrt(galaxy.mass * G / distances))
    # Perpendicular to the position vector
    dots = np.sum(positions * velocities, axis=1)
    assert np.allclose(dots / (distances * speeds), 0.0, atol=1e-9)


def test_orbits_are_counter_clockwise_in_disk_plane():
    """In local coordinates every star has positive angular momentum about z."""
    galaxy = create_random_galaxy({"min_star_count": 100}, np.random.default_rng(9))
    positions, velocities = relative_states(galaxy)
    m = np.array(Matrix3x3.from_euler(*galaxy.orientation).to_array())
    local_pos = positions @ m.T
    local_vel = velocities @ m.T

    lz = local_pos[:, 0] * local_vel[:, 1] - local_pos[:, 1] * local_vel[:, 0]
    assert np.all(lz > 0)
    assert np.allclose(local_vel[:, 2], 0.0, atol=1e-9)


def test_galaxy_motion_and_placement():
    """Velocity is a centred cube sample; position is rewound along it plus an offset."""
    rng = np.random.default_rng(10)
    for _ in range(20):
        galaxy = create_random_galaxy(
            {"min_star_count": 1, "max_initial_speed": 4, "rewind_time_steps": 3,
             "initial_collision_avoidance_offset": 1.5},
            rng,
        )
        v = galaxy.velocity.to_array()
        assert np.all(np.abs(v) <= 2.0)

        offset = galaxy.position.to_array() + 3 * v
        assert np.all(np.abs(offset) <= 0.75 + 1e-12)

        assert all(0.0 <= angle < math.pi for angle in galaxy.orientation)


def test_seeded_generation_is_reproducible():
    """Same seed, same galaxy."""
    a = create_random_galaxy({"min_star_count": 50}, np.random.default_rng(42))
    b = create_random_galaxy({"min_star_count": 50}, np.random.default_rng(42))

    assert a.position == b.position
    assert a.velocity == b.velocity
    assert a.orientation == b.orientation
    assert [s.position for s in a.stars] == [s.position for s in b.stars]
    assert [s.velocity for s in a.stars] == [s.velocity for s in b.stars]


def test_default_rng():
    """Without an rng the generator still works."""
    galaxy = create_random_galaxy(min_star_count=5)

    assert len(galaxy.stars) == 5


def test_options_sources():
    """Options come from a dataclass, a mapping, or keyword overrides."""
    opts = resolve_options(GalaxyOptions(min_star_count=10), max_star_count=20)
    assert opts.min_star_count == 10
    assert opts.max_star_count == 20

    opts = resolve_options({"min_galaxy_radius": 0.5})
    assert opts.min_galaxy_radius == 0.5
    assert opts.min_star_count == 1500

    defaults = resolve_options()
    assert defaults == GalaxyOptions()
    assert defaults.max_star_count is None
    assert defaults.max_initial_speed == 4
    assert defaults.rewind_time_steps == 3
    assert defaults.initial_collision_avoidance_offset == 1.5


def test_unknown_option_rejected():
    with pytest.raises(ValueError, match="Unknown galaxy options"):
        resolve_options({"minStarCount": 10})


def test_negative_star_count_rejected():
    with pytest.raises(ValueError):
        GalaxyOptions(min_star_count=-1)


def test_inverted_bounds_warn():
    with pytest.warns(UserWarning):
        GalaxyOptions(min_star_count=100, max_star_count=50)
    with pytest.warns(UserWarning):
        GalaxyOptions(min_galaxy_radius=2.0, max_galaxy_radius=1.0)


def test_create_random_galaxies():
    galaxies = create_random_galaxies(3, {"min_star_count": 10}, np.random.default_rng(12))

    assert len(galaxies) == 3
    assert all(len(g.stars) == 10 for g in galaxies)
    assert galaxies[0].position != galaxies[1].position
