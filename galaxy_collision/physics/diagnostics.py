"""Diagnostics for galaxy simulations.

Only galaxies carry mass, so energies and centre of mass are computed over
the central bodies. Stars are tracers and contribute nothing.
"""

from typing import Sequence
import numpy as np
from galaxy_collision.astro import Galaxy
from galaxy_collision.math.vector import Vec3


def _stack(galaxies: Sequence[Galaxy]):
    positions = np.array([g.position.to_array() for g in galaxies]).reshape(-1, 3)
    velocities = np.array([g.velocity.to_array() for g in galaxies]).reshape(-1, 3)
    masses = np.array([g.mass for g in galaxies], dtype=np.float64)
    return positions, velocities, masses


def kinetic_energy(galaxies: Sequence[Galaxy]) -> float:
    """K = Σ ½ m v²."""
    _, velocities, masses = _stack(galaxies)
    return float(0.5 * np.sum(masses * np.sum(velocities ** 2, axis=1)))


def potential_energy(galaxies: Sequence[Galaxy], G: float) -> float:
    """U = -G Σ_{i<j} m_i m_j / r_ij.

    Coincident pairs are skipped, matching the force sum.
    """
    positions, _, masses = _stack(galaxies)
    n = len(masses)
    if n < 2:
        return 0.0

    r_diff = positions[np.newaxis, :, :] - positions[:, np.newaxis, :]
    r = np.sqrt(np.sum(r_diff ** 2, axis=2))
    i, j = np.triu_indices(n, k=1)
    pair_r = r[i, j]
    nonzero = pair_r > 0
    return float(-G * np.sum(masses[i][nonzero] * masses[j][nonzero] / pair_r[nonzero]))


def total_energy(galaxies: Sequence[Galaxy], G: float) -> float:
    """Kinetic plus potential energy of the galaxies."""
    return kinetic_energy(galaxies) + potential_energy(galaxies, G)


def center_of_mass(galaxies: Sequence[Galaxy]) -> Vec3:
    """Mass-weighted mean galaxy position.

    Returns the origin when the total mass is zero.
    """
    positions, _, masses = _stack(galaxies)
    total_mass = np.sum(masses)
    if total_mass == 0:
        return Vec3.zero()
    return Vec3.from_array(np.sum(masses[:, np.newaxis] * positions, axis=0) / total_mass)


def galaxy_separations(galaxies: Sequence[Galaxy]) -> np.ndarray:
    """Pairwise distances between galaxy centres, shape (n, n)."""
    positions, _, _ = _stack(galaxies)
    r_diff = positions[np.newaxis, :, :] - positions[:, np.newaxis, :]
    return np.sqrt(np.sum(r_diff ** 2, axis=2))
