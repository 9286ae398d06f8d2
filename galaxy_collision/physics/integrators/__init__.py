"""Integrators for galaxy simulations."""

from galaxy_collision.physics.integrators.base import Integrator
from galaxy_collision.physics.integrators.symplectic_euler import SymplecticEulerIntegrator

__all__ = ["Integrator", "SymplecticEulerIntegrator"]
