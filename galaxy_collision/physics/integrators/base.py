"""Abstract base class for galaxy integrators."""

from abc import ABC, abstractmethod
from typing import Sequence
from galaxy_collision.astro import Galaxy


class Integrator(ABC):
    """Abstract interface for integrators that advance galaxies in place."""

    @abstractmethod
    def step(self, galaxies: Sequence[Galaxy], dt: float, G: float):
        """Advance every galaxy and star by one time step.

        Args:
            galaxies: Galaxies to update in place (each owning its stars)
            dt: Time step
            G: Gravitational constant
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass

    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy (1 for Euler-type schemes)."""
        pass
