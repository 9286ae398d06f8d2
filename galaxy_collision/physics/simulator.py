"""Main simulator controller."""

import math
from typing import Callable, List, Optional, Tuple
import numpy as np
from galaxy_collision.astro import Galaxy
from galaxy_collision.physics.integrators.base import Integrator
from galaxy_collision.physics.integrators.symplectic_euler import SymplecticEulerIntegrator
from galaxy_collision.physics.simple import create_random_galaxy
from galaxy_collision.physics.diagnostics import total_energy
from galaxy_collision.utils.config import Config
from galaxy_collision.utils.reproducibility import make_rng


class Simulator:
    """Main simulation controller.

    Owns the galaxy collection, drives the integrator one step at a time and
    regenerates the scene after ``config.reset_after_steps`` steps, the way
    the screensaver restarts once galaxies have drifted apart.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        integrator: Optional[Integrator] = None,
        rng: Optional[np.random.Generator] = None,
        galaxy_factory: Optional[Callable[[], Galaxy]] = None,
        verbose: bool = False
    ):
        """Initialize simulator.

        Args:
            config: Simulation configuration (default: Config())
            integrator: Integrator to use (default: symplectic Euler)
            rng: Random generator for scene creation (default: seeded from config.seed)
            galaxy_factory: Zero-argument callable returning one populated galaxy
                (default: create_random_galaxy with the config's options and rng)
            verbose: Print a line whenever the scene is regenerated
        """
        self.config = config or Config()
        self.integrator = integrator or SymplecticEulerIntegrator()
        self.rng = rng if rng is not None else make_rng(self.config.seed)
        self.galaxy_factory = galaxy_factory or self._create_galaxy
        self.verbose = verbose

        self.dt = self.config.dt
        self.G = self.config.G

        self.galaxies: List[Galaxy] = []
        self.time = 0.0
        self.step_count = 0
        self.resets = 0
        self.paused = False

        # Callbacks
        self.on_step_callback: Optional[Callable] = None
        self.on_reset_callback: Optional[Callable] = None

    def initialize(self, galaxies: Optional[List[Galaxy]] = None):
        """Start a new scene.

        Args:
            galaxies: Galaxies to simulate; generated from the config if None
        """
        if galaxies is None:
            galaxies = [self.galaxy_factory() for _ in range(self.sample_galaxy_count())]
        self.galaxies = galaxies
        self.time = 0.0
        self.step_count = 0

    def sample_galaxy_count(self) -> int:
        """Number of galaxies for a new scene.

        Uniform in [galaxy_count, max_galaxy_count) when a maximum is set,
        otherwise exactly galaxy_count.
        """
        low = self.config.galaxy_count
        high = self.config.max_galaxy_count
        if high:
            return int(math.floor(float(self.rng.random()) * (high - low) + low))
        return low

    def _create_galaxy(self) -> Galaxy:
        return create_random_galaxy(self.config.galaxy_options(), self.rng)

    def reset(self):
        """Discard the current galaxies and generate fresh ones."""
        self.initialize()
        self.resets += 1
        if self.verbose:
            print(f"Scene regenerated (reset {self.resets}): {len(self.galaxies)} galaxies")
        if self.on_reset_callback:
            self.on_reset_callback(self)

    def step(self):
        """Perform one simulation step."""
        if self.paused:
            return

        self.integrator.step(self.galaxies, self.dt, self.G)
        self.time += self.dt
        self.step_count += 1

        if self.on_step_callback:
            self.on_step_callback(self)

        limit = self.config.reset_after_steps
        if limit is not None and self.step_count > limit:
            self.reset()

    def run(self, n_steps: int):
        """Run simulation for specified number of steps.

        Args:
            n_steps: Number of steps to run
        """
        for _ in range(n_steps):
            if self.paused:
                return
            self.step()

    def pause(self):
        """Pause simulation."""
        self.paused = True

    def resume(self):
        """Resume simulation."""
        self.paused = False

    def set_timestep(self, dt: float):
        """Set time step.

        Args:
            dt: New time step
        """
        self.dt = dt

    def set_integrator(self, integrator: Integrator):
        """Set integrator.

        Args:
            integrator: New integrator
        """
        self.integrator = integrator

    def get_state(self) -> Tuple[List[Galaxy], float, int]:
        """Get current simulation state.

        Returns:
            Tuple of (galaxies, time, step_count)
        """
        return self.galaxies, self.time, self.step_count

    def get_energy(self) -> float:
        """Total energy of the central bodies (stars are massless)."""
        return total_energy(self.galaxies, self.G)
