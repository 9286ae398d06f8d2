"""I/O utilities for state management."""

from galaxy_collision.io.state_io import save_galaxies, load_galaxies

__all__ = ["save_galaxies", "load_galaxies"]
