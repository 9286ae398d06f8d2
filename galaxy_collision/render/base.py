"""Base renderer interface."""

from abc import ABC, abstractmethod
from typing import Sequence, Tuple
import numpy as np
from galaxy_collision.astro import Galaxy
from galaxy_collision.physics.util import iter_stars


def project_stars(galaxies: Sequence[Galaxy]) -> Tuple[np.ndarray, np.ndarray]:
    """Flatten all stars into arrays for drawing.

    Args:
        galaxies: Galaxies whose stars are drawn

    Returns:
        Tuple of (positions (n, 3), galaxy_index (n,)) in star traversal order
    """
    positions = []
    owners = []
    index_of = {id(galaxy): i for i, galaxy in enumerate(galaxies)}
    for star, galaxy, _ in iter_stars(galaxies):
        positions.append(star.position.to_array())
        owners.append(index_of[id(galaxy)])
    return (
        np.array(positions, dtype=np.float64).reshape(-1, 3),
        np.array(owners, dtype=np.int64),
    )


class Renderer(ABC):
    """Abstract base class for renderers."""

    @abstractmethod
    def render(self, galaxies: Sequence[Galaxy]):
        """Render current frame.

        Args:
            galaxies: Galaxies to draw (read only)
        """
        pass

    @abstractmethod
    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array.

        Returns:
            Image array (H, W, 3) uint8
        """
        pass

    @abstractmethod
    def clear(self):
        """Clear the renderer."""
        pass

    @abstractmethod
    def close(self):
        """Close the renderer."""
        pass
