"""Astronomical entities."""

from galaxy_collision.astro.star import Star
from galaxy_collision.astro.galaxy import Galaxy

__all__ = ["Star", "Galaxy"]
