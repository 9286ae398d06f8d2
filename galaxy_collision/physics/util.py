"""Traversal helpers over the stars of a galaxy collection."""

from typing import Callable, Iterator, Sequence, Tuple
from galaxy_collision.astro import Galaxy, Star


def iter_stars(galaxies: Sequence[Galaxy]) -> Iterator[Tuple[Star, Galaxy, int]]:
    """Lazily yield (star, galaxy, index_within_galaxy), galaxies first then stars."""
    for galaxy in galaxies:
        for i, star in enumerate(galaxy.stars):
            yield star, galaxy, i


def all_stars(galaxies: Sequence[Galaxy], func: Callable[[Star, Galaxy, int], None]):
    """Call func(star, galaxy, index) for every star in the simulation.

    Args:
        galaxies: Galaxies to visit, in order
        func: Visitor receiving the star, its owning galaxy and its index
    """
    for star, galaxy, i in iter_stars(galaxies):
        func(star, galaxy, i)


def star_count(galaxies: Sequence[Galaxy]) -> int:
    """Total number of stars across all galaxies."""
    return sum(len(galaxy.stars) for galaxy in galaxies)
