"""Basic example of using the galaxy collision simulator."""

import numpy as np
from galaxy_collision import create_random_galaxy, update_galaxies, star_count
from galaxy_collision.physics.diagnostics import total_energy, galaxy_separations
from galaxy_collision.physics.constants import G


def main():
    """Run three galaxies for a few hundred steps."""
    rng = np.random.default_rng(42)

    galaxies = [
        create_random_galaxy(
            {
                "min_star_count": 700,
                "max_star_count": 1000,
                "min_galaxy_radius": 0.5,
                "max_galaxy_radius": 1.5,
            },
            rng,
        )
        for _ in range(3)
    ]

    print(f"Created {len(galaxies)} galaxies with {star_count(galaxies)} stars")
    print(f"Initial energy: {total_energy(galaxies, G):.6f}")

    for step in range(500):
        update_galaxies(galaxies)
        if step % 100 == 0:
            separations = galaxy_separations(galaxies)
            np.fill_diagonal(separations, np.inf)
            closest = np.min(separations)
            print(f"Step {step}: Energy={total_energy(galaxies, G):.6f}, closest pair={closest:.3f}")

    print(f"Final energy: {total_energy(galaxies, G):.6f}")
    print("Simulation complete!")


if __name__ == "__main__":
    main()
