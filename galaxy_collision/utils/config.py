"""Configuration management."""

import json
import yaml
from typing import Optional
from pathlib import Path
from dataclasses import dataclass, asdict, fields


@dataclass
class Config:
    """Simulation configuration."""
    # Scene
    galaxy_count: int = 3
    # Upper bound (exclusive) for a random galaxy count per scene; None keeps galaxy_count
    max_galaxy_count: Optional[int] = None
    min_star_count: float = 700
    max_star_count: Optional[float] = 1000
    min_galaxy_radius: float = 0.5
    max_galaxy_radius: Optional[float] = 1.5
    max_initial_speed: float = 4.0
    rewind_time_steps: float = 3.0
    initial_collision_avoidance_offset: float = 1.5

    # Integration
    dt: float = 0.005
    G: float = 0.001
    steps: int = 1500
    # Regenerate the scene once this many steps have run (None disables)
    reset_after_steps: Optional[int] = 1500

    # Rendering
    render: bool = False
    render_every: int = 1

    # Reproducibility
    seed: Optional[int] = None

    def galaxy_options(self):
        """Generator options taken from this configuration."""
        from galaxy_collision.physics.simple import GalaxyOptions

        return GalaxyOptions(
            min_star_count=self.min_star_count,
            max_star_count=self.max_star_count,
            min_galaxy_radius=self.min_galaxy_radius,
            max_galaxy_radius=self.max_galaxy_radius,
            max_initial_speed=self.max_initial_speed,
            rewind_time_steps=self.rewind_time_steps,
            initial_collision_avoidance_offset=self.initial_collision_avoidance_offset,
        )


def load_config(config_path: str) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        Config object

    Raises:
        ValueError: If the file contains keys Config does not know
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix in ('.yaml', '.yml'):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    data = data or {}
    known = {f.name for f in fields(Config)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys in {config_path}: {unknown}")

    return Config(**data)


def save_config(config: Config, output_path: str):
    """Save configuration to file.

    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)

    with open(output_path, 'w') as f:
        if output_path.suffix in ('.yaml', '.yml'):
            yaml.dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
