"""State I/O for saving and loading galaxy collections."""

import numpy as np
import json
from typing import Tuple, Dict, Any, List, Optional, Sequence
from pathlib import Path
from galaxy_collision.astro import Galaxy, Star
from galaxy_collision.math.vector import Vec3


def _vectors(vectors: Sequence[Vec3]) -> np.ndarray:
    return np.array([v.to_array() for v in vectors], dtype=np.float64).reshape(-1, 3)


def save_galaxies(
    galaxies: Sequence[Galaxy],
    output_path: str,
    metadata: Optional[Dict[str, Any]] = None
):
    """Save a galaxy collection to file.

    Args:
        galaxies: Galaxies (with their stars) to save
        output_path: Output file path (.npz or .json)
        metadata: Optional metadata dictionary
    """
    output_path = Path(output_path)

    if output_path.suffix == '.npz':
        # Stars of all galaxies are stacked; star_counts splits them back up
        stars = [star for galaxy in galaxies for star in galaxy.stars]
        save_dict = {
            'galaxy_positions': _vectors([g.position for g in galaxies]),
            'galaxy_velocities': _vectors([g.velocity for g in galaxies]),
            'galaxy_orientations': _vectors([g.orientation for g in galaxies]),
            'galaxy_masses': np.array([g.mass for g in galaxies], dtype=np.float64),
            'star_counts': np.array([len(g.stars) for g in galaxies], dtype=np.int64),
            'star_positions': _vectors([s.position for s in stars]),
            'star_velocities': _vectors([s.velocity for s in stars]),
            'star_masses': np.array([s.mass for s in stars], dtype=np.float64),
        }
        if metadata:
            # Only scalars survive in npz
            for key, value in metadata.items():
                if isinstance(value, (int, float, str)):
                    save_dict[f'metadata_{key}'] = value
        np.savez_compressed(output_path, **save_dict)

    elif output_path.suffix == '.json':
        # JSON format (less efficient but human-readable)
        state_dict = {
            'galaxies': [
                {
                    'position': list(g.position),
                    'velocity': list(g.velocity),
                    'orientation': list(g.orientation),
                    'mass': g.mass,
                    'attributes': g.attributes,
                    'stars': [
                        {
                            'position': list(s.position),
                            'velocity': list(s.velocity),
                            'mass': s.mass,
                            'attributes': s.attributes,
                        }
                        for s in g.stars
                    ],
                }
                for g in galaxies
            ],
            'metadata': metadata or {}
        }
        with open(output_path, 'w') as f:
            json.dump(state_dict, f, indent=2)

    else:
        raise ValueError(f"Unsupported file format: {output_path.suffix}. Use .npz or .json")


def load_galaxies(input_path: str) -> Tuple[List[Galaxy], Dict[str, Any]]:
    """Load a galaxy collection from file.

    Args:
        input_path: Input file path

    Returns:
        Tuple of (galaxies, metadata)
    """
    input_path = Path(input_path)

    if input_path.suffix == '.npz':
        with np.load(input_path) as data:
            galaxies = []
            offset = 0
            for i, count in enumerate(data['star_counts']):
                galaxy = Galaxy(
                    Vec3.from_array(data['galaxy_positions'][i]),
                    Vec3.from_array(data['galaxy_velocities'][i]),
                    Vec3.from_array(data['galaxy_orientations'][i]),
                    mass=float(data['galaxy_masses'][i]),
                )
                for j in range(offset, offset + int(count)):
                    galaxy.stars.append(Star(
                        Vec3.from_array(data['star_positions'][j]),
                        Vec3.from_array(data['star_velocities'][j]),
                        mass=float(data['star_masses'][j]),
                    ))
                offset += int(count)
                galaxies.append(galaxy)

            metadata = {}
            for key in data.keys():
                if key.startswith('metadata_'):
                    metadata[key[9:]] = data[key].item()

        return galaxies, metadata

    elif input_path.suffix == '.json':
        with open(input_path, 'r') as f:
            state_dict = json.load(f)

        galaxies = []
        for entry in state_dict['galaxies']:
            galaxy = Galaxy(
                Vec3.from_array(entry['position']),
                Vec3.from_array(entry['velocity']),
                Vec3.from_array(entry['orientation']),
                mass=entry['mass'],
            )
            galaxy.attributes.update(entry.get('attributes', {}))
            for star_entry in entry['stars']:
                star = Star(
                    Vec3.from_array(star_entry['position']),
                    Vec3.from_array(star_entry['velocity']),
                    mass=star_entry.get('mass', 0.0),
                )
                star.attributes.update(star_entry.get('attributes', {}))
                galaxy.stars.append(star)
            galaxies.append(galaxy)

        return galaxies, state_dict.get('metadata', {})

    else:
        raise ValueError(f"Unsupported file format: {input_path.suffix}. Use .npz or .json")
