"""Reproducibility utilities for deterministic simulations."""

import random
import numpy as np
from typing import Optional, Dict, Any


def set_all_seeds(seed: int):
    """Seed the global Python and NumPy random generators.

    Args:
        seed: Random seed
    """
    random.seed(seed)
    np.random.seed(seed)


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the generator passed to galaxy creation.

    Args:
        seed: Seed, or None for fresh OS entropy

    Returns:
        NumPy Generator
    """
    return np.random.default_rng(seed)


def get_seed_info(seed: Optional[int] = None) -> Dict[str, Any]:
    """Describe the seed used for a run, for saving alongside results.

    Args:
        seed: Optional seed to include in info

    Returns:
        Dictionary with seed information
    """
    info: Dict[str, Any] = {}

    if seed is not None:
        info['seed'] = seed

    info['numpy_version'] = np.__version__
    info['bit_generator'] = type(np.random.default_rng().bit_generator).__name__

    return info
