"""Angle constants and random angle sampling."""

import math
from typing import Optional
import numpy as np


TWO_PI = math.pi * 2


def random_angle(rng: Optional[np.random.Generator] = None) -> float:
    """Uniform angle in [0, 2π)."""
    if rng is None:
        rng = np.random.default_rng()
    return float(rng.random()) * TWO_PI


def random_angle_in_range(min_angle: float, max_angle: float, rng: Optional[np.random.Generator] = None) -> float:
    """Uniform angle in [min_angle, max_angle)."""
    if rng is None:
        rng = np.random.default_rng()
    return float(rng.random()) * (max_angle - min_angle) + min_angle
