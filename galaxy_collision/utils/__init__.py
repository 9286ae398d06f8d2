"""Utility functions for reproducibility and configuration."""

from galaxy_collision.utils.reproducibility import set_all_seeds, make_rng, get_seed_info
from galaxy_collision.utils.config import load_config, save_config, Config

__all__ = ["set_all_seeds", "make_rng", "get_seed_info", "load_config", "save_config", "Config"]
