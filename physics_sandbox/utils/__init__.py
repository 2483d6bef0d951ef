"""Utility functions for reproducibility and configuration."""

from physics_sandbox.utils.reproducibility import make_rng
from physics_sandbox.utils.config import load_config, save_config, Config

__all__ = ["make_rng", "load_config", "save_config", "Config"]
