"""Configuration management."""

import json
import warnings
import yaml
from typing import Optional
from pathlib import Path
from dataclasses import dataclass, asdict, fields
from physics_sandbox.physics.gravity import GravityConfig


@dataclass
class Config:
    """Sandbox configuration."""
    # Gravity scenario
    n_bodies: int = 3
    steps: int = 600
    G: float = 1.0
    width: float = 800.0
    height: float = 600.0

    # Engine constants
    integrator: str = "rk4"
    time_step: float = 1.0 / 60.0
    softening_factor: float = 5.0
    min_mass: float = 2.0
    max_mass: float = 10000.0
    mass_power_law_scaling: float = 2.35

    # Reproducibility
    seed: Optional[int] = None

    def gravity_config(self) -> GravityConfig:
        """Build the engine configuration from this config."""
        return GravityConfig(
            softening_factor=self.softening_factor,
            min_mass=self.min_mass,
            max_mass=self.max_mass,
            mass_power_law_scaling=self.mass_power_law_scaling,
            integrator=self.integrator,
            time_step=self.time_step,
        )


def load_config(config_path: str) -> Config:
    """Load configuration from file.

    Unknown keys are ignored with a warning.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        Config object
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix in ('.yaml', '.yml'):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    data = data or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")
    known = {field.name for field in fields(Config)}
    unknown = sorted(set(data) - known)
    if unknown:
        warnings.warn(f"Ignoring unknown config keys in {config_path}: {unknown}")

    return Config(**{key: value for key, value in data.items() if key in known})


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
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
