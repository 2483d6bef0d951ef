"""
Physics Sandbox - pluggable numerical integrators driving small physics engines.

Features:
- Interchangeable integrators (Euler, RK4, position Verlet, velocity Verlet)
- Softened N-body gravity engine with toroidal boundaries
- Heat diffusion and projectile trajectory simulations
- State save/load (NPZ/JSON) and YAML/JSON configuration
- CLI interface
"""

__version__ = "0.1.0"

from physics_sandbox.physics.gravity_engine import GravityEngine
from physics_sandbox.physics.integrators import get_integrator, list_integrators

__all__ = [
    "GravityEngine",
    "get_integrator",
    "list_integrators",
]
