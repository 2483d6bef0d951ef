"""Numerical integrators for ODE-driven simulations."""

from physics_sandbox.physics.integrators.base import Integrator
from physics_sandbox.physics.integrators.euler import EulerIntegrator, euler
from physics_sandbox.physics.integrators.rk4 import RK4Integrator, rk4
from physics_sandbox.physics.integrators.verlet import VerletIntegrator, verlet
from physics_sandbox.physics.integrators.velocity_verlet import (
    VelocityVerletIntegrator,
    velocity_verlet,
)
from physics_sandbox.physics.integrators.registry import (
    IntegratorKind,
    INTEGRATORS,
    get_integrator,
    integrate,
    list_integrators,
)

__all__ = [
    "Integrator",
    "EulerIntegrator",
    "RK4Integrator",
    "VerletIntegrator",
    "VelocityVerletIntegrator",
    "euler",
    "rk4",
    "verlet",
    "velocity_verlet",
    "IntegratorKind",
    "INTEGRATORS",
    "get_integrator",
    "integrate",
    "list_integrators",
]
