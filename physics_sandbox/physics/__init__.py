"""Physics core: integrators, gravity engine and consumer simulations."""

from physics_sandbox.physics.gravity import Body, GravityConfig
from physics_sandbox.physics.gravity_engine import GravityEngine, GravityState
from physics_sandbox.physics.simulation import GravitySimulation

__all__ = ["Body", "GravityConfig", "GravityEngine", "GravityState", "GravitySimulation"]
