"""Name-keyed dispatch over the closed set of integrators.

Engines hold an :class:`Integrator` picked here at configuration time and stay
oblivious to which scheme is active.
"""

from enum import Enum
from typing import Dict, List, Union
from physics_sandbox.physics.errors import UnknownIntegratorError
from physics_sandbox.physics.integrators.base import Integrator, Derivative
from physics_sandbox.physics.integrators.euler import EulerIntegrator
from physics_sandbox.physics.integrators.rk4 import RK4Integrator
from physics_sandbox.physics.integrators.verlet import VerletIntegrator
from physics_sandbox.physics.integrators.velocity_verlet import VelocityVerletIntegrator


class IntegratorKind(str, Enum):
    """The integration schemes available to engines."""

    EULER = "euler"
    RK4 = "rk4"
    VERLET = "verlet"
    VELOCITY_VERLET = "velocityVerlet"


INTEGRATORS: Dict[IntegratorKind, Integrator] = {
    IntegratorKind.EULER: EulerIntegrator(),
    IntegratorKind.RK4: RK4Integrator(),
    IntegratorKind.VERLET: VerletIntegrator(),
    IntegratorKind.VELOCITY_VERLET: VelocityVerletIntegrator(),
}

_ALIASES = {
    "velocity_verlet": IntegratorKind.VELOCITY_VERLET,
    "velocity-verlet": IntegratorKind.VELOCITY_VERLET,
}


def list_integrators() -> List[str]:
    """List registry names of all integrators."""
    return [kind.value for kind in IntegratorKind]


def resolve_kind(name: Union[str, IntegratorKind]) -> IntegratorKind:
    """Map a name (or kind) onto an :class:`IntegratorKind`.

    Raises:
        UnknownIntegratorError: If the name is not a known integrator
    """
    if isinstance(name, IntegratorKind):
        return name
    if isinstance(name, str):
        try:
            return IntegratorKind(name)
        except ValueError:
            pass
        alias = _ALIASES.get(name.lower())
        if alias is not None:
            return alias
        for kind in IntegratorKind:
            if kind.value.lower() == name.lower():
                return kind
    raise UnknownIntegratorError(
        f"Unknown integrator '{name}'. Available: {list_integrators()}"
    )


def get_integrator(name: Union[str, IntegratorKind]) -> Integrator:
    """Get the integrator instance registered under ``name``."""
    return INTEGRATORS[resolve_kind(name)]


def integrate(name: Union[str, IntegratorKind], state, derivative: Derivative, dt: float, t: float = 0.0):
    """Dispatch one step to the integrator registered under ``name``."""
    return get_integrator(name).integrate(state, derivative, dt, t)
