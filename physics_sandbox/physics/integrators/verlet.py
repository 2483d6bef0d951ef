"""Position Verlet integrator (symplectic, O(h²) accuracy)."""

import numpy as np
from physics_sandbox.physics.integrators.base import Integrator, Derivative
from physics_sandbox.physics.state import as_vector, derivative_vector, split_halves


class VerletIntegrator(Integrator):
    """Position (Stormer) Verlet - second-order, symplectic.

    State layout: ``[position(n), previous_position(n)]``.

    x_new = 2*x - x_prev + a(x)*dt^2

    The returned state is ``[x_new, x]``: the current position becomes the new
    "previous". No velocity is tracked. The derivative receives the full
    concatenated state and must return the acceleration only (length n).
    """

    @property
    def name(self) -> str:
        return "verlet"

    @property
    def order(self) -> int:
        return 2

    @property
    def symplectic(self) -> bool:
        return True

    def integrate(self, state, derivative: Derivative, dt: float, t: float = 0.0) -> np.ndarray:
        """Position Verlet step.

        Args:
            state: ``[position, previous_position]`` as a flat sequence
            derivative: Function returning acceleration (n) given (state, t)
            dt: Time step
            t: Current time

        Returns:
            New state ``[new_position, position]`` as an array
        """
        y, _ = as_vector(state)
        position, previous = split_halves(y, self.name)
        n = position.shape[0]

        acceleration = derivative_vector(derivative(y.copy(), t), n, "verlet acceleration")
        new_position = 2 * position - previous + acceleration * dt * dt

        return np.concatenate([new_position, position])


_verlet = VerletIntegrator()


def verlet(state, derivative: Derivative, dt: float, t: float = 0.0) -> np.ndarray:
    """Functional form of :class:`VerletIntegrator`."""
    return _verlet.integrate(state, derivative, dt, t)
