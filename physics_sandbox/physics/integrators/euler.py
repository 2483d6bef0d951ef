"""Euler method integrator (baseline, O(h) accuracy)."""

from physics_sandbox.physics.integrators.base import Integrator, Derivative
from physics_sandbox.physics.state import as_vector, derivative_vector, restore


class EulerIntegrator(Integrator):
    """Euler method - simple first-order integrator.

    Fast but less accurate. Good for baseline comparisons and for the
    diffusion and trajectory demos.
    """

    @property
    def name(self) -> str:
        return "euler"

    @property
    def order(self) -> int:
        return 1

    def integrate(self, state, derivative: Derivative, dt: float, t: float = 0.0):
        """Euler step: y_new = y + dt * f(y, t).

        Args:
            state: Current state (scalar or 1-D sequence)
            derivative: Function returning dy/dt given (state, t)
            dt: Time step
            t: Current time

        Returns:
            New state; a scalar for scalar input, an array otherwise
        """
        y, was_scalar = as_vector(state)
        dy = derivative_vector(derivative(y.copy(), t), y.shape[0])
        return restore(y + dt * dy, was_scalar)


_euler = EulerIntegrator()


def euler(state, derivative: Derivative, dt: float, t: float = 0.0):
    """Functional form of :class:`EulerIntegrator`."""
    return _euler.integrate(state, derivative, dt, t)
