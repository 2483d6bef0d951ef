"""Runge-Kutta 4th order integrator (high accuracy, O(h⁴))."""

from physics_sandbox.physics.integrators.base import Integrator, Derivative
from physics_sandbox.physics.state import as_vector, derivative_vector, restore


class RK4Integrator(Integrator):
    """Runge-Kutta 4th order method - high accuracy integrator.

    Most accurate of the four schemes but calls the derivative four times per
    step. Exact for ODEs whose solution is a polynomial of degree <= 3 in t.
    """

    @property
    def name(self) -> str:
        return "rk4"

    @property
    def order(self) -> int:
        return 4

    def integrate(self, state, derivative: Derivative, dt: float, t: float = 0.0):
        """RK4 step using the standard 4-stage method.

        k1 = f(y, t)
        k2 = f(y + k1*dt/2, t + dt/2)
        k3 = f(y + k2*dt/2, t + dt/2)
        k4 = f(y + k3*dt, t + dt)

        y_new = y + dt/6 * (k1 + 2*k2 + 2*k3 + k4)

        Each stage passes a freshly built array to ``derivative``.
        """
        y, was_scalar = as_vector(state)
        n = y.shape[0]
        half = 0.5 * dt

        k1 = derivative_vector(derivative(y.copy(), t), n)
        k2 = derivative_vector(derivative(y + half * k1, t + half), n)
        k3 = derivative_vector(derivative(y + half * k2, t + half), n)
        k4 = derivative_vector(derivative(y + dt * k3, t + dt), n)

        new_state = y + (dt / 6) * (k1 + 2 * k2 + 2 * k3 + k4)
        return restore(new_state, was_scalar)


_rk4 = RK4Integrator()


def rk4(state, derivative: Derivative, dt: float, t: float = 0.0):
    """Functional form of :class:`RK4Integrator`."""
    return _rk4.integrate(state, derivative, dt, t)
