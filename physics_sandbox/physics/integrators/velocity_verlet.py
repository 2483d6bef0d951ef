"""Velocity Verlet integrator (symplectic, O(h²) accuracy)."""

import numpy as np
from physics_sandbox.physics.integrators.base import Integrator, Derivative
from physics_sandbox.physics.state import as_vector, derivative_vector, split_halves


class VelocityVerletIntegrator(Integrator):
    """Velocity Verlet integrator - second-order, symplectic.

    Canonical Velocity Verlet algorithm:
    1. x_new = x + v*dt + 0.5*a_old*dt^2
    2. (re-evaluate the derivative at x_new to get a_new)
    3. v_new = v + 0.5*(a_old + a_new)*dt

    State layout is ``[position(n), velocity(n)]`` and the derivative returns
    ``[velocity(n), acceleration(n)]``; only the acceleration half is used.
    The second evaluation is made at ``[x_new, v]`` with the old velocity,
    which is the textbook form rather than an iterated correction.
    """

    @property
    def name(self) -> str:
        return "velocityVerlet"

    @property
    def order(self) -> int:
        return 2

    @property
    def symplectic(self) -> bool:
        return True

    def integrate(self, state, derivative: Derivative, dt: float, t: float = 0.0) -> np.ndarray:
        """Velocity Verlet step. Calls ``derivative`` exactly twice.

        Args:
            state: ``[position, velocity]`` as a flat sequence
            derivative: Function returning ``[velocity, acceleration]`` given (state, t)
            dt: Time step
            t: Current time

        Returns:
            New state ``[new_position, new_velocity]`` as an array
        """
        y, _ = as_vector(state)
        position, velocity = split_halves(y, self.name)
        n = position.shape[0]

        d_old = derivative_vector(derivative(y.copy(), t), 2 * n, "velocityVerlet derivative")
        acc_old = d_old[n:]

        new_position = position + velocity * dt + 0.5 * acc_old * dt * dt

        predicted = np.concatenate([new_position, velocity])
        d_new = derivative_vector(derivative(predicted, t + dt), 2 * n, "velocityVerlet derivative")
        acc_new = d_new[n:]

        new_velocity = velocity + 0.5 * (acc_old + acc_new) * dt

        return np.concatenate([new_position, new_velocity])


_velocity_verlet = VelocityVerletIntegrator()


def velocity_verlet(state, derivative: Derivative, dt: float, t: float = 0.0) -> np.ndarray:
    """Functional form of :class:`VelocityVerletIntegrator`."""
    return _velocity_verlet.integrate(state, derivative, dt, t)
