"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
from typing import Callable

# (state, t) -> derivative; state is a scalar or a 1-D sequence
Derivative = Callable[..., object]


class Integrator(ABC):
    """Abstract interface for numerical integrators.

    Every integrator is a pure step function: it never mutates the state it
    is given and returns a new state of the same kind.
    """

    @abstractmethod
    def integrate(self, state, derivative: Derivative, dt: float, t: float = 0.0):
        """Advance ``state`` by one time step.

        Args:
            state: Current state (scalar or 1-D sequence, layout depends on scheme)
            derivative: Function ``derivative(state, t)`` for this scheme
            dt: Time step
            t: Current time

        Returns:
            New state after time step dt
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the registry name of this integrator."""
        pass

    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy (e.g., 1 for Euler, 2 for Verlet, 4 for RK4)."""
        pass

    @property
    def symplectic(self) -> bool:
        """Whether the scheme is symplectic (better long-run energy behaviour)."""
        return False

    def __call__(self, state, derivative: Derivative, dt: float, t: float = 0.0):
        return self.integrate(state, derivative, dt, t)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, order={self.order})"
