"""One-dimensional heat diffusion driven by the scalar integrator contract."""

import math
from typing import List, Optional, Sequence
from physics_sandbox.physics.errors import DomainError
from physics_sandbox.physics.integrators.registry import get_integrator

MIN_POINTS = 3


def heat_diffusion(
    temperatures: Sequence[float],
    alpha: float,
    dt: float,
    dx: float = 1.0,
    integrator: str = "euler",
) -> List[float]:
    """Advance a temperature profile by one explicit finite-difference step.

    Interior points follow dT/dt = alpha * (T[i-1] - 2*T[i] + T[i+1]) / dx^2,
    each integrated as a scalar ODE with the neighbours frozen over the step.
    The two end points are fixed (Dirichlet boundaries).

    Args:
        temperatures: Current profile (at least 3 points)
        alpha: Thermal diffusivity
        dt: Time step
        dx: Grid spacing
        integrator: Registry name of the scalar integrator (euler or rk4)

    Returns:
        New temperature profile as a list
    """
    n = len(temperatures)
    if n < MIN_POINTS:
        raise DomainError(f"Heat diffusion needs at least {MIN_POINTS} points, got {n}")
    step = get_integrator(integrator)

    new_temps = list(temperatures)
    for i in range(1, n - 1):
        laplacian = (temperatures[i - 1] - 2 * temperatures[i] + temperatures[i + 1]) / (dx * dx)
        rate = alpha * laplacian
        new_temps[i] = step.integrate(temperatures[i], lambda s, t, rate=rate: rate, dt)

    return new_temps


def gaussian_profile(points: int, peak: float = 100.0) -> List[float]:
    """Hot-in-the-middle profile with both ends held at zero."""
    if points < MIN_POINTS:
        raise DomainError(f"Profile needs at least {MIN_POINTS} points, got {points}")
    temps = []
    for i in range(points):
        normalized = i / (points - 1)
        temps.append(peak * math.exp(-((normalized - 0.5) * 4) ** 2))
    temps[0] = 0.0
    temps[-1] = 0.0
    return temps


class TemperatureSimulation:
    """Heat equalisation along a rod."""

    def __init__(self, points: int = 50, diffusivity: float = 0.1, time_step: float = 0.01):
        self.points = points
        self.diffusivity = diffusivity
        self.time_step = time_step
        self.temperatures: List[float] = []
        self.step_count = 0
        self.initialize()

    def initialize(self):
        self.temperatures = gaussian_profile(self.points)
        self.step_count = 0

    def step(self):
        self.temperatures = heat_diffusion(self.temperatures, self.diffusivity, self.time_step)
        self.step_count += 1

    def reset(self, points: Optional[int] = None):
        if points is not None:
            if points < MIN_POINTS:
                raise DomainError(f"Rod needs at least {MIN_POINTS} points, got {points}")
            self.points = points
        self.initialize()

    def set_diffusivity(self, diffusivity: float):
        self.diffusivity = diffusivity

    def get_state(self) -> dict:
        return {
            "temperatures": list(self.temperatures),
            "points": self.points,
            "step_count": self.step_count,
        }
