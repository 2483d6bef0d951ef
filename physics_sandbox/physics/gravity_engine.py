"""N-body gravity engine: pairwise forces, integrator delegation, toroidal wrap."""

import copy
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple
import numpy as np
from physics_sandbox.physics.errors import DomainError
from physics_sandbox.physics.gravity import (
    Body,
    GravityConfig,
    DEFAULT_CONFIG,
    calculate_gravitational_force,
    generate_power_law_mass,
    generate_random_bodies,
    validate_mass,
)
from physics_sandbox.physics.integrators.base import Integrator
from physics_sandbox.physics.integrators.registry import IntegratorKind, get_integrator, resolve_kind
from physics_sandbox.utils.reproducibility import make_rng


@dataclass(frozen=True)
class GravityState:
    """Snapshot of the engine. ``bodies`` are copies, never the engine's own objects."""

    bodies: Tuple[Body, ...]
    width: float
    height: float

    def to_dict(self) -> dict:
        return {
            "bodies": [body.to_dict() for body in self.bodies],
            "width": self.width,
            "height": self.height,
        }


def wrap_coordinate(value: float, extent: float) -> float:
    """Wrap ``value`` into the closed range [0, extent] (toroidal boundary)."""
    if 0.0 <= value <= extent:
        return value
    return value % extent


class GravityEngine:
    """2D N-body gravity engine.

    Owns a fixed-size collection of bodies. Each ``step()`` accumulates the
    softened pairwise forces, advances every body with the configured
    integrator over one fixed time step, and wraps positions around the
    simulation area. The engine does not track running/stopped state; the
    caller decides when to call ``step()``.
    """

    def __init__(
        self,
        width: float,
        height: float,
        body_count: int = 3,
        G: float = 1.0,
        config: Optional[GravityConfig] = None,
        seed: Optional[int] = None,
    ):
        """Initialize engine.

        Args:
            width: Width of the simulation area
            height: Height of the simulation area
            body_count: Number of random bodies to create
            G: Gravitational constant
            config: Engine constants (softening, mass bounds, integrator, dt)
            seed: Optional seed for the engine's random generator
        """
        self.config = config or DEFAULT_CONFIG
        self.width = 0.0
        self.height = 0.0
        self.set_dimensions(width, height)
        self.G = float(G)
        self.time_step = self.config.time_step
        self.integrator: Integrator = get_integrator(self.config.integrator)
        self.rng = make_rng(seed)
        self.bodies: List[Body] = []

        self.initialize(body_count)

    # Class-level access to the body/mass generators and force law
    @staticmethod
    def generate_power_law_mass(config: Optional[GravityConfig] = None, rng=None) -> float:
        return generate_power_law_mass(config, rng)

    @staticmethod
    def generate_random_bodies(count: int, width: float, height: float,
                               config: Optional[GravityConfig] = None, rng=None) -> List[Body]:
        return generate_random_bodies(count, width, height, config, rng)

    @staticmethod
    def calculate_gravitational_force(body_a: Body, body_b: Body, G: float = 1.0,
                                      softening: float = DEFAULT_CONFIG.softening_factor):
        return calculate_gravitational_force(body_a, body_b, G, softening)

    def initialize(self, count: int):
        """Replace the body collection with ``count`` fresh random bodies."""
        self.bodies = generate_random_bodies(count, self.width, self.height, self.config, self.rng)

    def set_bodies(self, bodies: Iterable[Body]):
        """Replace the body collection with copies of ``bodies``.

        Raises:
            DomainError: If any mass is not finite and positive
        """
        new_bodies = []
        for body in bodies:
            validate_mass(body.mass)
            new_bodies.append(copy.copy(body))
        self.bodies = new_bodies

    def compute_forces(self) -> np.ndarray:
        """Accumulate pairwise forces on every body.

        Returns:
            Array of shape (n, 2) with (fx, fy) per body
        """
        n = len(self.bodies)
        forces = np.zeros((n, 2))
        softening = self.config.softening_factor

        for i in range(n):
            for j in range(i + 1, n):
                fx, fy = calculate_gravitational_force(
                    self.bodies[i], self.bodies[j], self.G, softening
                )
                forces[i, 0] += fx
                forces[i, 1] += fy
                forces[j, 0] -= fx
                forces[j, 1] -= fy

        return forces

    def step(self):
        """Advance the simulation by one fixed time step."""
        # All pairs are accumulated before any body is written back
        forces = self.compute_forces()
        dt = self.time_step

        for body, (fx, fy) in zip(self.bodies, forces):
            self._advance(body, float(fx), float(fy), dt)
            body.x = wrap_coordinate(body.x, self.width)
            body.y = wrap_coordinate(body.y, self.height)

    def _advance(self, body: Body, fx: float, fy: float, dt: float):
        """Integrate one body under a force held constant over the step."""
        ax = fx / body.mass
        ay = fy / body.mass

        if self.integrator.name == IntegratorKind.VERLET.value:
            # Position Verlet carries [position, previous_position]
            state = [body.x, body.y, body.x - body.vx * dt, body.y - body.vy * dt]
            new_state = self.integrator.integrate(state, lambda s, t: [ax, ay], dt)
            new_x, new_y = float(new_state[0]), float(new_state[1])
            body.vx = (new_x - body.x) / dt
            body.vy = (new_y - body.y) / dt
            body.x, body.y = new_x, new_y
            return

        state = [body.x, body.y, body.vx, body.vy]

        def derivative(s, t):
            # [dx/dt, dy/dt, dvx/dt, dvy/dt]
            return [s[2], s[3], ax, ay]

        new_state = self.integrator.integrate(state, derivative, dt)
        body.x, body.y, body.vx, body.vy = (float(v) for v in new_state)

    def get_state(self) -> GravityState:
        """Get a snapshot of the current state.

        Returns:
            GravityState with copied bodies and the current dimensions
        """
        return GravityState(
            bodies=tuple(copy.copy(body) for body in self.bodies),
            width=self.width,
            height=self.height,
        )

    def reset(self, count: Optional[int] = None):
        """Re-initialize with ``count`` bodies, or the current body count."""
        self.initialize(len(self.bodies) if count is None else count)

    def set_G(self, G: float):
        """Update gravitational constant."""
        self.G = float(G)

    def set_dimensions(self, width: float, height: float):
        """Update the simulation area. Existing positions are not rescaled."""
        if not (width > 0 and height > 0):
            raise DomainError(f"Dimensions must be positive, got {width}x{height}")
        self.width = float(width)
        self.height = float(height)

    def set_integrator(self, name):
        """Switch integration scheme by registry name or IntegratorKind."""
        self.integrator = get_integrator(resolve_kind(name))

    def set_time_step(self, dt: float):
        """Set the fixed engine time step."""
        if not dt > 0:
            raise DomainError(f"Time step must be positive, got {dt}")
        self.time_step = float(dt)

    @property
    def body_count(self) -> int:
        return len(self.bodies)
