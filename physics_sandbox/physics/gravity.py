"""Softened pairwise gravity and initial-condition sampling for the gravity engine."""

import math
from dataclasses import dataclass, asdict
from typing import List, Optional, Tuple
import numpy as np
from physics_sandbox.physics.errors import DomainError


@dataclass
class Body:
    """A point mass in the 2D gravity domain."""

    id: int
    x: float
    y: float
    vx: float
    vy: float
    mass: float

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Body":
        return cls(
            id=int(data["id"]),
            x=float(data["x"]),
            y=float(data["y"]),
            vx=float(data["vx"]),
            vy=float(data["vy"]),
            mass=float(data["mass"]),
        )


@dataclass(frozen=True)
class GravityConfig:
    """Gravity engine constants.

    Args:
        softening_factor: Softening length eps added in quadrature to r^2
        min_mass: Lower bound of the power-law mass distribution
        max_mass: Upper bound of the power-law mass distribution
        mass_power_law_scaling: Power-law exponent alpha (Salpeter-like default)
        integrator: Registry name of the integrator used by the engine
        time_step: Fixed engine time step (~60 FPS)
        max_initial_speed: Initial velocity components are drawn from +/- this
    """

    softening_factor: float = 5.0
    min_mass: float = 2.0
    max_mass: float = 10000.0
    mass_power_law_scaling: float = 2.35
    integrator: str = "rk4"
    time_step: float = 1.0 / 60.0
    max_initial_speed: float = 10.0

    def __post_init__(self):
        if self.softening_factor < 0:
            raise DomainError(f"softening_factor must be >= 0, got {self.softening_factor}")
        if not (0 < self.min_mass <= self.max_mass):
            raise DomainError(
                f"Mass bounds must satisfy 0 < min_mass <= max_mass, got [{self.min_mass}, {self.max_mass}]"
            )
        if self.mass_power_law_scaling == 1:
            raise DomainError("mass_power_law_scaling must differ from 1")
        if not self.time_step > 0:
            raise DomainError(f"time_step must be positive, got {self.time_step}")


DEFAULT_CONFIG = GravityConfig()


def calculate_gravitational_force(
    body_a: Body,
    body_b: Body,
    G: float = 1.0,
    softening: float = DEFAULT_CONFIG.softening_factor,
) -> Tuple[float, float]:
    """Compute the softened gravitational force exerted on ``body_a`` by ``body_b``.

    |F| = G * m_a * m_b / (r^2 + eps^2), directed along the displacement from
    a to b and normalised by the softened distance, so the result stays
    finite when both bodies share a position.

    Args:
        body_a: Body the force acts on
        body_b: Attracting body
        G: Gravitational constant
        softening: Softening length eps

    Returns:
        Tuple of (fx, fy)
    """
    dx = body_b.x - body_a.x
    dy = body_b.y - body_a.y
    distance_sq = dx * dx + dy * dy

    softened_sq = distance_sq + softening * softening
    softened = math.sqrt(softened_sq)
    if softened == 0.0:
        # Unsoftened coincident bodies: no preferred direction
        return 0.0, 0.0

    magnitude = G * body_a.mass * body_b.mass / softened_sq
    return magnitude * dx / softened, magnitude * dy / softened


def generate_power_law_mass(
    config: Optional[GravityConfig] = None,
    rng: Optional[np.random.Generator] = None,
) -> float:
    """Draw a mass from a bounded power law by inverse-transform sampling.

    m = ((max^(1-a) - min^(1-a)) * u + min^(1-a))^(1/(1-a)),  u ~ U[0, 1)

    Args:
        config: Engine configuration (bounds and exponent)
        rng: Random generator (defaults to a fresh ``default_rng()``)

    Returns:
        Mass in [min_mass, max_mass]
    """
    config = config or DEFAULT_CONFIG
    rng = rng if rng is not None else np.random.default_rng()

    exp = 1.0 - config.mass_power_law_scaling
    lo = config.min_mass ** exp
    hi = config.max_mass ** exp
    u = rng.random()
    mass = ((hi - lo) * u + lo) ** (1.0 / exp)
    # Rounding can push the endpoints a hair outside the bounds
    return float(min(max(mass, config.min_mass), config.max_mass))


def generate_random_bodies(
    count: int,
    width: float,
    height: float,
    config: Optional[GravityConfig] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[Body]:
    """Generate ``count`` randomly placed bodies with sequential ids from 0.

    Positions are uniform in [0, width] x [0, height], velocity components
    uniform in [-max_initial_speed, max_initial_speed], masses power-law.
    """
    if count < 0:
        raise DomainError(f"Body count must be >= 0, got {count}")
    config = config or DEFAULT_CONFIG
    rng = rng if rng is not None else np.random.default_rng()

    speed = config.max_initial_speed
    bodies = []
    for i in range(count):
        bodies.append(Body(
            id=i,
            x=float(rng.uniform(0.0, width)),
            y=float(rng.uniform(0.0, height)),
            vx=float(rng.uniform(-speed, speed)),
            vy=float(rng.uniform(-speed, speed)),
            mass=generate_power_law_mass(config, rng),
        ))
    return bodies


def validate_mass(mass: float) -> float:
    """Return ``mass`` as float, raising DomainError unless finite and positive."""
    mass = float(mass)
    if not math.isfinite(mass) or mass <= 0:
        raise DomainError(f"Body mass must be finite and positive, got {mass}")
    return mass
