"""Energy and momentum diagnostics for a set of gravity bodies."""

import math
from typing import Sequence, Tuple
import numpy as np
from physics_sandbox.physics.gravity import Body, DEFAULT_CONFIG


def kinetic_energy(bodies: Sequence[Body]) -> float:
    """Total kinetic energy: 0.5 * sum(m_i * v_i^2)."""
    return float(sum(0.5 * b.mass * (b.vx * b.vx + b.vy * b.vy) for b in bodies))


def potential_energy(
    bodies: Sequence[Body],
    G: float = 1.0,
    softening: float = DEFAULT_CONFIG.softening_factor,
) -> float:
    """Total potential energy with the softened pair potential.

    U = -G * sum_{i<j} m_i * m_j / sqrt(r_ij^2 + eps^2)

    Ignores the toroidal wrap (uses direct separations).
    """
    if len(bodies) < 2:
        return 0.0

    positions = np.array([[b.x, b.y] for b in bodies])
    masses = np.array([b.mass for b in bodies])

    r_diff = positions[np.newaxis, :, :] - positions[:, np.newaxis, :]
    r_sq = np.sum(r_diff ** 2, axis=2)
    pair_mass = masses[:, np.newaxis] * masses[np.newaxis, :]
    upper = np.triu(np.ones_like(r_sq, dtype=bool), k=1)

    U = -G * np.sum(pair_mass[upper] / np.sqrt(r_sq[upper] + softening ** 2))
    return float(U)


def total_energy(
    bodies: Sequence[Body],
    G: float = 1.0,
    softening: float = DEFAULT_CONFIG.softening_factor,
) -> float:
    """Kinetic plus softened potential energy."""
    return kinetic_energy(bodies) + potential_energy(bodies, G, softening)


def total_momentum(bodies: Sequence[Body]) -> Tuple[float, float]:
    """Total linear momentum (px, py)."""
    px = math.fsum(b.mass * b.vx for b in bodies)
    py = math.fsum(b.mass * b.vy for b in bodies)
    return px, py


def center_of_mass(bodies: Sequence[Body]) -> Tuple[float, float]:
    """Mass-weighted mean position; (0, 0) for an empty body set."""
    total_mass = sum(b.mass for b in bodies)
    if total_mass == 0:
        return 0.0, 0.0
    cx = sum(b.mass * b.x for b in bodies) / total_mass
    cy = sum(b.mass * b.y for b in bodies) / total_mass
    return float(cx), float(cy)
