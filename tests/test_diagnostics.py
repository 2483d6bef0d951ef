"""Tests for gravity diagnostics."""

import math
import pytest
from physics_sandbox.physics.gravity import Body, GravityConfig
from physics_sandbox.physics.gravity_engine import GravityEngine
from physics_sandbox.physics.diagnostics import (
    kinetic_energy,
    potential_energy,
    total_energy,
    total_momentum,
    center_of_mass,
)


def two_bodies():
    return [
        Body(id=0, x=0.0, y=0.0, vx=1.0, vy=0.0, mass=2.0),
        Body(id=1, x=3.0, y=4.0, vx=0.0, vy=-2.0, mass=3.0),
    ]


def test_kinetic_energy():
    """0.5*2*1 + 0.5*3*4."""
    assert kinetic_energy(two_bodies()) == pytest.approx(1.0 + 6.0)


def test_potential_energy_softened():
    """-G*m1*m2/sqrt(r^2 + eps^2) with r = 5 and eps = 5."""
    expected = -1.0 * 2.0 * 3.0 / math.sqrt(25 + 25)
    assert potential_energy(two_bodies(), G=1.0, softening=5.0) == pytest.approx(expected)
    assert potential_energy(two_bodies()[:1]) == 0.0


def test_total_energy_sums():
    """Total is kinetic plus potential."""
    bodies = two_bodies()
    assert total_energy(bodies) == pytest.approx(kinetic_energy(bodies) + potential_energy(bodies))


def test_momentum_and_center_of_mass():
    """Linear momentum and mass-weighted position."""
    assert total_momentum(two_bodies()) == pytest.approx((2.0, -6.0))
    assert center_of_mass(two_bodies()) == pytest.approx((9.0 / 5, 12.0 / 5))
    assert center_of_mass([]) == (0.0, 0.0)


def test_binary_energy_drift_is_small():
    """Circular binary in a large box: energy stays close to its initial value."""
    engine = GravityEngine(
        10000, 10000, body_count=0, G=1.0,
        config=GravityConfig(integrator="velocityVerlet"),
    )
    M = 1000.0
    r = 20.0
    # Circular orbit about the centre of mass under the softened force
    v = math.sqrt(M * r * r / (2 * (r * r + 25) ** 1.5))
    engine.set_bodies([
        Body(id=0, x=5000.0 - r / 2, y=5000.0, vx=0.0, vy=-v, mass=M),
        Body(id=1, x=5000.0 + r / 2, y=5000.0, vx=0.0, vy=v, mass=M),
    ])
    e0 = total_energy(engine.bodies)
    for _ in range(600):
        engine.step()
    e1 = total_energy(engine.bodies)
    assert abs(e1 - e0) / abs(e0) < 0.05
