"""Tests for the softened gravity force model and body sampling."""

import math
import pytest
from physics_sandbox.physics.errors import DomainError
from physics_sandbox.physics.gravity import (
    Body,
    GravityConfig,
    calculate_gravitational_force,
    generate_power_law_mass,
    generate_random_bodies,
)
from physics_sandbox.utils.reproducibility import make_rng


def make_body(x, y, mass, body_id=0):
    return Body(id=body_id, x=x, y=y, vx=0.0, vy=0.0, mass=mass)


def test_two_body_force_value():
    """A(0,0,10), B(10,0,20), G=1, eps=5: |F| = 200/125, fx = |F|*10/sqrt(125)."""
    fx, fy = calculate_gravitational_force(make_body(0, 0, 10), make_body(10, 0, 20), 1.0)
    magnitude = 1.0 * 10 * 20 / 125
    assert magnitude == pytest.approx(1.6)
    assert fx == pytest.approx(magnitude * 10 / math.sqrt(125))
    assert fx == pytest.approx(1.4311, abs=1e-4)
    assert fy == 0.0


def test_newtons_third_law():
    """force(A, B) == -force(B, A)."""
    a = make_body(5, 5, 10)
    b = make_body(15, 15, 20)
    fab = calculate_gravitational_force(a, b, 1.0)
    fba = calculate_gravitational_force(b, a, 1.0)
    assert abs(fab[0] + fba[0]) < 1e-4
    assert abs(fab[1] + fba[1]) < 1e-4


def test_force_decreases_with_distance():
    """Beyond the softening scale the force falls off with separation."""
    origin = make_body(0, 0, 10)
    previous = float("inf")
    for distance in (10, 20, 40, 80, 160):
        fx, _ = calculate_gravitational_force(origin, make_body(distance, 0, 10), 1.0)
        assert fx < previous
        previous = fx


def test_coincident_bodies_are_finite():
    """Softening keeps the force finite at zero separation."""
    fx, fy = calculate_gravitational_force(make_body(10, 10, 10), make_body(10, 10, 20), 1.0)
    assert math.isfinite(fx) and math.isfinite(fy)
    assert (fx, fy) == (0.0, 0.0)


def test_force_scales_with_g():
    """Force is linear in G."""
    a, b = make_body(0, 0, 3), make_body(4, 3, 7)
    f1 = calculate_gravitational_force(a, b, 1.0)
    f2 = calculate_gravitational_force(a, b, 2.5)
    assert f2[0] == pytest.approx(2.5 * f1[0])
    assert f2[1] == pytest.approx(2.5 * f1[1])


def test_power_law_mass_within_bounds():
    """1000 draws all fall inside [min_mass, max_mass]."""
    config = GravityConfig()
    rng = make_rng(7)
    for _ in range(1000):
        mass = generate_power_law_mass(config, rng)
        assert config.min_mass <= mass <= config.max_mass


def test_power_law_mass_varies():
    """Repeated draws give more than one value."""
    masses = {generate_power_law_mass() for _ in range(10)}
    assert len(masses) > 1


def test_power_law_favours_light_bodies():
    """With alpha = 2.35 most of the mass draws are near the lower bound."""
    rng = make_rng(0)
    masses = [generate_power_law_mass(rng=rng) for _ in range(2000)]
    light = sum(1 for m in masses if m < 10)
    assert light > len(masses) / 2


def test_invalid_mass_config():
    """Bad bounds or alpha = 1 are rejected."""
    with pytest.raises(DomainError):
        GravityConfig(min_mass=0.0)
    with pytest.raises(DomainError):
        GravityConfig(min_mass=10.0, max_mass=5.0)
    with pytest.raises(DomainError):
        GravityConfig(mass_power_law_scaling=1.0)


def test_generate_random_bodies():
    """Bodies are in bounds with sequential ids from 0."""
    width, height = 800, 600
    bodies = generate_random_bodies(10, width, height, rng=make_rng(3))
    assert len(bodies) == 10
    for index, body in enumerate(bodies):
        assert body.id == index
        assert 0 <= body.x <= width
        assert 0 <= body.y <= height
        assert -10 <= body.vx <= 10
        assert -10 <= body.vy <= 10
        assert body.mass > 0


def test_generate_random_bodies_reproducible():
    """Same seed, same bodies."""
    assert generate_random_bodies(4, 100, 100, rng=make_rng(11)) == \
        generate_random_bodies(4, 100, 100, rng=make_rng(11))


def test_negative_body_count():
    """Negative counts are rejected."""
    with pytest.raises(DomainError):
        generate_random_bodies(-1, 100, 100)


def test_body_dict_round_trip():
    """Body survives to_dict/from_dict."""
    body = Body(id=3, x=1.0, y=2.0, vx=-1.0, vy=0.5, mass=42.0)
    assert Body.from_dict(body.to_dict()) == body
