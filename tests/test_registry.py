"""Tests for the integrator registry."""

import pytest
from physics_sandbox.physics.errors import UnknownIntegratorError
from physics_sandbox.physics.integrators import (
    INTEGRATORS,
    IntegratorKind,
    RK4Integrator,
    get_integrator,
    integrate,
    list_integrators,
)


def test_list_integrators():
    """All four schemes are registered under their names."""
    assert list_integrators() == ["euler", "rk4", "verlet", "velocityVerlet"]
    assert set(INTEGRATORS) == set(IntegratorKind)


def test_get_integrator_by_name_and_kind():
    """Names and enum members resolve to the same instance."""
    assert isinstance(get_integrator("rk4"), RK4Integrator)
    assert get_integrator(IntegratorKind.RK4) is get_integrator("rk4")
    assert get_integrator("velocity_verlet") is get_integrator("velocityVerlet")
    assert get_integrator("EULER").name == "euler"


def test_unknown_integrator_fails_fast():
    """Unknown names raise, listing the valid choices."""
    with pytest.raises(UnknownIntegratorError, match="Unknown integrator 'leapfrog'"):
        get_integrator("leapfrog")
    with pytest.raises(ValueError):
        integrate("midpoint", 0.0, lambda s, t: 1.0, 0.1)


def test_integrate_dispatch_matches_direct_call():
    """Dispatch forwards state, derivative, dt and t unchanged."""
    derivative = lambda y, t: y + t
    direct = RK4Integrator().integrate(1.0, derivative, 0.1, 0.5)
    assert integrate("rk4", 1.0, derivative, 0.1, 0.5) == direct
    assert integrate(IntegratorKind.EULER, 0, lambda s, t: 2, 0.1) == 0.2


def test_kind_is_string_valued():
    """Kinds compare equal to their registry names."""
    assert IntegratorKind.VELOCITY_VERLET == "velocityVerlet"
