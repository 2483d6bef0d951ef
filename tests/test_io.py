"""Tests for I/O functionality."""

import pytest
from physics_sandbox.physics.gravity_engine import GravityEngine
from physics_sandbox.io.state_io import save_state, load_state


def make_state():
    return GravityEngine(800, 600, body_count=4, seed=3).get_state()


def test_save_load_npz(tmp_path):
    """Test saving and loading NPZ format."""
    state = make_state()
    path = tmp_path / "state.npz"

    save_state(state, str(path), metadata={"time": 10.0, "steps": 100, "integrator": "rk4"})
    loaded, metadata = load_state(str(path))

    assert loaded == state
    assert metadata["time"] == 10.0
    assert metadata["steps"] == 100
    assert metadata["integrator"] == "rk4"


def test_save_load_json(tmp_path):
    """Test saving and loading JSON format."""
    state = make_state()
    path = tmp_path / "state.json"

    save_state(state, str(path), metadata={"time": 10.0})
    loaded, metadata = load_state(str(path))

    assert loaded == state
    assert metadata.get("time") == 10.0


def test_empty_state_round_trip(tmp_path):
    """An empty engine saves and loads in both formats."""
    state = GravityEngine(100, 50, body_count=0).get_state()
    for name in ("empty.npz", "empty.json"):
        save_state(state, str(tmp_path / name))
        loaded, _ = load_state(str(tmp_path / name))
        assert loaded.bodies == ()
        assert (loaded.width, loaded.height) == (100.0, 50.0)


def test_unsupported_format(tmp_path):
    """Unknown suffixes are rejected."""
    with pytest.raises(ValueError):
        save_state(make_state(), str(tmp_path / "state.csv"))
    with pytest.raises(ValueError):
        load_state(str(tmp_path / "state.csv"))
