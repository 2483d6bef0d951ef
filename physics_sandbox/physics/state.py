"""Helpers for moving integrator states across the scalar/vector boundary.

A scalar ODE is handled internally as a length-1 vector. ``as_vector`` records
whether the caller passed a scalar so ``restore`` can hand back the same kind
of value it received.
"""

from numbers import Number
from typing import Tuple, Union, Sequence
import numpy as np
from physics_sandbox.physics.errors import IntegrationError

StateLike = Union[float, Sequence[float], np.ndarray]


def is_scalar(value) -> bool:
    """Return True for plain numbers and 0-d arrays."""
    if isinstance(value, np.ndarray):
        return value.ndim == 0
    return isinstance(value, Number)


def as_vector(state: StateLike) -> Tuple[np.ndarray, bool]:
    """Convert a state to a fresh 1-D float array.

    Args:
        state: Scalar or sequence of numbers

    Returns:
        Tuple of (vector, was_scalar)
    """
    if is_scalar(state):
        return np.array([float(state)], dtype=np.float64), True
    vector = np.array(state, dtype=np.float64)
    if vector.ndim != 1:
        raise IntegrationError(f"State must be one-dimensional, got shape {vector.shape}")
    return vector, False


def derivative_vector(value, expected: int, source: str = "derivative") -> np.ndarray:
    """Coerce a derivative result to a finite 1-D array of the expected length."""
    if value is None:
        raise IntegrationError(f"{source} returned None")
    try:
        if is_scalar(value):
            result = np.array([float(value)], dtype=np.float64)
        else:
            result = np.asarray(value, dtype=np.float64).reshape(-1)
    except (TypeError, ValueError) as exc:
        raise IntegrationError(f"{source} returned non-numeric output: {value!r}") from exc
    if result.shape[0] != expected:
        raise IntegrationError(
            f"{source} returned {result.shape[0]} values, expected {expected}"
        )
    if not np.isfinite(result).all():
        raise IntegrationError(f"{source} returned non-finite values: {result}")
    return result


def restore(vector: np.ndarray, was_scalar: bool):
    """Undo ``as_vector``: scalars come back as float, vectors as arrays."""
    if was_scalar:
        return float(vector[0])
    return vector


def split_halves(state: np.ndarray, scheme: str) -> Tuple[np.ndarray, np.ndarray]:
    """Split a ``[first(n), second(n)]`` state used by the Verlet family."""
    if state.shape[0] == 0 or state.shape[0] % 2 != 0:
        raise IntegrationError(
            f"{scheme} state must have an even, non-zero length, got {state.shape[0]}"
        )
    n = state.shape[0] // 2
    return state[:n], state[n:]
