"""I/O utilities for state management."""

from physics_sandbox.io.state_io import save_state, load_state

__all__ = ["save_state", "load_state"]
