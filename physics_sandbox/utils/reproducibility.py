"""Reproducibility utilities for deterministic simulations."""

import numpy as np
from typing import Optional


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the generator an engine draws its bodies from.

    Engines never touch NumPy's global random state, so two engines built
    with the same seed produce the same bodies regardless of what else has
    consumed random numbers in the process.

    Args:
        seed: Random seed, or None for fresh OS entropy

    Returns:
        NumPy ``Generator``
    """
    return np.random.default_rng(seed)
