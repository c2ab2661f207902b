"""
Parameter initialization.
"""

import numpy as np
from typing import Optional


def default_rng(rng: Optional[np.random.Generator] = None) -> np.random.Generator:
    """Return `rng`, or a fresh unseeded Generator when None."""
    return rng if rng is not None else np.random.default_rng()


def uniform_bipolar(rng: np.random.Generator) -> float:
    """One draw from U[-1, 1)."""
    return float(rng.uniform(-1.0, 1.0))
