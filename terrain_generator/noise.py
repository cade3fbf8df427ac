# terrain_generator/noise.py

"""
================================================================================
GRADIENT NOISE
================================================================================
This module provides the 2D gradient (Perlin) noise primitive. It is designed
to be a pure, stateless utility.

Data Contract:
---------------
- Inputs:
    - p: The doubled hash table of a PermutationTable (int array of 512).
    - x, y: Query coordinates (scalars, or NumPy arrays for noise_field).
- Outputs:
    - Noise values in the approximate range [-1, 1]. No normalization.
- Side Effects: None.
- Invariants:
    - Lattice coordinates are wrapped with `& 255`, so the noise repeats
      every 256 units along both axes.
    - The output of noise_field has the shape of its inputs.
================================================================================
"""

import numpy as np
from numba import njit

from .permutation import PermutationTable

# The four diagonal gradients, selected by the low two bits of a corner hash.
_GRADIENT_VECTORS = np.array([[1.0, 1.0], [1.0, -1.0], [-1.0, 1.0], [-1.0, -1.0]])

# PERMUTATION_TABLE_SIZE - 1, inlined for the JIT.
_WRAP_MASK = 255

@njit
def _lerp(a, b, x):
    "Linear interpolation."
    return a + x * (b - a)

@njit
def _fade(t):
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6 - 15) + 10)

@njit
def _gradient(h, x, y):
    """Calculates the dot product between a gradient vector and coordinates."""
    g = _GRADIENT_VECTORS[h & 3]
    return g[0] * x + g[1] * y

@njit
def _perlin(p, x, y):
    """Single-octave gradient noise at (x, y)."""
    x_floor = np.floor(x)
    y_floor = np.floor(y)

    # Relative coordinates of the point inside its unit square.
    xf = x - x_floor
    yf = y - y_floor

    px0 = int(x_floor) & _WRAP_MASK
    py0 = int(y_floor) & _WRAP_MASK
    px1 = px0 + 1
    py1 = py0 + 1

    g00 = _gradient(p[p[px0] + py0], xf, yf)
    g01 = _gradient(p[p[px0] + py1], xf, yf - 1)
    g10 = _gradient(p[p[px1] + py0], xf - 1, yf)
    g11 = _gradient(p[p[px1] + py1], xf - 1, yf - 1)

    u = _fade(xf)
    v = _fade(yf)

    x1 = _lerp(g00, g10, u)
    x2 = _lerp(g01, g11, u)
    return _lerp(x1, x2, v)

@njit
def _perlin_field(p, x, y):
    rows, cols = x.shape
    values = np.empty((rows, cols))
    for i in range(rows):
        for j in range(cols):
            values[i, j] = _perlin(p, x[i, j], y[i, j])
    return values


def gradient_noise(x: float, y: float, table: PermutationTable) -> float:
    """
    Returns the raw gradient noise value at (x, y).

    The result lies roughly in [-1, 1] and is exactly 0.0 on every lattice
    point. Identical for (x, y) and (x + 256k, y + 256m).
    """
    return float(_perlin(table.hash_table, float(x), float(y)))


def noise_field(x_coords: np.ndarray, y_coords: np.ndarray, table: PermutationTable) -> np.ndarray:
    """Samples gradient noise at every point of two equally shaped 2D arrays."""
    x_coords = np.asarray(x_coords, dtype=np.float64)
    y_coords = np.asarray(y_coords, dtype=np.float64)
    if x_coords.shape != y_coords.shape or x_coords.ndim != 2:
        raise ValueError(
            f"Coordinate arrays must be 2D and equally shaped, got {x_coords.shape} and {y_coords.shape}."
        )
    return _perlin_field(table.hash_table, x_coords, y_coords)
