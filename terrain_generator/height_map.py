# terrain_generator/height_map.py

"""
Quantizes a normalized noise grid into integer heights.

The mapping function is injected, so callers decide the height scale. No
range validation happens here; the terrain classifier rejects heights that
fall outside its table.
"""
import math
from typing import Callable

import numpy as np

from . import config as DEFAULTS

HeightMapper = Callable[[float], int]


def percent_height(value: float) -> int:
    """Maps a normalized value [0, 1] onto [0, 100], rounding halves up."""
    return int(math.floor(value * DEFAULTS.HEIGHT_SCALE + 0.5))


def height_grid_from_noise_grid(noise_grid: np.ndarray, mapper: HeightMapper = percent_height) -> np.ndarray:
    """
    Applies `mapper` to every cell of `noise_grid`.

    Returns a read-only int32 array of the same shape, where
    height_grid[r, c] == mapper(noise_grid[r, c]).
    """
    noise_grid = np.asarray(noise_grid, dtype=np.float64)
    flat = noise_grid.ravel()
    heights = np.fromiter((mapper(float(v)) for v in flat), dtype=np.int32, count=flat.size)
    heights = heights.reshape(noise_grid.shape)
    heights.flags.writeable = False
    return heights
