# terrain_generator/color_maps.py

"""
================================================================================
SHARED COLOR MAPPING UTILITIES
================================================================================
This module converts generated grids (normalized noise, terrain type ids)
into 8-bit pixel arrays ready for image export.

It is a pure, stateless utility with no dependency on any image library, so
the arrays can be inspected or tested without touching the filesystem.

All arrays are row-major (height, width[, channels]), which is the layout
Pillow expects.
================================================================================
"""
import numpy as np

from . import config as DEFAULTS
from .terrain_types import TERRAIN_TABLE, TerrainTable


def create_terrain_color_lut(table: TerrainTable = TERRAIN_TABLE) -> np.ndarray:
    """Creates a LUT where the index is the TerrainType id and the value is the RGB color."""
    return table.color_lut()


def get_terrain_color_array(terrain_map: np.ndarray, terrain_lut: np.ndarray) -> np.ndarray:
    """
    Converts a pre-calculated grid of TerrainType ids into an RGB color array
    of shape (height, width, 3) using a pre-computed lookup table.
    """
    return terrain_lut[terrain_map]


def get_noise_gray_array(noise_values: np.ndarray) -> np.ndarray:
    """Converts normalized noise [0, 1] into a single-channel uint8 array."""
    # round(v * 255), clamped so that values at or beyond 1.0 saturate at 255.
    gray_values = np.floor(np.asarray(noise_values, dtype=np.float64) * DEFAULTS.GRAYSCALE_MAX + 0.5)
    return np.clip(gray_values, 0, DEFAULTS.GRAYSCALE_MAX).astype(np.uint8)
