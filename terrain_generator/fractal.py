# terrain_generator/fractal.py

"""
================================================================================
FRACTAL NOISE COMPOSITOR
================================================================================
This module builds a rectangular grid of multi-octave gradient noise and
normalizes it to the unit interval.

Data Contract:
---------------
- Inputs:
    - height, width: Grid dimensions in cells.
    - params: A FractalParameters value object.
    - logger: Receives a warning for every substituted default.
- Outputs:
    - A float64 NumPy array of shape (height, width) with values in [0, 1].
- Side Effects: Logs messages using the provided logger.
- Invariants:
    - Parameters are validated before any cell is computed.
    - Given the same inputs, the output is byte-identical across runs.
    - After normalization min == 0.0 and max == 1.0 unless every raw value was
      equal, in which case the grid is all zeros.
================================================================================
"""

import logging
import math
from dataclasses import dataclass, replace

import numpy as np
from numba import njit

from . import config as DEFAULTS
from .errors import InvalidParameterError
from .noise import _perlin
from .permutation import PermutationTable, validate_seed

_module_logger = logging.getLogger(__name__)

# 2**53: beyond this a float64 no longer holds every integer.
_MAX_SAMPLE_COORDINATE = float(2**53)


@dataclass(frozen=True)
class FractalParameters:
    """Configuration of one fractal noise request."""
    scale: float = DEFAULTS.DEFAULT_SCALE
    octaves: int = DEFAULTS.DEFAULT_OCTAVES
    lacunarity: float = DEFAULTS.DEFAULT_LACUNARITY
    persistence: float = DEFAULTS.DEFAULT_PERSISTENCE
    seed: int = DEFAULTS.DEFAULT_SEED

    def resolved(self, logger: logging.Logger = None) -> "FractalParameters":
        """
        Returns a copy where recoverable zero values are replaced by defaults.

        Raises:
            InvalidParameterError: for non-finite lacunarity or persistence,
                negative scale or octaves, a non-integer octave count, a
                seed outside the unsigned 32-bit range, or a lacunarity or
                persistence whose octave powers overflow a float.
        """
        logger = logger or _module_logger

        # Fatal checks first: non-finite values must never be coerced.
        for name in ("lacunarity", "persistence", "scale"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
                raise InvalidParameterError(f"{name} must be a number, got {value!r}.")
            if not math.isfinite(value):
                raise InvalidParameterError(f"{name} must be finite, got {value!r}.")
        if isinstance(self.octaves, bool) or not isinstance(self.octaves, (int, np.integer)):
            raise InvalidParameterError(f"octaves must be an integer, got {self.octaves!r}.")
        if self.scale < 0:
            raise InvalidParameterError(f"scale must be positive, got {self.scale!r}.")
        if self.octaves < 0:
            raise InvalidParameterError(f"octaves must be positive, got {self.octaves!r}.")
        seed = validate_seed(self.seed)

        changes = {"seed": seed}
        if self.scale == 0:
            logger.warning(f"scale of 0 is invalid, using default scale {DEFAULTS.DEFAULT_SCALE}.")
            changes["scale"] = DEFAULTS.DEFAULT_SCALE
        if self.octaves == 0:
            logger.warning(f"octaves of 0 is invalid, using default of {DEFAULTS.DEFAULT_OCTAVES} octaves.")
            changes["octaves"] = DEFAULTS.DEFAULT_OCTAVES
        if self.lacunarity == 0:
            logger.warning(f"lacunarity of 0 is invalid, using default lacunarity {DEFAULTS.DEFAULT_LACUNARITY}.")
            changes["lacunarity"] = DEFAULTS.DEFAULT_LACUNARITY

        resolved = replace(self, **changes)
        resolved = replace(
            resolved,
            scale=float(resolved.scale),
            octaves=int(resolved.octaves),
            lacunarity=float(resolved.lacunarity),
            persistence=float(resolved.persistence),
        )
        # Finite inputs can still overflow once compounded over the octaves.
        resolved.max_frequency()
        resolved.amplitude_sum()
        return resolved

    def max_frequency(self) -> float:
        """Largest |frequency| reached by any octave."""
        return max(1.0, self._compounded("lacunarity", abs(self.lacunarity)))

    def amplitude_sum(self) -> float:
        """Upper bound of sum(|amplitude_i|), which bounds every raw cell value."""
        ratio = abs(self.persistence)
        total = 0.0
        for i in range(int(self.octaves)):
            total += self._compounded("persistence", ratio, i)
        if not math.isfinite(total):
            raise InvalidParameterError(
                f"persistence {self.persistence!r} over {self.octaves} octaves overflows the noise sum."
            )
        return total

    def _compounded(self, name, ratio, power=None):
        power = int(self.octaves) - 1 if power is None else power
        try:
            value = ratio ** max(power, 0)
        except OverflowError:
            value = math.inf
        if not math.isfinite(value):
            raise InvalidParameterError(
                f"{name} {getattr(self, name)!r} over {self.octaves} octaves overflows to infinity."
            )
        return value


def octave_offsets(seed: int, octaves: int) -> np.ndarray:
    """
    Returns an (octaves, 2) int64 array of per-octave sample offsets.

    Offsets are drawn in order from a generator seeded by `seed`, so the first
    n offsets of a request for m > n octaves match a request for n octaves.
    """
    rng = np.random.default_rng(validate_seed(seed))
    bound = DEFAULTS.OCTAVE_OFFSET_RANGE
    offsets = np.empty((octaves, 2), dtype=np.int64)
    for i in range(octaves):
        offsets[i] = rng.integers(-bound, bound, size=2)
    return offsets


def normalize_grid(grid: np.ndarray, logger: logging.Logger = None) -> np.ndarray:
    """
    Rescales a grid in place so its minimum becomes 0.0 and maximum 1.0.

    Raises:
        InvalidParameterError: if the grid holds NaN or infinite values.
    """
    logger = logger or _module_logger
    if not np.all(np.isfinite(grid)):
        raise InvalidParameterError("Cannot normalize a noise grid containing NaN or infinite values.")
    min_value = grid.min()
    max_value = grid.max()
    value_range = max_value - min_value
    if value_range == 0:
        logger.warning(f"Noise grid is constant ({min_value}); normalizing to all zeros.")
        grid[:] = 0.0
        return grid
    grid -= min_value
    grid /= value_range
    return grid


@njit
def _fill_fractal_grid(p, offsets, height, width, scale, lacunarity, persistence):
    """
    Sums all octaves for every cell. Compiled with Numba; the per-cell loop
    mirrors the one documented on build_noise_grid.
    """
    grid = np.empty((height, width))
    octaves = offsets.shape[0]

    for row in range(height):
        for col in range(width):
            noise_height = 0.0
            amplitude = 1.0
            frequency = 1.0

            for i in range(octaves):
                x_sample = (row / scale) * frequency + offsets[i, 0]
                y_sample = (col / scale) * frequency + offsets[i, 1]

                noise_height += _perlin(p, x_sample, y_sample) * amplitude
                amplitude *= persistence
                frequency *= lacunarity

            grid[row, col] = noise_height

    return grid


def build_noise_grid(height: int, width: int, params: FractalParameters = None,
                     logger: logging.Logger = None) -> np.ndarray:
    """
    Builds a normalized fractal noise grid of shape (height, width).

    For each cell the raw value is

        sum(amplitude_i * noise((row / scale) * frequency_i + offset_i.x,
                                (col / scale) * frequency_i + offset_i.y))

    with frequency_0 = amplitude_0 = 1, each octave multiplying the frequency
    by lacunarity and the amplitude by persistence. The finished grid is then
    normalized to [0, 1] in a single pass.

    Raises:
        InvalidParameterError: before any cell is computed, if the dimensions
            or the parameters are unusable.
    """
    logger = logger or _module_logger
    params = (params or FractalParameters()).resolved(logger)

    for name, value in (("height", height), ("width", width)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
            raise InvalidParameterError(f"Grid {name} must be a positive integer, got {value!r}.")

    # Lattice coordinates must stay exactly representable for floor() and the & 255 wrap.
    extent = (max(height, width) / params.scale) * params.max_frequency() + DEFAULTS.OCTAVE_OFFSET_RANGE
    if not extent < _MAX_SAMPLE_COORDINATE:
        raise InvalidParameterError(
            f"Sample coordinates reach {extent:g}; reduce lacunarity, octaves or grid size, or raise scale."
        )

    logger.debug(
        f"Building {height}x{width} noise grid: scale={params.scale}, octaves={params.octaves}, "
        f"lacunarity={params.lacunarity}, persistence={params.persistence}, seed={params.seed}"
    )

    table = PermutationTable.from_seed(params.seed)
    offsets = octave_offsets(params.seed, params.octaves)

    grid = _fill_fractal_grid(
        table.hash_table, offsets, int(height), int(width),
        params.scale, params.lacunarity, params.persistence
    )
    return normalize_grid(grid, logger)
