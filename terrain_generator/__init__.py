# terrain_generator/__init__.py

# Public API of the terrain generator package: seeded fractal noise,
# height quantization and terrain classification.

from .errors import InvalidParameterError, OutOfDomainError, TerrainGenerationError
from .fractal import FractalParameters, build_noise_grid, normalize_grid, octave_offsets
from .generator import TerrainGenerator, TerrainResult
from .height_map import height_grid_from_noise_grid, percent_height
from .noise import gradient_noise, noise_field
from .permutation import PermutationTable, derive_rng_state
from .terrain_types import (
    TERRAIN_TABLE, ClassifyResult, TerrainBand, TerrainTable, TerrainType,
    classify, classify_grid, try_classify,
)

__all__ = [
    'ClassifyResult',
    'FractalParameters',
    'InvalidParameterError',
    'OutOfDomainError',
    'PermutationTable',
    'TERRAIN_TABLE',
    'TerrainBand',
    'TerrainGenerationError',
    'TerrainGenerator',
    'TerrainResult',
    'TerrainTable',
    'TerrainType',
    'build_noise_grid',
    'classify',
    'classify_grid',
    'derive_rng_state',
    'gradient_noise',
    'height_grid_from_noise_grid',
    'noise_field',
    'normalize_grid',
    'octave_offsets',
    'percent_height',
    'try_classify',
]
