# terrain_generator/generator.py

"""
================================================================================
CORE TERRAIN GENERATOR
================================================================================
This module contains the main TerrainGenerator class, responsible for running
the noise -> height -> terrain pipeline for a given configuration.

Data Contract:
---------------
- Inputs (on initialization):
    - config (dict): A dictionary of generation parameters which can override
      the internal defaults. Expected keys include 'seed', 'scale', 'octaves',
      'lacunarity' and 'persistence'.
    - logger: A configured Python logging object for runtime messages.
- Outputs (from methods):
    - NumPy arrays: normalized noise [0, 1], integer heights, terrain type ids
      and RGB colors, all of the requested (height, width) shape.
- Side Effects: Logs messages using the provided logger.
- Invariants: Given the same configuration and size, the output is deterministic.
================================================================================
"""

import logging
import time
from dataclasses import dataclass

import numpy as np

from . import config as DEFAULTS
from . import color_maps
from .fractal import FractalParameters, build_noise_grid
from .height_map import height_grid_from_noise_grid, percent_height
from .terrain_types import TERRAIN_TABLE


@dataclass(frozen=True)
class TerrainResult:
    """Every intermediate grid of one pipeline run."""
    noise_grid: np.ndarray
    height_grid: np.ndarray
    terrain_map: np.ndarray
    color_array: np.ndarray


class TerrainGenerator:
    """
    Generates noise, height and terrain grids from a single configuration.
    This class is backend-only and does not write any files.
    """
    def __init__(self, config: dict, logger: logging.Logger, terrain_table=TERRAIN_TABLE):
        """
        Initializes the terrain generator.

        Args:
            config (dict): User-defined parameters to override defaults.
            logger (logging.Logger): The logger instance for all output.
            terrain_table (TerrainTable, optional): Bands used to classify
                heights. Defaults to the canonical five-band table.
        """
        self.logger = logger
        self.user_config = config
        self.logger.info("TerrainGenerator initializing...")

        # --- Consolidate Configuration ---
        self.settings = {
            'seed': self.user_config.get('seed', DEFAULTS.DEFAULT_SEED),
            'scale': self.user_config.get('scale', DEFAULTS.DEFAULT_SCALE),
            'octaves': self.user_config.get('octaves', DEFAULTS.DEFAULT_OCTAVES),
            'lacunarity': self.user_config.get('lacunarity', DEFAULTS.DEFAULT_LACUNARITY),
            'persistence': self.user_config.get('persistence', DEFAULTS.DEFAULT_PERSISTENCE),
        }

        unknown_keys = set(self.user_config) - set(self.settings)
        if unknown_keys:
            self.logger.warning(f"Ignoring unknown configuration keys: {sorted(unknown_keys)}")

        # --- Validate once, up front ---
        # Recoverable zeros are replaced here (with a warning); fatal values raise.
        self.params = FractalParameters(
            scale=self.settings['scale'],
            octaves=self.settings['octaves'],
            lacunarity=self.settings['lacunarity'],
            persistence=self.settings['persistence'],
            seed=self.settings['seed'],
        ).resolved(self.logger)

        self.seed = self.params.seed
        self.terrain_table = terrain_table
        self.height_mapper = percent_height
        self.terrain_lut = color_maps.create_terrain_color_lut(self.terrain_table)

        self.logger.info(
            f"TerrainGenerator initialized with seed: {self.seed:#x} "
            f"(scale={self.params.scale:g}, octaves={self.params.octaves}, "
            f"lacunarity={self.params.lacunarity:g}, persistence={self.params.persistence:g})"
        )

    def get_noise_grid(self, height: int, width: int) -> np.ndarray:
        """Builds the normalized fractal noise grid of the given size."""
        start_time = time.perf_counter()
        noise_grid = build_noise_grid(height, width, self.params, self.logger)
        self.logger.debug(f"Noise grid {height}x{width} built in {time.perf_counter() - start_time:.2f} seconds.")
        return noise_grid

    def get_height_grid(self, noise_grid: np.ndarray, mapper=None) -> np.ndarray:
        """Quantizes a normalized noise grid into integer heights."""
        return height_grid_from_noise_grid(noise_grid, mapper or self.height_mapper)

    def get_terrain_map(self, height_grid: np.ndarray) -> np.ndarray:
        """Classifies every height into a TerrainType id."""
        return self.terrain_table.classify_grid(height_grid)

    def get_terrain_color_array(self, terrain_map: np.ndarray) -> np.ndarray:
        """Converts TerrainType ids into an RGB color array."""
        return color_maps.get_terrain_color_array(terrain_map, self.terrain_lut)

    def generate(self, height: int, width: int) -> TerrainResult:
        """Runs the full pipeline for a (height, width) grid."""
        noise_grid = self.get_noise_grid(height, width)
        height_grid = self.get_height_grid(noise_grid)
        terrain_map = self.get_terrain_map(height_grid)
        color_array = self.get_terrain_color_array(terrain_map)
        return TerrainResult(noise_grid, height_grid, terrain_map, color_array)
