# terrain_generator/config.py

"""
================================================================================
INTERNAL DEFAULT CONFIGURATION
================================================================================
This module contains the default, fallback internal constants for the terrain
generator. These values are used if they are not explicitly provided by the
user's configuration, and as the substitutes for recoverable invalid values
(a scale, octave count or lacunarity of zero).

DO NOT MODIFY THIS FILE FOR A SPECIFIC RUN.
Instead, pass a configuration dictionary to the TerrainGenerator instance.
================================================================================
"""

# --- Noise Generation ---
# Fixed seed used by every demo. Library users pass their own through the
# configuration dictionary.
DEFAULT_SEED = 0x5EED

# The number of symbols in the permutation table. Must be a power of two so
# that lattice coordinates can be wrapped with a bit mask.
PERMUTATION_TABLE_SIZE = 256

# --- Fractal Parameters ---
# Distance (in grid cells) covered by one noise lattice unit at octave 0.
DEFAULT_SCALE = 100
DEFAULT_OCTAVES = 4
DEFAULT_LACUNARITY = 2.0
DEFAULT_PERSISTENCE = 0.5

# Per-octave sample offsets are drawn from [-OCTAVE_OFFSET_RANGE, OCTAVE_OFFSET_RANGE).
OCTAVE_OFFSET_RANGE = 1_000_000

# --- Height Mapping ---
# Normalized noise values [0, 1] are mapped onto integer heights [0, HEIGHT_SCALE].
HEIGHT_SCALE = 100

# --- Image Export ---
# Largest 8-bit channel value; gray = round(value * GRAYSCALE_MAX).
GRAYSCALE_MAX = 255

# Root directory for classified terrain textures.
TERRAIN_DEMO_DIR = "demos/terrain_demo"

# Default output label (sub-directory) for a demo run.
DEFAULT_OUTPUT_LABEL = "v1"

# Grid sizes (height, width) imaged by the noise map demo.
NOISE_DEMO_SIZES = [(256, 256), (512, 1024), (1024, 512), (1024, 1024)]

# Grid size (height, width) used by the texture demo.
DEFAULT_TEXTURE_HEIGHT = 512
DEFAULT_TEXTURE_WIDTH = 512
