# terrain_generator/image_export.py

"""
================================================================================
IMAGE EXPORT
================================================================================
Writes noise previews (8-bit grayscale) and terrain textures (8-bit RGB) to
PNG files with Pillow, and builds the file names used by the demos.

Data Contract:
---------------
- Inputs:
    - A normalized noise grid (height, width) or an RGB color array
      (height, width, 3), plus a target path and a logger.
- Outputs:
    - True if the image was written, False otherwise.
- Side Effects: Creates parent directories and writes one file per call.
  Failures are logged, never raised, so a batch of previews keeps going.
================================================================================
"""
import logging
import os

import numpy as np
from PIL import Image

from . import config as DEFAULTS
from .color_maps import get_noise_gray_array


def format_parameter(value: float) -> str:
    """Formats a float for use in a file name: 2.0 -> '2', 0.5 -> '0_5'."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text.replace(".", "_")


def noise_image_filename(height: int, width: int, octaves: int, lacunarity: float, persistence: float) -> str:
    return (
        f"perlin{height}x{width}-{octaves}-"
        f"{format_parameter(lacunarity)}-{format_parameter(persistence)}.png"
    )


def noise_image_path(output_label: str, height: int, width: int, octaves: int,
                     lacunarity: float, persistence: float) -> str:
    """Path of a grayscale noise preview: {output_label}/perlin{h}x{w}-{oct}-{lac}-{per}.png"""
    return os.path.join(output_label, noise_image_filename(height, width, octaves, lacunarity, persistence))


def terrain_image_path(output_label: str, height: int, width: int, octaves: int,
                       lacunarity: float, persistence: float,
                       root: str = DEFAULTS.TERRAIN_DEMO_DIR) -> str:
    """Path of a terrain texture: the noise preview path placed under `root`."""
    return os.path.join(root, noise_image_path(output_label, height, width, octaves, lacunarity, persistence))


def _save_image(img: Image.Image, path: str, logger: logging.Logger) -> bool:
    try:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        img.save(path, 'PNG')
    except (OSError, ValueError) as e:
        logger.error(f"Failed to save image to '{path}': {e}")
        return False
    logger.info(f"Saved {img.width}x{img.height} {img.mode} image to '{path}'")
    return True


def save_noise_image(noise_grid: np.ndarray, path: str, logger: logging.Logger) -> bool:
    """Saves a normalized noise grid as a single-channel grayscale PNG."""
    gray_values = get_noise_gray_array(noise_grid)
    img = Image.fromarray(gray_values)
    return _save_image(img, path, logger)


def save_terrain_image(color_array: np.ndarray, path: str, logger: logging.Logger) -> bool:
    """Saves an (height, width, 3) uint8 color array as an RGB PNG."""
    img = Image.fromarray(np.ascontiguousarray(color_array, dtype=np.uint8))
    return _save_image(img, path, logger)
