# terrain_generator/demos.py

"""
Batch preview generation.

noise_map_demo images the raw fractal noise at several sizes; texture_demo
runs the whole pipeline once and saves the classified terrain texture.
A failed image write is logged and the batch moves on.
"""
import logging
import time

from tqdm import tqdm

from . import config as DEFAULTS
from .generator import TerrainGenerator
from .image_export import noise_image_path, save_noise_image, save_terrain_image, terrain_image_path


def noise_map_demo(generator: TerrainGenerator, output_label: str, logger: logging.Logger,
                   sizes=None) -> list:
    """
    Saves one grayscale noise preview per (height, width) in `sizes`.

    Returns:
        list: One (path, saved) pair per entry of `sizes`, in order. `saved`
            is False if the write failed.
    """
    sizes = sizes if sizes is not None else DEFAULTS.NOISE_DEMO_SIZES
    params = generator.params
    results = []

    start_time = time.perf_counter()
    for height, width in tqdm(sizes, desc="Imaging noise maps"):
        logger.info(f"Imaging noisemap {height}x{width}")
        noise_grid = generator.get_noise_grid(height, width)
        path = noise_image_path(
            output_label, height, width,
            params.octaves, params.lacunarity, params.persistence
        )
        results.append((path, save_noise_image(noise_grid, path, logger)))

    saved = sum(1 for _, ok in results if ok)
    logger.info(
        f"Noise map demo complete: {saved}/{len(results)} images saved "
        f"in {time.perf_counter() - start_time:.2f} seconds."
    )
    if saved < len(results):
        logger.warning(f"{len(results) - saved} noise map image(s) could not be saved.")
    return results


def texture_demo(generator: TerrainGenerator, height: int, width: int, output_label: str,
                 logger: logging.Logger, root: str = DEFAULTS.TERRAIN_DEMO_DIR):
    """
    Generates and saves one classified terrain texture.

    Returns:
        tuple: (TerrainResult, path, saved) so callers can inspect the grids.
    """
    params = generator.params
    logger.info(f"Generating {height}x{width} terrain texture...")
    result = generator.generate(height, width)

    path = terrain_image_path(
        output_label, height, width,
        params.octaves, params.lacunarity, params.persistence,
        root=root
    )
    logger.info(f"Saving terrain texture to path: {path}")
    saved = save_terrain_image(result.color_array, path, logger)
    return result, path, saved
