# generate_terrain.py

"""
================================================================================
TERRAIN PREVIEW GENERATOR SCRIPT
================================================================================
This script is a command-line tool for generating deterministic terrain
previews: grayscale noise maps at several sizes and a classified, colorized
terrain texture.

Demo runs always use the fixed demo seed so previews stay comparable between
versions. Use the terrain_generator package directly for custom seeds.

Usage:
    python generate_terrain.py --mode all --label v1
    python generate_terrain.py --config configs/default.json --mode texture
================================================================================
"""
import argparse
import json
import logging
import logging.config
import sys

from terrain_generator import config as DEFAULTS
from terrain_generator.demos import noise_map_demo, texture_demo
from terrain_generator.errors import TerrainGenerationError
from terrain_generator.generator import TerrainGenerator


def load_config(config_path: str, logger: logging.Logger) -> dict:
    """Loads the generation parameters from a JSON config file."""
    logger.info(f"Loading configuration from: {config_path}")
    with open(config_path, 'r') as f:
        config = json.load(f)
    return config.get('terrain_generation_parameters', {})


def setup_logging(log_config_path: str = None):
    if log_config_path:
        with open(log_config_path, 'r') as f:
            logging.config.dictConfig(json.load(f))
    else:
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(levelname)s - %(message)s',
            stream=sys.stdout
        )


def run(args) -> int:
    """Runs the requested demos. Returns a process exit code."""
    logger = logging.getLogger("TerrainGenerator")

    params = {}
    if args.config:
        try:
            params = load_config(args.config, logger)
        except (OSError, json.JSONDecodeError) as e:
            logger.critical(f"Failed to load or parse config file: {e}")
            return 1

    if params.get('seed', DEFAULTS.DEFAULT_SEED) != DEFAULTS.DEFAULT_SEED:
        logger.warning(f"Demo runs use the fixed seed {DEFAULTS.DEFAULT_SEED:#x}; ignoring configured seed.")
    params['seed'] = DEFAULTS.DEFAULT_SEED

    try:
        generator = TerrainGenerator(config=params, logger=logger)

        all_saved = True
        if args.mode in ("noise", "all"):
            results = noise_map_demo(generator, args.label, logger)
            all_saved = all_saved and all(ok for _, ok in results)
        if args.mode in ("texture", "all"):
            _, _, saved = texture_demo(generator, args.height, args.width, args.label, logger)
            all_saved = all_saved and saved
    except TerrainGenerationError as e:
        logger.critical(f"Generation aborted: {e}")
        return 1

    return 0 if all_saved else 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Deterministic terrain preview generator.")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a JSON configuration file with 'terrain_generation_parameters'."
    )
    parser.add_argument(
        "--mode",
        choices=["noise", "texture", "all"],
        default="all",
        help="Which previews to generate."
    )
    parser.add_argument(
        "--label",
        type=str,
        default=DEFAULTS.DEFAULT_OUTPUT_LABEL,
        help="Output label (sub-directory) for the generated images."
    )
    parser.add_argument("--height", type=int, default=DEFAULTS.DEFAULT_TEXTURE_HEIGHT,
                        help="Terrain texture height in pixels.")
    parser.add_argument("--width", type=int, default=DEFAULTS.DEFAULT_TEXTURE_WIDTH,
                        help="Terrain texture width in pixels.")
    parser.add_argument("--log-config", type=str, default=None,
                        help="Optional logging dictConfig JSON file.")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_config)
    return run(args)


# --- Command-Line Interface ---
if __name__ == "__main__":
    sys.exit(main())
