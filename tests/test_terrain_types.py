"""Unit tests for terrain classification."""

import math
import unittest

import numpy as np

from terrain_generator.errors import OutOfDomainError
from terrain_generator.terrain_types import (
    TERRAIN_TABLE, TerrainBand, TerrainTable, TerrainType,
    classify, classify_grid, try_classify,
)


class TestCanonicalTable(unittest.TestCase):
    """Test coverage and contents of the five-band table."""

    def test_every_height_has_exactly_one_band(self):
        for value in range(0, 101):
            with self.subTest(value=value):
                containing = [band for band in TERRAIN_TABLE.bands if band.contains(value)]
                self.assertEqual(len(containing), 1)
                self.assertIs(classify(value), containing[0])

    def test_bands_do_not_overlap(self):
        bands = TERRAIN_TABLE.bands
        for lower, upper in zip(bands, bands[1:]):
            self.assertEqual(lower.high, upper.low)
        self.assertEqual(TERRAIN_TABLE.low, 0)
        self.assertEqual(TERRAIN_TABLE.high, 101)

    def test_boundaries(self):
        expected = {
            0: TerrainType.DEEP_OCEAN,
            34: TerrainType.DEEP_OCEAN,
            35: TerrainType.OCEAN,
            44: TerrainType.OCEAN,
            45: TerrainType.BEACH,
            49: TerrainType.BEACH,
            50: TerrainType.LOW_LAND,
            54: TerrainType.LOW_LAND,
            55: TerrainType.HIGH_LAND,
            100: TerrainType.HIGH_LAND,
        }
        for value, terrain_type in expected.items():
            with self.subTest(value=value):
                self.assertEqual(classify(value).terrain_type, terrain_type)

    def test_colors(self):
        expected = {
            TerrainType.DEEP_OCEAN: (15, 82, 186),
            TerrainType.OCEAN: (65, 105, 225),
            TerrainType.BEACH: (194, 178, 128),
            TerrainType.LOW_LAND: (19, 133, 16),
            TerrainType.HIGH_LAND: (19, 109, 21),
        }
        for terrain_type, color in expected.items():
            self.assertEqual(TERRAIN_TABLE.band_for(terrain_type).color, color)

    def test_color_lut(self):
        lut = TERRAIN_TABLE.color_lut()
        self.assertEqual(lut.shape, (5, 3))
        self.assertEqual(lut.dtype, np.uint8)
        self.assertEqual(tuple(lut[TerrainType.BEACH]), (194, 178, 128))


class TestOutOfDomain(unittest.TestCase):

    def test_try_classify_returns_error(self):
        for value in (-1, 101, 250, -0.5, math.nan):
            with self.subTest(value=value):
                result = try_classify(value)
                self.assertFalse(result.ok)
                self.assertIsNone(result.band)
                self.assertIsInstance(result.error, OutOfDomainError)

    def test_try_classify_ok(self):
        result = try_classify(47)
        self.assertTrue(result.ok)
        self.assertEqual(result.unwrap().terrain_type, TerrainType.BEACH)

    def test_classify_raises(self):
        with self.assertRaises(OutOfDomainError) as ctx:
            classify(101)
        self.assertEqual(ctx.exception.value, 101)
        self.assertIsInstance(ctx.exception, ValueError)

    def test_unwrap_raises_stored_error(self):
        result = try_classify(-3)
        with self.assertRaises(OutOfDomainError):
            result.unwrap()


class TestClassifyGrid(unittest.TestCase):

    def test_matches_scalar_classification(self):
        heights = np.arange(101, dtype=np.int32).reshape(1, 101)
        ids = classify_grid(heights)
        self.assertEqual(ids.shape, (1, 101))
        self.assertEqual(ids.dtype, np.uint8)
        for value in range(101):
            self.assertEqual(ids[0, value], int(classify(value).terrain_type))

    def test_shape_preserved(self):
        heights = np.array([[0, 40, 47], [52, 60, 100]])
        ids = classify_grid(heights)
        np.testing.assert_array_equal(ids, [[0, 1, 2], [3, 4, 4]])

    def test_out_of_domain_cell_is_fatal(self):
        heights = np.array([[0, 40], [101, 60]])
        with self.assertRaises(OutOfDomainError) as ctx:
            classify_grid(heights)
        self.assertEqual(ctx.exception.value, 101)

    def test_negative_cell_is_fatal(self):
        with self.assertRaises(OutOfDomainError):
            classify_grid(np.array([[5, -1]]))


class TestTerrainTableValidation(unittest.TestCase):

    def test_rejects_gap(self):
        with self.assertRaises(ValueError):
            TerrainTable([
                TerrainBand(TerrainType.OCEAN, 0, 40, (0, 0, 255)),
                TerrainBand(TerrainType.HIGH_LAND, 41, 101, (0, 255, 0)),
            ])

    def test_rejects_overlap(self):
        with self.assertRaises(ValueError):
            TerrainTable([
                TerrainBand(TerrainType.OCEAN, 0, 45, (0, 0, 255)),
                TerrainBand(TerrainType.HIGH_LAND, 40, 101, (0, 255, 0)),
            ])

    def test_rejects_empty_band(self):
        with self.assertRaises(ValueError):
            TerrainTable([TerrainBand(TerrainType.OCEAN, 10, 10, (0, 0, 255))])

    def test_rejects_duplicate_type(self):
        with self.assertRaises(ValueError):
            TerrainTable([
                TerrainBand(TerrainType.OCEAN, 0, 40, (0, 0, 255)),
                TerrainBand(TerrainType.OCEAN, 40, 101, (0, 0, 200)),
            ])

    def test_sorts_bands(self):
        table = TerrainTable([
            TerrainBand(TerrainType.HIGH_LAND, 0.4, 1.0, (69, 120, 20)),
            TerrainBand(TerrainType.OCEAN, -1.0, 0.4, (50, 99, 195)),
        ])
        self.assertEqual(table.low, -1.0)
        self.assertEqual(table.classify(0.39).terrain_type, TerrainType.OCEAN)
        self.assertEqual(table.classify(0.4).terrain_type, TerrainType.HIGH_LAND)


if __name__ == '__main__':
    unittest.main()
