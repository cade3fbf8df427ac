"""Unit tests for height quantization."""

import unittest

import numpy as np

from terrain_generator.height_map import height_grid_from_noise_grid, percent_height


class TestPercentHeight(unittest.TestCase):

    def test_bounds(self):
        self.assertEqual(percent_height(0.0), 0)
        self.assertEqual(percent_height(1.0), 100)

    def test_rounds_halves_up(self):
        self.assertEqual(percent_height(0.5), 50)
        self.assertEqual(percent_height(0.125), 13)
        self.assertEqual(percent_height(0.375), 38)

    def test_rounds_to_nearest(self):
        self.assertEqual(percent_height(0.344), 34)
        self.assertEqual(percent_height(0.346), 35)


class TestHeightGrid(unittest.TestCase):
    """Test the element-wise mapping from noise to heights."""

    def setUp(self):
        self.noise_grid = np.array([
            [0.0, 0.25, 0.5],
            [0.75, 0.999, 1.0],
        ])

    def test_shape_preserved(self):
        heights = height_grid_from_noise_grid(self.noise_grid)
        self.assertEqual(heights.shape, self.noise_grid.shape)
        self.assertEqual(heights.dtype, np.int32)

    def test_cells_correspond(self):
        heights = height_grid_from_noise_grid(self.noise_grid)
        for r in range(2):
            for c in range(3):
                self.assertEqual(heights[r, c], percent_height(self.noise_grid[r, c]))
        np.testing.assert_array_equal(heights, [[0, 25, 50], [75, 100, 100]])

    def test_custom_mapper(self):
        heights = height_grid_from_noise_grid(self.noise_grid, lambda v: int(v * 4))
        np.testing.assert_array_equal(heights, [[0, 1, 2], [3, 3, 4]])

    def test_mapper_output_not_validated(self):
        heights = height_grid_from_noise_grid(self.noise_grid, lambda v: -5)
        self.assertTrue(np.all(heights == -5))

    def test_read_only(self):
        heights = height_grid_from_noise_grid(self.noise_grid)
        with self.assertRaises(ValueError):
            heights[0, 0] = 7

    def test_non_square_orientation(self):
        """Row/column order survives for tall grids."""
        tall = np.linspace(0.0, 1.0, 12).reshape(6, 2)
        heights = height_grid_from_noise_grid(tall)
        self.assertEqual(heights.shape, (6, 2))
        self.assertEqual(heights[5, 1], 100)
        self.assertEqual(heights[0, 0], 0)


if __name__ == '__main__':
    unittest.main()
