"""Unit tests for the seeded permutation table."""

import unittest

import numpy as np

from terrain_generator.errors import InvalidParameterError
from terrain_generator.permutation import PermutationTable, derive_rng_state


class TestDeriveRngState(unittest.TestCase):
    """Test the seed to generator-state expansion."""

    def test_state_layout(self):
        """The state is a leading 1 followed by the seed bytes three times."""
        state = derive_rng_state(0x5EED)
        expected = [1, 0, 0, 0] + [0xED, 0x5E, 0x00, 0x00] * 3
        self.assertEqual(state.tolist(), expected)

    def test_zero_seed_is_not_all_zero(self):
        state = derive_rng_state(0)
        self.assertEqual(state.tolist(), [1] + [0] * 15)

    def test_max_seed(self):
        state = derive_rng_state(2**32 - 1)
        self.assertEqual(state.tolist()[4:], [255] * 12)

    def test_rejects_out_of_range_seeds(self):
        for seed in (-1, 2**32, 1.5, "42", True):
            with self.subTest(seed=seed):
                with self.assertRaises(InvalidParameterError):
                    derive_rng_state(seed)


class TestPermutationTable(unittest.TestCase):
    """Test construction and invariants of PermutationTable."""

    def test_is_bijection_for_many_seeds(self):
        """Every symbol in 0..255 appears exactly once, whatever the seed."""
        for seed in (0, 1, 42, 0x5EED, 123456789, 2**32 - 1):
            with self.subTest(seed=seed):
                table = PermutationTable.from_seed(seed)
                self.assertEqual(len(table), 256)
                np.testing.assert_array_equal(np.sort(table.values), np.arange(256))

    def test_same_seed_same_table(self):
        first = PermutationTable.from_seed(0x5EED)
        second = PermutationTable.from_seed(0x5EED)
        np.testing.assert_array_equal(first.values, second.values)
        self.assertEqual(first, second)
        self.assertEqual(first.values.tobytes(), second.values.tobytes())

    def test_different_seeds_differ(self):
        first = PermutationTable.from_seed(1)
        second = PermutationTable.from_seed(2)
        self.assertNotEqual(first, second)

    def test_table_is_shuffled(self):
        table = PermutationTable.from_seed(0x5EED)
        self.assertFalse(np.array_equal(table.values, np.arange(256)))

    def test_hash_table_is_doubled(self):
        table = PermutationTable.from_seed(7)
        self.assertEqual(table.hash_table.shape, (512,))
        np.testing.assert_array_equal(table.hash_table[:256], table.values)
        np.testing.assert_array_equal(table.hash_table[256:], table.values)

    def test_values_are_read_only(self):
        table = PermutationTable.from_seed(3)
        with self.assertRaises(ValueError):
            table.values[0] = 1
        with self.assertRaises(ValueError):
            table.hash_table[0] = 1

    def test_constructor_copies_input(self):
        values = np.arange(256)
        table = PermutationTable(values)
        values[0] = 99
        self.assertEqual(table.values[0], 0)

    def test_rejects_non_bijection(self):
        values = np.arange(256)
        values[1] = 0
        with self.assertRaises(InvalidParameterError):
            PermutationTable(values)

    def test_rejects_wrong_size(self):
        with self.assertRaises(InvalidParameterError):
            PermutationTable(np.arange(128))


if __name__ == '__main__':
    unittest.main()
