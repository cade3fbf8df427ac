# terrain_generator/permutation.py

"""
================================================================================
SEEDED PERMUTATION TABLE
================================================================================
The permutation table is the hash basis of the gradient noise: lattice corner
coordinates are looked up through it to pick a gradient vector.

Data Contract:
---------------
- Inputs:
    - seed: An unsigned 32-bit integer.
- Outputs:
    - A PermutationTable holding a bijection on [0, 256).
- Side Effects: None. No global random state is touched.
- Invariants: The same seed always produces a byte-identical table.
================================================================================
"""
import numpy as np

from . import config as DEFAULTS
from .errors import InvalidParameterError

SEED_MAX = 2**32 - 1

# Size of the generator state buffer derived from the seed.
_STATE_BYTES = 16


def validate_seed(seed) -> int:
    """Returns the seed as a Python int, rejecting anything outside u32."""
    if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
        raise InvalidParameterError(f"Seed must be an integer, got {seed!r}.")
    seed = int(seed)
    if not 0 <= seed <= SEED_MAX:
        raise InvalidParameterError(f"Seed must lie in [0, {SEED_MAX}], got {seed}.")
    return seed


def derive_rng_state(seed: int) -> np.ndarray:
    """
    Expands a 32-bit seed into the 16-byte generator state.

    The first word is fixed to 1 so that a zero seed never yields an all-zero
    state; the remaining three words repeat the seed's little-endian bytes.
    """
    seed = validate_seed(seed)
    state = np.zeros(_STATE_BYTES, dtype=np.uint8)
    state[0] = 1
    seed_bytes = np.frombuffer(seed.to_bytes(4, "little"), dtype=np.uint8)
    for word in range(1, 4):
        state[word * 4:(word + 1) * 4] = seed_bytes
    return state


class PermutationTable:
    """An immutable, seeded shuffle of the symbols 0..255."""

    def __init__(self, values: np.ndarray):
        values = np.asarray(values, dtype=np.int64)
        size = DEFAULTS.PERMUTATION_TABLE_SIZE
        if values.shape != (size,) or not np.array_equal(np.sort(values), np.arange(size)):
            raise InvalidParameterError(
                f"A permutation table must contain each of 0..{size - 1} exactly once."
            )
        self._values = values.copy()
        self._values.flags.writeable = False
        # Doubled so that p[p[x] + y] never indexes past the end.
        self._hash_table = np.concatenate([self._values, self._values])
        self._hash_table.flags.writeable = False

    @classmethod
    def from_seed(cls, seed: int) -> "PermutationTable":
        rng = np.random.default_rng(derive_rng_state(seed).tolist())
        values = np.arange(DEFAULTS.PERMUTATION_TABLE_SIZE, dtype=np.int64)
        rng.shuffle(values)
        return cls(values)

    @property
    def values(self) -> np.ndarray:
        return self._values

    @property
    def hash_table(self) -> np.ndarray:
        return self._hash_table

    def __len__(self):
        return len(self._values)

    def __eq__(self, other):
        if not isinstance(other, PermutationTable):
            return NotImplemented
        return np.array_equal(self._values, other._values)

    def __hash__(self):
        return hash(self._values.tobytes())

    def __repr__(self):
        return f"PermutationTable({self._values[:8].tolist()}...)"
