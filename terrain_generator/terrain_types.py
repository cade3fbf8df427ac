# terrain_generator/terrain_types.py

"""
================================================================================
TERRAIN CLASSIFICATION
================================================================================
This module maps heights onto terrain types. A TerrainTable is an ordered list
of half-open bands [low, high) that must tile its domain exactly.

Data Contract:
---------------
- Inputs:
    - A single height (classify, try_classify) or a height grid (classify_grid).
- Outputs:
    - The TerrainBand containing the value (type + color), or a grid of
      TerrainType ids (uint8) of the same shape as the input.
- Side Effects: None.
- Invariants:
    - Bands are sorted, non-empty, and contiguous: no gaps, no overlaps.
    - A value outside the table's domain is never silently dropped.
================================================================================
"""
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Sequence, Tuple

import numpy as np

from .errors import OutOfDomainError

Color = Tuple[int, int, int]


class TerrainType(IntEnum):
    """Every kind of terrain; the value doubles as the id in category grids."""
    DEEP_OCEAN = 0
    OCEAN = 1
    BEACH = 2
    LOW_LAND = 3
    HIGH_LAND = 4


@dataclass(frozen=True)
class TerrainBand:
    """A terrain type bound to the half-open value range [low, high)."""
    terrain_type: TerrainType
    low: float
    high: float
    color: Color

    def contains(self, value) -> bool:
        return self.low <= value < self.high


@dataclass(frozen=True)
class ClassifyResult:
    """Either the band containing `value`, or the error explaining why none does."""
    value: float
    band: Optional[TerrainBand] = None
    error: Optional[OutOfDomainError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> TerrainBand:
        if self.error is not None:
            raise self.error
        return self.band


class TerrainTable:
    """An ordered, gap-free set of terrain bands."""

    def __init__(self, bands: Sequence[TerrainBand]):
        if not bands:
            raise ValueError("A terrain table needs at least one band.")
        bands = tuple(sorted(bands, key=lambda band: band.low))
        for band in bands:
            if not band.low < band.high:
                raise ValueError(f"Band {band.terrain_type.name} is empty: [{band.low}, {band.high}).")
        for lower, upper in zip(bands, bands[1:]):
            if lower.high != upper.low:
                kind = "overlap" if lower.high > upper.low else "gap"
                raise ValueError(
                    f"Bands {lower.terrain_type.name} and {upper.terrain_type.name} {kind}: "
                    f"{lower.high} != {upper.low}."
                )
        types = [band.terrain_type for band in bands]
        if len(set(types)) != len(types):
            raise ValueError("Each terrain type may own only one band.")

        self.bands = bands
        self.low = bands[0].low
        self.high = bands[-1].high
        self._lows = np.array([band.low for band in bands], dtype=np.float64)
        self._ids = np.array([int(band.terrain_type) for band in bands], dtype=np.uint8)

    def band_for(self, terrain_type: TerrainType) -> TerrainBand:
        for band in self.bands:
            if band.terrain_type == terrain_type:
                return band
        raise KeyError(terrain_type)

    def try_classify(self, value) -> ClassifyResult:
        """Classifies a value without raising."""
        if not self.low <= value < self.high:
            return ClassifyResult(value=value, error=OutOfDomainError(value, self.low, self.high))
        index = int(np.searchsorted(self._lows, value, side="right")) - 1
        return ClassifyResult(value=value, band=self.bands[index])

    def classify(self, value) -> TerrainBand:
        """
        Returns the band whose range contains `value`.

        Raises:
            OutOfDomainError: if the value lies outside [low, high).
        """
        return self.try_classify(value).unwrap()

    def classify_grid(self, height_grid: np.ndarray) -> np.ndarray:
        """
        Classifies every cell, returning a uint8 grid of TerrainType ids.

        Raises:
            OutOfDomainError: for the first out-of-domain cell in row-major
                order. No partial grid is returned.
        """
        values = np.asarray(height_grid)
        invalid = ~((values >= self.low) & (values < self.high))
        if np.any(invalid):
            bad_index = tuple(int(i) for i in np.argwhere(invalid)[0])
            bad_value = values[bad_index].item()
            raise OutOfDomainError(bad_value, self.low, self.high)
        indices = np.searchsorted(self._lows, values, side="right") - 1
        return self._ids[indices]

    def color_lut(self) -> np.ndarray:
        """Returns a LUT where the index is the TerrainType id and the value is the RGB color."""
        lut = np.zeros((max(self._ids) + 1, 3), dtype=np.uint8)
        for band in self.bands:
            lut[int(band.terrain_type)] = band.color
        return lut


# --- Canonical table: integer heights [0, 101) ---
TERRAIN_TABLE = TerrainTable([
    TerrainBand(TerrainType.DEEP_OCEAN, 0, 35, (15, 82, 186)),
    TerrainBand(TerrainType.OCEAN, 35, 45, (65, 105, 225)),
    TerrainBand(TerrainType.BEACH, 45, 50, (194, 178, 128)),
    TerrainBand(TerrainType.LOW_LAND, 50, 55, (19, 133, 16)),
    TerrainBand(TerrainType.HIGH_LAND, 55, 101, (19, 109, 21)),
])


def try_classify(value, table: TerrainTable = TERRAIN_TABLE) -> ClassifyResult:
    return table.try_classify(value)


def classify(value, table: TerrainTable = TERRAIN_TABLE) -> TerrainBand:
    return table.classify(value)


def classify_grid(height_grid: np.ndarray, table: TerrainTable = TERRAIN_TABLE) -> np.ndarray:
    return table.classify_grid(height_grid)
